import pytest

from signalkit.dcblock import DcBlock


def test_first_sample_passes_through():
    block = DcBlock(48000)
    assert block.process(0.75) == pytest.approx(0.75)


def test_constant_input_decays_to_zero():
    block = DcBlock(48000)
    outputs = [block.process(1.0) for _ in range(2000)]
    assert abs(outputs[-1]) < 1e-3
    assert all(a >= b for a, b in zip(outputs, outputs[1:]))


def test_zero_input_gives_zero():
    block = DcBlock(48000)
    assert all(block.process(0.0) == 0.0 for _ in range(10))