import pytest

from signalkit.hihat import SquareNoise, linear_vca, swing_vca

_LEVELS = [0.33 * k - 1.0 for k in range(7)]


def test_zero_frequency_stays_low():
    noise = SquareNoise(48000.0)
    outputs = [noise.process(0.0) for _ in range(20)]
    assert all(out == pytest.approx(-1.0) for out in outputs)


def test_first_sample_is_low_for_quarter_rate():
    noise = SquareNoise(48000.0)
    assert noise.process(0.25) == pytest.approx(-1.0)


def test_outputs_are_quantised_levels():
    noise = SquareNoise(48000.0)
    for _ in range(500):
        out = noise.process(0.013)
        assert any(out == pytest.approx(level) for level in _LEVELS)


def test_output_varies_over_time():
    noise = SquareNoise(48000.0)
    outputs = {round(noise.process(0.02), 6) for _ in range(500)}
    assert len(outputs) > 1


def test_deterministic_between_instances():
    a = SquareNoise(48000.0)
    b = SquareNoise(44100.0)
    assert [a.process(0.01) for _ in range(200)] == [b.process(0.01) for _ in range(200)]


def test_negative_frequency_does_not_advance():
    noise = SquareNoise(48000.0)
    outputs = [noise.process(-0.1) for _ in range(10)]
    assert all(out == pytest.approx(-1.0) for out in outputs)


def test_linear_vca_scales():
    assert linear_vca(0.5, 2.0) == pytest.approx(1.0)
    assert linear_vca(-0.25, 4.0) == pytest.approx(-1.0)


def test_swing_vca_zero_input_gives_gain():
    assert swing_vca(0.0, 0.7) == pytest.approx(0.7)


def test_swing_vca_zero_gain_is_silent():
    for sample in (-5.0, -0.1, 0.0, 0.3, 10.0):
        assert swing_vca(sample, 0.0) == 0.0


def test_swing_vca_bounded_and_monotone():
    samples = [x / 10.0 for x in range(-50, 51)]
    outputs = [swing_vca(s, 1.0) for s in samples]
    assert all(0.0 < out < 2.0 for out in outputs)
    assert all(b >= a for a, b in zip(outputs, outputs[1:]))


def test_swing_vca_asymmetric():
    assert swing_vca(0.5, 1.0) - 1.0 > 1.0 - swing_vca(-0.5, 1.0)