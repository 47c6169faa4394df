import pytest

from signalkit.allpass import Allpass


def _impulse_response(filt, length):
    return [filt.process(1.0)] + [filt.process(0.0) for _ in range(length - 1)]


def test_impulse_energy_is_preserved():
    filt = Allpass(1024.0, 256)
    filt.rev_time = 0.1
    filt.set_loop_time(0.0625)
    response = _impulse_response(filt, 640)
    assert sum(y * y for y in response) == pytest.approx(1.0, abs=1e-9)


def test_impulse_shape():
    filt = Allpass(1024.0, 256)
    filt.rev_time = 0.1
    filt.set_loop_time(0.0625)
    response = _impulse_response(filt, 65)
    assert response[0] < 0.0
    assert response[64] > 0.0
    assert all(y == 0.0 for y in response[1:64])


def test_loop_time_is_clamped():
    filt = Allpass(1024.0, 256)
    longest = filt.loop_time
    filt.set_loop_time(0.01)
    assert filt.loop_time == 0.01
    filt.set_loop_time(10.0)
    assert filt.loop_time == longest
    filt.set_loop_time(0.0)
    assert filt.loop_time == 0.0001


def test_silence_in_silence_out():
    filt = Allpass(48000.0, 4800)
    assert all(filt.process(0.0) == 0.0 for _ in range(200))


@pytest.mark.parametrize("size", [0, -4, 5])
def test_too_small_buffer_rejected(size):
    with pytest.raises(ValueError):
        Allpass(1000.0, size)