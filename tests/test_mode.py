import math

from signalkit.mode import Mode


def _impulse_response(mode, n):
    return [mode.process(1.0 if i == 0 else 0.0) for i in range(n)]


def test_first_output_is_zero_and_impulse_rings():
    mode = Mode(48000.0)
    out = _impulse_response(mode, 100)
    assert out[0] == 0.0
    assert out[1] != 0.0
    assert max(abs(x) for x in out) > 0.0


def test_ringing_decays():
    mode = Mode(48000.0)
    out = _impulse_response(mode, 20000)
    early = sum(abs(x) for x in out[:1000])
    late = sum(abs(x) for x in out[-1000:])
    assert late < early * 0.1


def test_clear_restores_initial_behaviour():
    mode = Mode(48000.0)
    first = _impulse_response(mode, 300)
    mode.clear()
    second = _impulse_response(mode, 300)
    assert first == second


def test_higher_q_rings_longer():
    low = Mode(48000.0)
    low.q = 20.0
    high = Mode(48000.0)
    high.q = 400.0
    low_out = _impulse_response(low, 5000)
    high_out = _impulse_response(high, 5000)
    assert sum(abs(x) for x in high_out[-1000:]) > sum(abs(x) for x in low_out[-1000:])


def test_silence_gives_silence():
    mode = Mode(44100.0)
    mode.freq = 1000.0
    assert all(mode.process(0.0) == 0.0 for _ in range(100))
    assert all(math.isfinite(x) for x in _impulse_response(mode, 100))