import math

from signalkit.autowah import Autowah


def _sine(n, freq=220.0, sr=48000.0, amp=0.8):
    return [amp * math.sin(2 * math.pi * freq * i / sr) for i in range(n)]


def test_default_settings_pass_input_through():
    wah = Autowah(48000.0)
    signal = _sine(500)
    assert [wah.process(s) for s in signal] == signal


def test_silence_stays_silent_with_full_wah():
    wah = Autowah(48000.0)
    wah.wah = 1.0
    assert all(wah.process(0.0) == 0.0 for _ in range(200))


def test_full_wah_changes_the_signal():
    wah = Autowah(48000.0)
    wah.wah = 1.0
    wah.level = 1.0
    signal = _sine(2000)
    out = [wah.process(s) for s in signal]
    assert any(abs(o - s) > 1e-6 for o, s in zip(out, signal))


def test_output_is_deterministic_and_finite():
    first = Autowah(44100.0)
    second = Autowah(44100.0)
    for w in (first, second):
        w.wah = 0.7
        w.level = 0.5
        w.wet_dry = 80.0
    signal = _sine(3000, sr=44100.0)
    a = [first.process(s) for s in signal]
    b = [second.process(s) for s in signal]
    assert a == b
    assert all(math.isfinite(x) for x in a)