import random

import pytest

from signalkit.jitter import Jitter


def test_output_stays_within_amplitude():
    random.seed(1)
    jitter = Jitter(1000.0)
    jitter.amp = 2.0
    jitter.cps_max = 50.0
    out = [jitter.process() for _ in range(5000)]
    assert all(0.0 <= x <= 2.0 for x in out)
    assert max(out) - min(out) > 0.0


def test_same_seed_gives_same_sequence():
    random.seed(42)
    a = Jitter(48000.0)
    first = [a.process() for _ in range(1000)]
    random.seed(42)
    b = Jitter(48000.0)
    second = [b.process() for _ in range(1000)]
    assert first == second


def test_amplitude_scales_output():
    random.seed(7)
    a = Jitter(8000.0)
    a.amp = 1.0
    base = [a.process() for _ in range(500)]
    random.seed(7)
    b = Jitter(8000.0)
    b.amp = 3.0
    scaled = [b.process() for _ in range(500)]
    assert scaled == pytest.approx([3.0 * x for x in base])


def test_zero_amplitude_is_silent():
    jitter = Jitter(48000.0)
    jitter.amp = 0.0
    assert all(jitter.process() == 0.0 for _ in range(200))


def test_settings_are_readable():
    jitter = Jitter(48000.0)
    jitter.cps_min = 1.5
    jitter.cps_max = 9.0
    assert (jitter.cps_min, jitter.cps_max, jitter.amp) == (1.5, 9.0, 0.5)