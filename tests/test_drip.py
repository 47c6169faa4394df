import math
import random

import pytest

from signalkit.drip import Drip


def _run(drip, count):
    return [drip.process() for _ in range(count)]


def test_same_seed_gives_same_output():
    random.seed(7)
    a = _run(Drip(8000, 0.5), 500)
    random.seed(7)
    b = _run(Drip(8000, 0.5), 500)
    assert a == b


def test_output_is_finite_and_not_silent():
    random.seed(3)
    out = _run(Drip(8000, 0.5), 2000)
    assert all(math.isfinite(x) for x in out)
    assert max(abs(x) for x in out) > 0.0


def test_trigger_restarts_the_model():
    drip = Drip(8000, 0.5)
    random.seed(11)
    first = _run(drip, 300)
    _run(drip, 100)
    random.seed(11)
    again = [drip.process(True)] + _run(drip, 299)
    assert again == pytest.approx(first)


def test_sound_dies_away_after_dettack():
    random.seed(5)
    out = _run(Drip(4000, 0.25), 12000)
    peak = max(abs(x) for x in out)
    tail = max(abs(x) for x in out[-1000:])
    assert peak > 0.0
    assert tail < peak * 0.1


def test_dettack_is_kept():
    assert Drip(8000, 0.5).dettack == 0.5


def test_invalid_sample_rate_raises():
    with pytest.raises(ValueError):
        Drip(0, 0.5)