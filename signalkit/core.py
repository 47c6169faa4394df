"""Shared helpers for the signal processing modules and a simple peak limiter."""

from __future__ import annotations

import math
import random
from collections.abc import Iterable

PI = math.pi
TWOPI = 2.0 * math.pi
HALFPI = 0.5 * math.pi
ONE_TWELFTH = 1.0 / 12.0

RAND_MAX = 2**31 - 1
RAND_FRAC = 1.0 / RAND_MAX


def clamp(value: float, low: float, high: float) -> float:
    """Limit ``value`` to the closed range [low, high]."""
    return min(max(value, low), high)


def one_pole(current: float, target: float, coeff: float) -> float:
    """Move ``current`` towards ``target`` by ``coeff`` and return the new value."""
    return current + coeff * (target - current)


def soft_limit(x: float) -> float:
    """Rational approximation of tanh used for gentle saturation."""
    return x * (27.0 + x * x) / (27.0 + 9.0 * x * x)


def this_blep_sample(t: float) -> float:
    """Band-limited step correction for the current sample."""
    return 0.5 * t * t


def next_blep_sample(t: float) -> float:
    """Band-limited step correction for the following sample."""
    t = 1.0 - t
    return -0.5 * t * t


def random_int() -> int:
    """Return a uniformly distributed integer in [0, RAND_MAX]."""
    return random.randint(0, RAND_MAX)


class Limiter:
    """Simple peak limiter that follows the signal envelope."""

    _ATTACK = 0.05
    _RELEASE = 0.00002

    def __init__(self) -> None:
        self.peak = 0.5

    def process_block(self, samples: Iterable[float], pre_gain: float) -> list[float]:
        """Limit a block of samples and return the processed block."""
        out = []
        for sample in samples:
            pre = sample * pre_gain
            error = abs(pre) - self.peak
            self.peak += (self._ATTACK if error > 0 else self._RELEASE) * error
            gain = 1.0 if self.peak <= 1.0 else 1.0 / self.peak
            out.append(soft_limit(pre * gain * 0.7))
        return out