"""Level matching of one signal to another."""

from __future__ import annotations

import math

from .core import TWOPI


class Balance:
    """Scale a signal so that its level follows a comparator signal."""

    def __init__(self, sample_rate: float) -> None:
        self.sample_rate = sample_rate
        self._prvq = 0.0
        self._prvr = 0.0
        self._prva = 0.0
        self.cutoff = 10.0

    @property
    def cutoff(self) -> float:
        """Half-power point of the internal level follower, in Hz."""
        return self._cutoff

    @cutoff.setter
    def cutoff(self, cutoff: float) -> None:
        self._cutoff = cutoff
        b = 2.0 - math.cos(cutoff * (TWOPI / self.sample_rate))
        self._c2 = b - math.sqrt(b * b - 1.0)
        self._c1 = 1.0 - self._c2

    def process(self, signal: float, comparator: float) -> float:
        """Return ``signal`` scaled towards the level of ``comparator``."""
        q = self._c1 * signal * signal + self._c2 * self._prvq
        r = self._c1 * comparator * comparator + self._c2 * self._prvr
        self._prvq = q
        self._prvr = r
        a = math.sqrt(r / q) if q != 0.0 else math.sqrt(r)
        out = signal * self._prva if a != self._prva else signal * a
        self._prva = a
        return out