"""Resonant modal filter."""

from __future__ import annotations

import math


class Mode:
    """Two-pole resonant filter tuned by frequency and quality factor."""

    def __init__(self, sample_rate: float) -> None:
        self.sample_rate = sample_rate
        self.freq = 500.0
        self.q = 50.0
        self.clear()

    def clear(self) -> None:
        """Reset the filter state so the output returns to zero."""
        self._xnm1 = 0.0
        self._ynm1 = 0.0
        self._ynm2 = 0.0
        self._a0 = 0.0
        self._a1 = 0.0
        self._a2 = 0.0
        self._d = 0.0
        self._lfq = -1.0
        self._lq = -1.0

    def process(self, sample: float) -> float:
        """Filter one sample."""
        if self._lfq != self.freq or self._lq != self.q:
            kfreq = self.freq * 2.0 * math.pi
            alpha = self.sample_rate / kfreq
            beta = alpha * alpha
            self._d = 0.5 * alpha
            self._lq = self.q
            self._lfq = self.freq
            self._a0 = 1.0 / (beta + self._d / kfreq)
            self._a1 = self._a0 * (1.0 - 2.0 * beta)
            self._a2 = self._a0 * (beta - self._d / self.q)

        yn = self._a0 * self._xnm1 - self._a1 * self._ynm1 - self._a2 * self._ynm2
        self._xnm1 = sample
        self._ynm2 = self._ynm1
        self._ynm1 = yn
        return yn * self._d