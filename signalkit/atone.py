"""First-order recursive high-pass filter."""

from __future__ import annotations

import math

from .core import TWOPI


class ATone:
    """High-pass filter with variable cutoff."""

    def __init__(self, sample_rate: float) -> None:
        self.sample_rate = sample_rate
        self._prevout = 0.0
        self._freq = 1000.0
        self._c2 = 0.5

    @property
    def freq(self) -> float:
        """Cutoff frequency in Hz."""
        return self._freq

    @freq.setter
    def freq(self, freq: float) -> None:
        self._freq = freq
        b = 2.0 - math.cos(TWOPI * freq / self.sample_rate)
        self._c2 = b - math.sqrt(b * b - 1.0)

    def process(self, sample: float) -> float:
        """Filter one sample."""
        out = self._c2 * (self._prevout + sample)
        self._prevout = out - sample
        return out