"""Bit depth reduction combined with sample-rate reduction."""

from __future__ import annotations

import math

from .fold import Fold


class Bitcrush:
    """Crush bit depth and downsample the input."""

    def __init__(self, sample_rate: float) -> None:
        self.sample_rate = sample_rate
        self.bit_depth = 8
        self.crush_rate = 10000.0
        self._fold = Fold()

    def process(self, sample: float) -> float:
        """Bit crush and downsample one sample."""
        bits = 2.0**self.bit_depth
        fold_amount = self.sample_rate / self.crush_rate
        out = sample * 65536.0 + 32768.0
        out *= bits / 65536.0
        out = math.floor(out)
        out *= (65536.0 / bits) - 32768.0
        self._fold.increment = fold_amount
        out = self._fold.process(out)
        return out / 65536.0