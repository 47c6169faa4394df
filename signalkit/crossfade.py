"""Crossfading between two signals with a selectable curve."""

from __future__ import annotations

import math
from enum import IntEnum

from .core import HALFPI

_SMALL = 0.000001
_LOG_MIN = math.log(_SMALL)
_LOG_MAX = math.log(1.0)


class CrossFadeCurve(IntEnum):
    """Curve applied to the crossfade."""

    LIN = 0
    CPOW = 1
    LOG = 2
    EXP = 3


class CrossFade:
    """Mix two signals according to a position between 0 and 1."""

    def __init__(self, curve: int = CrossFadeCurve.LIN) -> None:
        self.pos = 0.5
        try:
            self.curve = CrossFadeCurve(curve)
        except ValueError:
            self.curve = CrossFadeCurve.LIN

    def process(self, in1: float, in2: float) -> float:
        """Return the mix of ``in1`` and ``in2`` at the current position."""
        pos = self.pos
        if self.curve is CrossFadeCurve.LIN:
            scalar = pos
        elif self.curve is CrossFadeCurve.CPOW:
            return in1 * math.sin((1.0 - pos) * HALFPI) + in2 * math.sin(pos * HALFPI)
        elif self.curve is CrossFadeCurve.LOG:
            scalar = math.exp(pos * (_LOG_MAX - _LOG_MIN) + _LOG_MIN)
        else:
            scalar = pos * pos
        return in1 * (1.0 - scalar) + in2 * scalar