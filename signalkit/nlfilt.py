"""Dobson/Fitch non-linear filter."""

from __future__ import annotations

import math
from collections.abc import Iterable

_MAX_DELAY = 1024
_MAXAMP = 1.935125
_DVMAXAMP = 1.0 / _MAXAMP
_MAXAMP_HALF = _MAXAMP * 0.5


class NlFilt:
    """Non-linear filter: y[n] = tanh(a y[n-1] + b y[n-2] + d y[n-L]^2 + x[n] - C)."""

    def __init__(self) -> None:
        self.a = 0.0
        self.b = 0.0
        self.d = 0.0
        self.c = 0.0
        self.length = 1.0
        self._delay = [0.0] * _MAX_DELAY
        self._point = 0

    def set_coefficients(
        self, a: float, b: float, d: float, c: float, length: float
    ) -> None:
        """Set all five filter coefficients at once."""
        self.a = a
        self.b = b
        self.d = d
        self.c = c
        self.length = length

    def process_block(self, samples: Iterable[float]) -> list[float]:
        """Filter a block of samples and return the filtered block."""
        a, b, d, c = self.a, self.b, self.d, self.c
        buf = self._delay
        length = min(max(self.length, 1.0), float(_MAX_DELAY))

        point = self._point
        nml = (point - int(length) - 1) % _MAX_DELAY
        ynm1 = buf[point % _MAX_DELAY]
        ynm2 = buf[(point - 1) % _MAX_DELAY]
        ynml = buf[nml]

        out = []
        for sample in samples:
            yn = a * ynm1 + b * ynm2 + d * ynml * ynml - c
            yn += sample * _DVMAXAMP
            value = yn * _MAXAMP_HALF
            if value > _MAXAMP:
                value = _MAXAMP_HALF
            elif value < -_MAXAMP:
                value = -_MAXAMP_HALF
            out.append(value)

            point = (point + 1) % _MAX_DELAY
            yn = math.tanh(yn)
            buf[point] = yn
            nml = (nml + 1) % _MAX_DELAY
            ynm2 = ynm1
            ynm1 = yn
            ynml = buf[nml]

        self._point = point
        return out