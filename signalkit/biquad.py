"""Two-pole recursive resonant filter."""

from __future__ import annotations

import math

from .core import TWOPI


class Biquad:
    """Two-pole recursive filter with cutoff and resonance controls."""

    def __init__(self, sample_rate: float) -> None:
        self.sample_rate = sample_rate
        self._two_pi_d_sr = TWOPI / sample_rate
        self._cutoff = 500.0
        self._res = 0.7
        self._update_coefficients()
        self._xnm1 = 0.0
        self._xnm2 = 0.0
        self._ynm1 = 0.0
        self._ynm2 = 0.0

    @property
    def cutoff(self) -> float:
        """Cutoff frequency in Hz."""
        return self._cutoff

    @cutoff.setter
    def cutoff(self, cutoff: float) -> None:
        self._cutoff = cutoff
        self._update_coefficients()

    @property
    def res(self) -> float:
        """Resonance amount."""
        return self._res

    @res.setter
    def res(self, res: float) -> None:
        self._res = res
        self._update_coefficients()

    def _update_coefficients(self) -> None:
        res = self._res
        con = self._cutoff * self._two_pi_d_sr
        cos_con = math.cos(con)
        sin_con = math.sin(con)
        alpha = 1.0 - 2.0 * res * cos_con * cos_con + res * res * math.cos(2.0 * con)
        beta = 1.0 + cos_con
        gamma = 1.0 + cos_con
        m1 = alpha * gamma + beta * sin_con
        m2 = alpha * gamma - beta * sin_con
        den = math.sqrt(m1 * m1 + m2 * m2)

        self._b0 = 1.5 * (alpha * alpha + beta * beta) / den
        self._b1 = self._b0
        self._b2 = 0.0
        self._a0 = 1.0
        self._a1 = -2.0 * res * cos_con
        self._a2 = res * res

    def process(self, sample: float) -> float:
        """Filter one sample."""
        yn = (
            self._b0 * sample
            + self._b1 * self._xnm1
            + self._b2 * self._xnm2
            - self._a1 * self._ynm1
            - self._a2 * self._ynm2
        ) / self._a0
        self._xnm2 = self._xnm1
        self._xnm1 = sample
        self._ynm2 = self._ynm1
        self._ynm1 = yn
        return yn