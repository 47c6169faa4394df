"""Randomly segmented line generator."""

from __future__ import annotations

from .core import random_int

_MAXLEN = 0x1000000
_PHMASK = 0x0FFFFFF
_SCALE = 4.656612875245796924105750827168e-10


def _rand_gab() -> float:
    return ((random_int() >> 1) & 0x7FFFFFFF) * _SCALE


def _bi_rand_gab() -> float:
    return (random_int() & 0x7FFFFFFF) * _SCALE


class Jitter:
    """Piecewise-linear random signal with a randomly varying segment rate."""

    def __init__(self, sample_rate: float) -> None:
        self.sample_rate = sample_rate
        self._amp = 0.5
        self._cps_min = 0.5
        self._cps_max = 4.0
        self._cps = 0.0
        self._num1 = 0.0
        self._num2 = 0.0
        self._dfd_max = 0.0
        self._reset()

    @property
    def amp(self) -> float:
        """Amplitude of the jitter."""
        return self._amp

    @amp.setter
    def amp(self, amp: float) -> None:
        self._amp = amp
        self._reset()

    @property
    def cps_min(self) -> float:
        """Minimum number of new segments per second."""
        return self._cps_min

    @cps_min.setter
    def cps_min(self, cps_min: float) -> None:
        self._cps_min = cps_min
        self._reset()

    @property
    def cps_max(self) -> float:
        """Maximum number of new segments per second."""
        return self._cps_max

    @cps_max.setter
    def cps_max(self, cps_max: float) -> None:
        self._cps_max = cps_max
        self._reset()

    def _reset(self) -> None:
        self._num2 = _bi_rand_gab()
        self._init = True
        self._phase = 0

    def _new_segment(self) -> None:
        self._cps = _rand_gab() * (self._cps_max - self._cps_min) + self._cps_min
        self._phase &= _PHMASK
        self._num1 = self._num2
        self._num2 = _bi_rand_gab()
        self._dfd_max = (self._num2 - self._num1) / _MAXLEN

    def process(self) -> float:
        """Return the next jitter sample."""
        if self._init:
            self._init = False
            out = self._num2 * self._amp
            self._new_segment()
            return out

        out = (self._num1 + self._phase * self._dfd_max) * self._amp
        self._phase += int(self._cps * (_MAXLEN / self.sample_rate))
        if self._phase >= _MAXLEN:
            self._new_segment()
        return out