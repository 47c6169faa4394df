"""Feedback comb filter."""

from __future__ import annotations

import math

_LOG001 = -6.9078
_MIN_EXP_ARG = -36.8413615


class Comb:
    """Comb filter with a decaying feedback loop."""

    def __init__(self, sample_rate: float, size: int) -> None:
        if size <= 0:
            raise ValueError("buffer size must be positive")
        self.sample_rate = sample_rate
        self.rev_time = 3.5
        self._size = size
        self._max_loop_time = size / sample_rate - 0.01
        if self._max_loop_time <= 0.0:
            raise ValueError("buffer is too short for this sample rate")
        self._loop_time = self._max_loop_time
        self._mod = int(sample_rate * self._loop_time)
        self._buffer = [0.0] * size
        self._prvt = 0.0
        self._coef = 0.0
        self._pos = 0

    @property
    def loop_time(self) -> float:
        """Current loop time in seconds."""
        return self._loop_time

    def set_period(self, loop_time: float) -> None:
        """Set the comb period in seconds; non-positive values are ignored."""
        if loop_time > 0:
            self._loop_time = min(loop_time, self._max_loop_time)
            self._mod = int(self._loop_time * self.sample_rate)
            if self._mod > self._size:
                self._mod = self._size - 1

    def set_freq(self, freq: float) -> None:
        """Set the comb frequency in Hz; non-positive values are ignored."""
        if freq > 0:
            self.set_period(1.0 / freq)

    def process(self, sample: float) -> float:
        """Filter one sample."""
        if self._prvt != self.rev_time:
            self._prvt = self.rev_time
            if self._prvt == 0.0:
                self._coef = 0.0
            else:
                exp_arg = _LOG001 * self._loop_time / self._prvt
                self._coef = 0.0 if exp_arg < _MIN_EXP_ARG else math.exp(exp_arg)

        out = self._buffer[(self._pos + self._mod) % self._size]
        self._buffer[self._pos] = out * self._coef + sample
        self._pos = (self._pos - 1) % self._size
        return out