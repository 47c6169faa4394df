"""Allpass delay filter."""

from __future__ import annotations

import math

_LOG001 = -6.9078


class Allpass:
    """Pass all frequencies at equal level with a phase shift."""

    def __init__(self, sample_rate: float, size: int) -> None:
        if size <= 0:
            raise ValueError("buffer size must be positive")
        self.sample_rate = sample_rate
        self.rev_time = 3.5
        self._max_loop_time = size / sample_rate - 0.01
        self._loop_time = self._max_loop_time
        self._mod = int(self._loop_time * sample_rate)
        if self._mod < 1:
            raise ValueError("buffer is too short for this sample rate")
        self._buffer = [0.0] * size
        self._prvt = 0.0
        self._coef = 0.0
        self._pos = 0

    @property
    def loop_time(self) -> float:
        """Current loop time in seconds."""
        return self._loop_time

    def set_loop_time(self, loop_time: float) -> None:
        """Set the loop (delay) time in seconds, within the buffer's limits."""
        self._loop_time = max(min(loop_time, self._max_loop_time), 0.0001)
        self._mod = max(int(self._loop_time * self.sample_rate), 1)

    def process(self, sample: float) -> float:
        """Filter one sample."""
        if self._prvt != self.rev_time:
            self._prvt = self.rev_time
            if self._prvt == 0.0:
                self._coef = 0.0
            else:
                self._coef = math.exp(_LOG001 * self._loop_time / self._prvt)

        y = self._buffer[self._pos]
        z = self._coef * y + sample
        self._buffer[self._pos] = z
        out = y - self._coef * z

        self._pos = (self._pos + 1) % self._mod
        return out