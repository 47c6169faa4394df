"""Triggerable attack/decay envelope."""

from __future__ import annotations

import math
from enum import IntEnum


class AdEnvSegment(IntEnum):
    """Stages of the attack/decay envelope."""

    IDLE = 0
    ATTACK = 1
    DECAY = 2


def _fast_exp(x: float) -> float:
    x = 1.0 + x / 1024.0
    for _ in range(10):
        x *= x
    return x


class AdEnv:
    """Attack/decay envelope with adjustable range, curve and segment times."""

    def __init__(self, sample_rate: float) -> None:
        self.sample_rate = sample_rate
        self.curve = 0.0
        self.minimum = 0.0
        self.maximum = 1.0
        self._times = {segment: 0.05 for segment in AdEnvSegment}
        self._segment = AdEnvSegment.IDLE
        self._prev_segment = AdEnvSegment.IDLE
        self._output = 0.0001
        self._curve_x = 0.0
        self._retrig_val = 0.0
        self._triggered = False

    def trigger(self) -> None:
        """Start or retrigger the envelope on the next sample."""
        self._triggered = True

    def set_time(self, segment: int, time: float) -> None:
        """Set the length in seconds of one segment."""
        self._times[AdEnvSegment(segment)] = time

    @property
    def value(self) -> float:
        """Current output without advancing the envelope."""
        return self._output * (self.maximum - self.minimum) + self.minimum

    @property
    def segment(self) -> AdEnvSegment:
        """Segment the envelope is in."""
        return self._segment

    @property
    def running(self) -> bool:
        """True unless the envelope is idle."""
        return self._segment is not AdEnvSegment.IDLE

    def process(self) -> float:
        """Advance one sample and return the envelope value."""
        if self._triggered:
            self._triggered = False
            self._segment = AdEnvSegment.ATTACK
            self._curve_x = 0.0
            self._retrig_val = self._output

        segment = self._segment
        time_samps = max(int(self._times[segment] * self.sample_rate), 1)

        if segment is AdEnvSegment.ATTACK:
            beg, end = self._retrig_val, 1.0
        elif segment is AdEnvSegment.DECAY:
            beg, end = 1.0, 0.0
        else:
            beg, end = 0.0, 0.0

        if self._prev_segment != segment:
            self._curve_x = 0.0

        linear = self.curve == 0.0 or _fast_exp(self.curve) == 1.0
        if linear:
            inc = (end - beg) / time_samps
        else:
            inc = (end - beg) / (1.0 - _fast_exp(self.curve))

        val = self._output
        out = val
        if linear:
            val += inc
        else:
            self._curve_x += self.curve / time_samps
            val = beg + inc * (1.0 - _fast_exp(self._curve_x))
            if math.isnan(val):
                val = 0.0

        self._prev_segment = segment
        if (out >= 1.0 and segment is AdEnvSegment.ATTACK) or (
            out <= 0.0 and segment is AdEnvSegment.DECAY
        ):
            self._segment = (
                AdEnvSegment.DECAY
                if segment is AdEnvSegment.ATTACK
                else AdEnvSegment.IDLE
            )
        if self._segment is AdEnvSegment.IDLE:
            val = out = 0.0
        self._output = val

        return out * (self.maximum - self.minimum) + self.minimum