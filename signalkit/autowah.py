"""Envelope-following wah filter."""

from __future__ import annotations

import math


class Autowah:
    """Wah filter whose sweep follows the level of the input."""

    def __init__(self, sample_rate: float) -> None:
        self.sample_rate = sample_rate
        self._const1 = 1413.72 / sample_rate
        self._const2 = math.exp(-100.0 / sample_rate)
        self._const4 = math.exp(-10.0 / sample_rate)

        self.wet_dry = 100.0
        self.level = 0.1
        self.wah = 0.0

        self._rec0 = [0.0, 0.0, 0.0]
        self._rec1 = [0.0, 0.0]
        self._rec2 = [0.0, 0.0]
        self._rec3 = [0.0, 0.0]
        self._rec4 = [0.0, 0.0]
        self._rec5 = [0.0, 0.0]

    def process(self, sample: float) -> float:
        """Filter one sample."""
        rec0, rec1, rec2 = self._rec0, self._rec1, self._rec2
        rec3, rec4, rec5 = self._rec3, self._rec4, self._rec5
        const1, const2, const4 = self._const1, self._const2, self._const4

        slow2 = 0.01 * (self.wet_dry * self.level)
        slow3 = (1.0 - 0.01 * self.wet_dry) + (1.0 - self.wah)

        magnitude = abs(sample)
        rec3[0] = max(magnitude, const4 * rec3[1] + (1.0 - const4) * magnitude)
        rec2[0] = const2 * rec2[1] + (1.0 - const2) * rec3[0]
        envelope = min(1.0, rec2[0])
        sweep = 2.0 ** (2.3 * envelope)
        damping = 1.0 - const1 * sweep / 2.0 ** (1.0 + 2.0 * (1.0 - envelope))
        rec1[0] = 0.999 * rec1[1] + 0.001 * (
            -2.0 * damping * math.cos(const1 * 2.0 * sweep)
        )
        rec4[0] = 0.999 * rec4[1] + 0.001 * damping * damping
        rec5[0] = 0.999 * rec5[1] + 0.0001 * 4.0**envelope
        rec0[0] = -((rec1[0] * rec0[1] + rec4[0] * rec0[2]) - slow2 * rec5[0] * sample)

        out = self.wah * (rec0[0] - rec0[1]) + slow3 * sample

        rec3[1] = rec3[0]
        rec2[1] = rec2[0]
        rec1[1] = rec1[0]
        rec4[1] = rec4[0]
        rec5[1] = rec5[0]
        rec0[2] = rec0[1]
        rec0[1] = rec0[0]
        return out