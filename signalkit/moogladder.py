"""Four-stage ladder low-pass filter."""

from __future__ import annotations

import math

_THERMAL = 0.000025


def _tanh(x: float) -> float:
    if x < 0.0:
        return x
    if x >= 4.0:
        return 1.0
    if x < 0.5:
        return x
    return math.tanh(x)


class MoogLadder:
    """Resonant ladder low-pass filter."""

    def __init__(self, sample_rate: float) -> None:
        self.sample_rate = sample_rate
        self.res = 0.4
        self.freq = 1000.0
        self._delay = [0.0] * 6
        self._tanhstg = [0.0] * 3
        self._old_freq = 0.0
        self._old_res = -1.0
        self._old_acr = 0.0
        self._old_tune = 0.0

    def process(self, sample: float) -> float:
        """Filter one sample."""
        freq = self.freq
        res = max(self.res, 0.0)

        if self._old_freq != freq or self._old_res != res:
            self._old_freq = freq
            fc = freq / self.sample_rate
            f = 0.5 * fc
            fc2 = fc * fc
            fc3 = fc2 * fc2
            fcr = 1.8730 * fc3 + 0.4955 * fc2 - 0.6490 * fc + 0.9988
            acr = -3.9364 * fc2 + 1.8409 * fc + 0.9968
            tune = (1.0 - math.exp(-(2.0 * math.pi * f * fcr))) / _THERMAL
            self._old_res = res
            self._old_acr = acr
            self._old_tune = tune
        else:
            res = self._old_res
            acr = self._old_acr
            tune = self._old_tune

        res4 = 4.0 * res * acr
        delay = self._delay
        tanhstg = self._tanhstg
        stg = [0.0] * 4
        value = sample

        for _ in range(2):
            value -= res4 * delay[5]
            stg[0] = delay[0] + tune * (_tanh(value * _THERMAL) - tanhstg[0])
            delay[0] = stg[0]
            for k in range(1, 4):
                value = stg[k - 1]
                tanhstg[k - 1] = _tanh(value * _THERMAL)
                previous = tanhstg[k] if k != 3 else _tanh(delay[k] * _THERMAL)
                stg[k] = delay[k] + tune * (tanhstg[k - 1] - previous)
                delay[k] = stg[k]
            delay[5] = (stg[3] + delay[4]) * 0.5
            delay[4] = stg[3]
        return delay[5]