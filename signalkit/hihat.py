"""Metallic noise source and amplifier curves for 808-style hi-hats."""

from __future__ import annotations

_RATIOS = (1.0, 1.304, 1.466, 1.787, 1.932, 2.536)
_MAX_FREQ = 0.499
_PHASE_SCALE = 4294967296.0
_PHASE_MASK = 0xFFFFFFFF


class SquareNoise:
    """Six detuned square oscillators summed into metallic noise.

    The ratios between the oscillators follow the classic 808 hi-hat,
    with a nominal root of 414 Hz.
    """

    def __init__(self, sample_rate: float) -> None:
        self.sample_rate = sample_rate
        self._phases = [0] * len(_RATIOS)

    def process(self, f0: float) -> float:
        """Return the next sample for a root frequency ``f0`` in cycles per sample."""
        noise = 0
        phases = []
        for ratio, phase in zip(_RATIOS, self._phases):
            f = min(f0 * ratio, _MAX_FREQ)
            increment = max(int(f * _PHASE_SCALE), 0)
            phase = (phase + increment) & _PHASE_MASK
            noise += phase >> 31
            phases.append(phase)
        self._phases = phases
        return 0.33 * noise - 1.0


def swing_vca(sample: float, gain: float) -> float:
    """Asymmetric saturating amplifier."""
    sample *= 10.0 if sample > 0.0 else 0.1
    sample = sample / (1.0 + abs(sample))
    return (sample + 1.0) * gain


def linear_vca(sample: float, gain: float) -> float:
    """Plain linear amplifier."""
    return sample * gain