"""Granular oscillator: a shaped carrier times a formant sine."""

from __future__ import annotations

import math

from .core import TWOPI, next_blep_sample, this_blep_sample

_MAX_FREQ = 0.5


def _sine(phase: float) -> float:
    return math.sin(phase * TWOPI)


def _carrier(phase: float, shape: float) -> float:
    shape *= 3.0
    integral = int(shape)
    t = 1.0 - (shape - integral)

    if integral == 0:
        phase = min(phase * (1.0 + t * t * t * 15.0), 1.0)
        phase += 0.75
    elif integral == 1:
        breakpoint = 0.001 + 0.499 * t * t * t
        if phase < breakpoint:
            phase *= 0.5 / breakpoint
        else:
            phase = 0.5 + (phase - breakpoint) * 0.5 / (1.0 - breakpoint)
        phase += 0.75
    else:
        t = 1.0 - t
        phase = min(0.25 + phase * (0.5 + t * t * t * 14.5), 0.75)
    return (_sine(phase) + 1.0) * 0.25


def _grainlet(carrier_phase: float, formant_phase: float, shape: float, bleed: float) -> float:
    carrier = _carrier(carrier_phase, shape)
    formant = _sine(formant_phase)
    return carrier * (formant + bleed) / (1.0 + bleed)


class GrainletOscillator:
    """Phase-distorted single-cycle sine times a free sine, synced to a carrier.

    ``shape`` shapes the carrier differently over 0-1/3, 1/3-2/3 and above;
    ``bleed`` sets how much of the formant leaks through.
    """

    def __init__(self, sample_rate: float) -> None:
        if sample_rate <= 0:
            raise ValueError("sample rate must be positive")
        self.sample_rate = sample_rate
        self._carrier_phase = 0.0
        self._formant_phase = 0.0
        self._next_sample = 0.0
        self._carrier_shape = 0.0
        self._carrier_bleed = 0.0
        self.freq = 440.0
        self.formant_freq = 220.0
        self.shape = 0.5
        self.bleed = 0.5

    @property
    def freq(self) -> float:
        """Carrier frequency in Hz."""
        return self._carrier_frequency * self.sample_rate

    @freq.setter
    def freq(self, freq: float) -> None:
        self._carrier_frequency = min(freq / self.sample_rate, _MAX_FREQ)

    @property
    def formant_freq(self) -> float:
        """Formant frequency in Hz."""
        return self._formant_frequency * self.sample_rate

    @formant_freq.setter
    def formant_freq(self, freq: float) -> None:
        self._formant_frequency = min(freq / self.sample_rate, _MAX_FREQ)

    def process(self) -> float:
        """Return the next sample."""
        this_sample = self._next_sample
        next_sample = 0.0
        shape = self.shape
        bleed = self.bleed

        self._carrier_phase += self._carrier_frequency
        if self._carrier_phase >= 1.0:
            self._carrier_phase -= 1.0
            reset_time = self._carrier_phase / self._carrier_frequency
            shape_inc = shape - self._carrier_shape
            bleed_inc = bleed - self._carrier_bleed
            before = _grainlet(
                1.0,
                self._formant_phase + (1.0 - reset_time) * self._formant_frequency,
                shape + shape_inc * (1.0 - reset_time),
                bleed + bleed_inc * (1.0 - reset_time),
            )
            after = _grainlet(0.0, 0.0, shape, bleed)
            discontinuity = after - before
            this_sample += discontinuity * this_blep_sample(reset_time)
            next_sample += discontinuity * next_blep_sample(reset_time)
            self._formant_phase = reset_time * self._formant_frequency
        else:
            self._formant_phase += self._formant_frequency
            if self._formant_phase >= 1.0:
                self._formant_phase -= 1.0

        self._carrier_bleed = bleed
        self._carrier_shape = shape
        next_sample += _grainlet(
            self._carrier_phase, self._formant_phase, shape, bleed
        )
        self._next_sample = next_sample
        return this_sample