"""Sine formant oscillator with aliasing-free phase reset."""

from __future__ import annotations

import math

from .core import TWOPI, clamp, next_blep_sample, this_blep_sample

_MAX_FREQ = 0.25


def _sine(phase: float) -> float:
    return math.sin(phase * TWOPI)


class FormantOscillator:
    """Sine wave at a formant frequency, hard-synced to a carrier."""

    def __init__(self, sample_rate: float) -> None:
        if sample_rate <= 0:
            raise ValueError("sample rate must be positive")
        self.sample_rate = sample_rate
        self._carrier_phase = 0.0
        self._formant_phase = 0.0
        self._next_sample = 0.0
        self._carrier_frequency = 0.0
        self._formant_frequency = 100.0
        self._phase_shift = 0.0
        self._ps_inc = 0.0

    @property
    def formant_freq(self) -> float:
        """Formant frequency in Hz."""
        return self._formant_frequency * self.sample_rate

    @formant_freq.setter
    def formant_freq(self, freq: float) -> None:
        self._formant_frequency = clamp(freq / self.sample_rate, -_MAX_FREQ, _MAX_FREQ)

    @property
    def carrier_freq(self) -> float:
        """Carrier (main) frequency in Hz."""
        return self._carrier_frequency * self.sample_rate

    @carrier_freq.setter
    def carrier_freq(self, freq: float) -> None:
        self._carrier_frequency = clamp(freq / self.sample_rate, -_MAX_FREQ, _MAX_FREQ)

    @property
    def phase_shift(self) -> float:
        """Phase shift of the formant, in cycles."""
        return self._phase_shift + self._ps_inc

    @phase_shift.setter
    def phase_shift(self, shift: float) -> None:
        self._ps_inc = shift - self._phase_shift

    def process(self) -> float:
        """Return the next sample."""
        this_sample = self._next_sample
        next_sample = 0.0
        self._carrier_phase += self._carrier_frequency

        if self._carrier_phase >= 1.0:
            self._carrier_phase -= 1.0
            reset_time = self._carrier_phase / self._carrier_frequency
            phase_at_reset = (
                self._formant_phase + (1.0 - reset_time) * self._formant_frequency
            )
            before = _sine(
                phase_at_reset + self._phase_shift + self._ps_inc * (1.0 - reset_time)
            )
            after = _sine(self._phase_shift + self._ps_inc)
            discontinuity = after - before
            this_sample += discontinuity * this_blep_sample(reset_time)
            next_sample += discontinuity * next_blep_sample(reset_time)
            self._formant_phase = reset_time * self._formant_frequency
        else:
            self._formant_phase += self._formant_frequency
            if self._formant_phase >= 1.0:
                self._formant_phase -= 1.0

        self._phase_shift += self._ps_inc
        self._ps_inc = 0.0

        next_sample += _sine(self._formant_phase + self._phase_shift)
        self._next_sample = next_sample
        return this_sample