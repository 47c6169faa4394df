"""Band-limited triangle, saw and square oscillator."""

from __future__ import annotations

import math
from enum import IntEnum

_DELAY_SIZE = 4096
_DELAY_MASK = _DELAY_SIZE - 1
_MAX_DELAY = 2047.0


class Waveform(IntEnum):
    """Waveforms produced by :class:`BlOsc`."""

    TRIANGLE = 0
    SAW = 1
    SQUARE = 2
    OFF = 3


class BlOsc:
    """Band-limited oscillator built from differentiated parabolic waves.

    Defaults to 440 Hz, amplitude 0.5, pulse width 0.5 and a triangle wave.
    """

    def __init__(self, sample_rate: float) -> None:
        if sample_rate <= 0:
            raise ValueError("sample rate must be positive")
        self.sample_rate = sample_rate
        self._half_sr = 0.5 * sample_rate
        self._quarter_sr = 0.25 * sample_rate
        self._sec_per_sample = 1.0 / sample_rate
        self._two_over_sr = 2.0 / sample_rate
        self._four_over_sr = 4.0 / sample_rate

        self.freq = 440.0
        self.amp = 0.5
        self._pw = 0.5
        self._waveform = Waveform.TRIANGLE
        self.reset()

    @property
    def pw(self) -> float:
        """Pulse width of the square wave, 0 to 1."""
        return 1.0 - self._pw

    @pw.setter
    def pw(self, pw: float) -> None:
        self._pw = 1.0 - pw

    @property
    def waveform(self) -> Waveform:
        """Waveform being produced."""
        return self._waveform

    @waveform.setter
    def waveform(self, waveform: int) -> None:
        self._waveform = Waveform(waveform)

    def reset(self) -> None:
        """Reset the phase and clear the internal state."""
        self._iota = 0
        self._rec0 = [0.0, 0.0]
        self._rec1 = [0.0, 0.0]
        self._vec0 = [0.0, 0.0]
        self._vec1 = [0.0, 0.0]
        self._vec2 = [0.0] * _DELAY_SIZE

    def process(self) -> float:
        """Return the next sample."""
        if self._waveform is Waveform.TRIANGLE:
            return self._process_triangle()
        if self._waveform is Waveform.SAW:
            return self._process_saw()
        if self._waveform is Waveform.SQUARE:
            return self._process_square()
        return 0.0

    def _process_square(self) -> float:
        rec0, vec1, vec2 = self._rec0, self._vec1, self._vec2
        iota = self._iota
        delay = min(_MAX_DELAY, self.sample_rate * (self._pw / self.freq))
        whole = int(delay)
        frac_a = (whole + 1) - delay
        frac_b = delay - whole
        scale = self._quarter_sr / self.freq
        inc = self._sec_per_sample * self.freq

        rec0[0] = math.fmod(rec0[1] + inc, 1.0)
        parabola = (2.0 * rec0[0] - 1.0) ** 2
        vec1[0] = parabola
        diff = scale * (parabola - vec1[1])
        vec2[iota & _DELAY_MASK] = diff

        delayed = (
            frac_a * vec2[(iota - whole) & _DELAY_MASK]
            + frac_b * vec2[(iota - (whole + 1)) & _DELAY_MASK]
        )
        out = self.amp * -(delayed - diff)

        rec0[1] = rec0[0]
        vec1[1] = vec1[0]
        self._iota = iota + 1
        return out

    def _process_triangle(self) -> float:
        rec0, rec1, vec1, vec2 = self._rec0, self._rec1, self._vec1, self._vec2
        iota = self._iota
        gain = self._four_over_sr * (self.amp * self.freq)
        delay = self._half_sr / self.freq
        whole = int(delay)
        next_whole = whole + 1
        frac_a = next_whole - delay
        frac_b = delay - whole
        scale = self._quarter_sr / self.freq
        inc = self._sec_per_sample * self.freq

        rec1[0] = math.fmod(inc + rec1[1], 1.0)
        parabola = (2.0 * rec1[0] - 1.0) ** 2
        vec1[0] = parabola
        diff = scale * (parabola - vec1[1])
        vec2[iota & _DELAY_MASK] = diff
        delayed = (
            frac_a * vec2[(iota - whole) & _DELAY_MASK]
            + frac_b * vec2[(iota - next_whole) & _DELAY_MASK]
        )
        rec0[0] = -(delayed - (0.999 * rec0[1] + diff))

        out = gain * rec0[0]
        rec1[1] = rec1[0]
        rec0[1] = rec0[0]
        vec1[1] = vec1[0]
        self._iota = iota + 1
        return out

    def _process_saw(self) -> float:
        rec0, vec0, vec1 = self._rec0, self._vec0, self._vec1
        gain = self.sample_rate * (self.amp / self.freq)
        slope = self._two_over_sr * self.freq
        period = self.sample_rate / self.freq

        rec0[0] = math.fmod(1.0 + rec0[1], period)
        parabola = (slope * rec0[0] - 1.0) ** 2
        vec0[0] = parabola
        vec1[0] = 0.25
        out = gain * ((parabola - vec0[1]) * vec1[1])

        rec0[1] = rec0[0]
        vec0[1] = vec0[0]
        vec1[1] = vec1[0]
        return out