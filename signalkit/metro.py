"""Clock pulse generator."""

from __future__ import annotations

from .core import TWOPI


class Metro:
    """Produce a tick at a fixed frequency."""

    def __init__(self, freq: float, sample_rate: float) -> None:
        self.sample_rate = sample_rate
        self._phase = 0.0
        self.freq = freq

    @property
    def freq(self) -> float:
        """Tick frequency in Hz."""
        return self._freq

    @freq.setter
    def freq(self, freq: float) -> None:
        self._freq = freq
        self._phase_inc = TWOPI * freq / self.sample_rate

    def process(self) -> bool:
        """Advance one sample; True when a tick occurs."""
        self._phase += self._phase_inc
        if self._phase >= TWOPI:
            self._phase -= TWOPI
            return True
        return False

    def reset(self) -> None:
        """Reset the phase to zero."""
        self._phase = 0.0