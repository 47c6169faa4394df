"""Physical model of dripping water."""

from __future__ import annotations

import math

from .core import RAND_MAX, TWOPI, random_int

_SOUND_DECAY = 0.95
_SYSTEM_DECAY = 0.996
_GAIN = 1.0
_NUM_SOURCES = 10.0
_CENTER_FREQ0 = 450.0
_CENTER_FREQ1 = 600.0
_CENTER_FREQ2 = 750.0
_RESON = 0.9985
_FREQ_SWEEP = 1.0001
_MAX_SHAKE = 2000.0

_HALF_RAND = 1073741823.5
_HALF_RAND_INV = 1.0 / 1073741823.0


def _my_random(maximum: int) -> int:
    return random_int() % (maximum + 1)


def _noise_tick() -> float:
    return (random_int() - _HALF_RAND) * _HALF_RAND_INV


class Drip:
    """Imitate the sound of water drops by physical modelling synthesis.

    ``dettack`` is the time in seconds after which no new energy enters
    the model.
    """

    def __init__(self, sample_rate: float, dettack: float) -> None:
        if sample_rate <= 0:
            raise ValueError("sample rate must be positive")
        self.sample_rate = sample_rate
        self._reset(dettack)

    @property
    def dettack(self) -> float:
        """Time in seconds after which the excitation stops."""
        return self._dettack

    def _reset(self, dettack: float) -> None:
        tpidsr = TWOPI / self.sample_rate
        self._dettack = dettack
        self._num_tubes = 10.0
        self._damp = 0.2
        self._shake_max = 0.0
        self._freq0 = 450.0
        self._freq1 = 600.0
        self._freq2 = 720.0
        amp = 0.3

        self._snd_level = 0.0
        self._kloop = self.sample_rate * dettack
        self._outputs0 = 0.0
        self._outputs1 = 0.0

        self._center_freqs = [_CENTER_FREQ0, _CENTER_FREQ1, _CENTER_FREQ2]
        self._res_freq0 = _CENTER_FREQ0
        self._res_freq1 = _CENTER_FREQ1
        self._res_freq2 = _CENTER_FREQ2
        self._sound_decay = _SOUND_DECAY
        self._system_decay = _SYSTEM_DECAY
        start_gain = math.log(_NUM_SOURCES) * _GAIN / _NUM_SOURCES
        self._gains = [start_gain, start_gain, start_gain]
        self._coeff1 = _RESON * _RESON
        self._coeff0 = -_RESON * 2.0 * math.cos(_CENTER_FREQ0 * tpidsr)

        self._shake_energy = min(amp * _MAX_SHAKE * 0.1, _MAX_SHAKE)
        self._shake_damp = 0.0
        self._shake_max_save = 0.0
        self._num_objects = 10.0
        self._final = [0.0, 0.0, 0.0]

    def process(self, trigger: bool = False) -> float:
        """Return the next sample; ``trigger`` starts a new drip."""
        tpidsr = TWOPI / self.sample_rate
        if trigger:
            self._reset(self._dettack)

        if self._num_tubes != 0.0 and self._num_tubes != self._num_objects:
            self._num_objects = max(self._num_tubes, 1.0)
        if self._freq0 != 0.0 and self._freq0 != self._res_freq0:
            self._res_freq0 = self._freq0
            self._coeff0 = -_RESON * 2.0 * math.cos(self._res_freq0 * tpidsr)
        if self._damp != 0.0 and self._damp != self._shake_damp:
            self._shake_damp = self._damp
            self._system_decay = _SYSTEM_DECAY + self._shake_damp * 0.002
        if self._shake_max != 0.0 and self._shake_max != self._shake_max_save:
            self._shake_max_save = self._shake_max
            self._shake_energy = min(
                self._shake_energy + self._shake_max_save * _MAX_SHAKE * 0.1,
                _MAX_SHAKE,
            )
        if self._freq1 != 0.0 and self._freq1 != self._res_freq1:
            self._res_freq1 = self._freq1
        if self._freq2 != 0.0 and self._freq2 != self._res_freq2:
            self._res_freq2 = self._freq2

        self._kloop -= 1.0
        if self._kloop == 0.0:
            self._shake_energy = 0.0

        shake_energy = self._shake_energy * self._system_decay
        snd_level = shake_energy

        if _my_random(32767) < self._num_objects:
            which = _my_random(3)
            offset = (0.75, 1.0, 1.25)[min(which, 2)]
            self._center_freqs[min(which, 2)] = self._res_freq1 * (
                offset + 0.25 * _noise_tick()
            )
            self._gains[min(which, 2)] = abs(_noise_tick())

        gains = self._gains
        centers = self._center_freqs
        gains[0] *= _RESON
        if gains[0] > 0.001:
            centers[0] *= _FREQ_SWEEP
            self._coeff0 = -_RESON * 2.0 * math.cos(centers[0] * tpidsr)
        gains[1] *= _RESON
        if gains[1] > 0.0:
            centers[1] *= _FREQ_SWEEP
        gains[2] *= _RESON
        if gains[2] > 0.001:
            centers[2] *= _FREQ_SWEEP

        snd_level *= self._sound_decay
        excitation = snd_level * _noise_tick() * gains[0]
        excitation -= self._outputs0 * self._coeff0
        excitation -= self._outputs1 * self._coeff1
        self._outputs1 = self._outputs0
        self._outputs0 = excitation
        # Only the first resonator is ever driven; the other two stay silent.
        data = gains[0] * self._outputs0

        final = self._final
        final[2] = final[1]
        final[1] = final[0]
        final[0] = data * 4.0

        self._shake_energy = shake_energy
        self._snd_level = snd_level
        return (final[2] - final[0]) * 0.005


__all__ = ["Drip", "RAND_MAX"]