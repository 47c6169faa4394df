"""Sample-and-hold foldover distortion."""


class Fold:
    """Hold the input for ``increment`` samples at a time."""

    def __init__(self) -> None:
        self.increment = 1000.0
        self._sample_index = 0
        self._index = 0.0
        self._value = 0.0

    def process(self, sample: float) -> float:
        """Return the held value, taking a new one when the index is passed."""
        if self._index < self._sample_index:
            self._index += self.increment
            self._value = sample
        self._sample_index += 1
        return self._value