"""DC blocking filter."""


class DcBlock:
    """Remove the DC component of a signal."""

    def __init__(self, sample_rate: float) -> None:
        self.sample_rate = sample_rate
        self._input = 0.0
        self._output = 0.0
        self._gain = 0.99

    def process(self, sample: float) -> float:
        """Filter one sample."""
        out = sample - self._input + self._gain * self._output
        self._output = out
        self._input = sample
        return out