"""Linear ramp generator."""


class Line:
    """Generate a line segment from a start value to an end value."""

    def __init__(self, sample_rate: float) -> None:
        self.sample_rate = sample_rate
        self._duration = 0.5
        self._end = 0.0
        self._start = 1.0
        self._value = 1.0
        self._inc = 0.0
        self._finished = False

    @property
    def finished(self) -> bool:
        """True once the line has reached its end value."""
        return self._finished

    def start(self, start: float, end: float, duration: float) -> None:
        """Begin a new line taking ``duration`` seconds."""
        if duration <= 0:
            raise ValueError("duration must be positive")
        self._start = start
        self._end = end
        self._duration = duration
        self._inc = (end - start) / (self.sample_rate * duration)
        self._value = start
        self._finished = False

    def process(self) -> float:
        """Return the next value of the line."""
        out = self._value
        rising = self._end > self._start and out >= self._end
        falling = self._end < self._start and out <= self._end
        if rising or falling:
            self._finished = True
            self._value = self._end
            out = self._end
        else:
            self._value += self._inc
        return out