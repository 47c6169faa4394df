import pytest

from signalkit.line import Line


def test_rising_line_reaches_end_and_finishes():
    line = Line(10)
    line.start(0.0, 1.0, 1.0)
    assert line.finished is False
    values = [line.process() for _ in range(20)]
    assert values[0] == 0.0
    assert all(a <= b for a, b in zip(values, values[1:]))
    assert values[-1] == 1.0
    assert line.finished is True


def test_falling_line_reaches_end():
    line = Line(100)
    line.start(2.0, -1.0, 0.1)
    values = [line.process() for _ in range(30)]
    assert all(a >= b for a, b in zip(values, values[1:]))
    assert values[-1] == -1.0
    assert line.finished


def test_non_positive_duration_rejected():
    line = Line(100)
    with pytest.raises(ValueError):
        line.start(0.0, 1.0, 0.0)


def test_not_finished_before_start():
    line = Line(100)
    assert line.finished is False