import pytest

from palletload.timer import Timer


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


def test_elapsed_measures_from_creation():
    clock = FakeClock(10.0)
    timer = Timer(clock=clock)
    clock.now = 13.5
    assert timer.elapsed() == pytest.approx(3.5)


def test_reset_restarts_measurement():
    clock = FakeClock(5.0)
    timer = Timer(clock=clock)
    clock.now = 20.0
    timer.reset()
    assert timer.elapsed() == 0.0
    clock.now = 22.0
    assert timer.elapsed() == pytest.approx(2.0)


def test_formatted_with_hours_and_minutes():
    clock = FakeClock(0.0)
    timer = Timer(clock=clock)
    clock.now = 3661.5
    assert timer.formatted() == "01:01:01.500"


def test_formatted_under_an_hour():
    clock = FakeClock(0.0)
    timer = Timer(clock=clock)
    clock.now = 125.0
    assert timer.formatted() == "00:02:5.000"


def test_real_clock_is_monotonic():
    timer = Timer()
    first = timer.elapsed()
    second = timer.elapsed()
    assert 0.0 <= first <= second