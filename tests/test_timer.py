import pytest

from jeeprun.timer import Timer, now


class FakeClock:
    def __init__(self, t=0.0):
        self.t = t

    def __call__(self):
        return self.t


def test_now_is_monotonic():
    first = now()
    second = now()
    assert second >= first


def test_fresh_timer_is_not_running():
    timer = Timer(FakeClock())
    assert timer.is_running() is False
    assert timer.target() == 0.0


def test_fresh_timer_finishes_once_clock_passes_zero():
    clock = FakeClock(0.0)
    timer = Timer(clock)
    assert timer.finished() is False
    clock.t = 0.5
    assert timer.finished() is True


def test_start_sets_running_and_target():
    clock = FakeClock(10.0)
    timer = Timer(clock)
    timer.start(2)
    assert timer.is_running() is True
    assert timer.target() == 2.0


def test_finished_only_after_strictly_exceeding_target():
    clock = FakeClock(10.0)
    timer = Timer(clock)
    timer.start(2)
    assert timer.finished() is False
    clock.t = 12.0
    assert timer.finished() is False
    clock.t = 12.5
    assert timer.finished() is True


def test_finished_keeps_reporting_true_and_stays_running():
    clock = FakeClock(0.0)
    timer = Timer(clock)
    timer.start(1)
    clock.t = 3.0
    assert timer.finished() is True
    assert timer.finished() is True
    assert timer.is_running() is True


def test_run_time_tracks_clock():
    clock = FakeClock(5.0)
    timer = Timer(clock)
    timer.start(4)
    clock.t = 7.25
    assert timer.run_time() == pytest.approx(2.25)


def test_restart_resets_start():
    clock = FakeClock(0.0)
    timer = Timer(clock)
    timer.start(1)
    clock.t = 5.0
    assert timer.finished() is True
    timer.start(1)
    assert timer.finished() is False
    assert timer.run_time() == pytest.approx(0.0)


def test_default_clock_timer_not_finished_immediately_after_long_start():
    timer = Timer()
    timer.start(3600)
    assert timer.finished() is False
    assert timer.run_time() >= 0.0