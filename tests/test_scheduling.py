import pytest
from curvewalker.scheduling import ManualScheduler, MatplotlibTimerScheduler, SleepScheduler


# --------------------- ManualScheduler ---------------------

def test_manual_scheduler_fires_and_rereads_interval():
    scheduler = ManualScheduler()
    calls = []
    rate = {"hz": 10}

    scheduler.start(lambda: calls.append(1), lambda: 1000 / rate["hz"])
    scheduler.advance(2)
    rate["hz"] = 100
    scheduler.advance(1)

    assert len(calls) == 3
    assert scheduler.delays == pytest.approx([100.0, 100.0, 100.0, 10.0])


def test_manual_scheduler_stop_from_callback():
    scheduler = ManualScheduler()
    calls = []

    def cb():
        calls.append(1)
        scheduler.stop()

    scheduler.start(cb, lambda: 5.0)
    scheduler.advance(10)

    assert calls == [1]
    assert not scheduler.active


def test_manual_scheduler_inactive_until_started():
    scheduler = ManualScheduler()
    scheduler.advance(3)
    assert scheduler.next_delay is None
    scheduler.stop()  # no-op


# --------------------- SleepScheduler ---------------------

def test_sleep_scheduler_runs_max_ticks(mocker):
    sleep = mocker.Mock()
    scheduler = SleepScheduler(sleep=sleep)
    calls = []

    scheduler.start(lambda: calls.append(1), lambda: 250.0)
    fired = scheduler.run(max_ticks=4)

    assert fired == 4
    assert len(calls) == 4
    sleep.assert_called_with(0.25)
    assert sleep.call_count == 4


def test_sleep_scheduler_stops_when_callback_stops(mocker):
    scheduler = SleepScheduler(sleep=mocker.Mock())
    calls = []

    def cb():
        calls.append(1)
        if len(calls) == 3:
            scheduler.stop()

    scheduler.start(cb, lambda: 0.0)

    assert scheduler.run() == 3


# --------------------- MatplotlibTimerScheduler ---------------------

def test_matplotlib_scheduler_rearms_single_shot_timer(mocker):
    timer = mocker.MagicMock()
    canvas = mocker.Mock()
    canvas.new_timer.return_value = timer

    scheduler = MatplotlibTimerScheduler(canvas)
    assert timer.single_shot is True
    fire = timer.add_callback.call_args[0][0]

    calls = []
    rate = {"hz": 60}
    scheduler.start(lambda: calls.append(1), lambda: 1000 / rate["hz"])
    assert timer.interval == 17
    assert timer.start.call_count == 1

    rate["hz"] = 2
    fire()

    assert calls == [1]
    assert timer.interval == 500
    assert timer.start.call_count == 2

    scheduler.stop()
    timer.stop.assert_called()
    fire()
    assert calls == [1]
