import pytest

from blockfall.main import EventTimer, main


def test_not_triggered_before_interval():
    timer = EventTimer()
    assert timer.triggered(0.5, 1.0) is False
    assert timer.last_update_time == 0.0


def test_triggered_at_interval():
    timer = EventTimer()
    assert timer.triggered(1.0, 1.0) is True
    assert timer.last_update_time == 1.0


def test_interval_restarts_after_trigger():
    timer = EventTimer()
    assert timer.triggered(1.0, 1.0) is True
    assert timer.triggered(1.5, 1.0) is False
    assert timer.triggered(2.0, 1.0) is True


def test_shorter_interval_fires_more_often():
    timer = EventTimer()
    fired = [timer.triggered(t / 10, 0.5) for t in range(1, 21)]
    assert sum(fired) == 4


def test_help_exits_cleanly():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0


def test_unknown_option_is_rejected():
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2