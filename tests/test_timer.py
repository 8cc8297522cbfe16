from unittest.mock import patch

from voxconv.timer import Timer


def test_new_timer_total_is_zero():
    assert Timer().total() == 0.0


def test_start_stop_measures_elapsed():
    with patch("time.perf_counter_ns", side_effect=[0, 1_000_000_000, 3_500_000_000]):
        timer = Timer()
        timer.start()
        timer.stop()
    assert timer.total() == 2.5
    assert str(timer) == "2.5"


def test_running_flag():
    timer = Timer()
    timer.start()
    assert timer.running is True
    timer.stop()
    assert timer.running is False
    assert timer.total() >= 0.0