import math
import re

from cryptbench.clock import TimeOfDay
from cryptbench.timer import Timer, format_duration


def scripted(*times):
    marks = iter(times)
    return lambda: next(marks)


def t(seconds, millis=0, minutes=0, hours=0):
    return TimeOfDay(hours, minutes, seconds, millis)


def test_format_zero():
    assert format_duration(0.0) == "00:00:00:000"


def test_format_hours_minutes_seconds_millis():
    assert format_duration(3723.5) == "01:02:03:500"


def test_format_negative_wraps_a_day():
    assert format_duration(-1.0) == "23:59:59:000"


def test_new_timer_has_only_start_mark():
    start = t(10)
    timer = Timer(scripted(start))
    assert timer.records() == (start,)
    assert timer.start_text() == start.to_text()
    assert timer.elapsed() == "00:00:00:000"
    assert timer.average_per_process() == "00:00:00:000"


def test_duration_between_marks():
    timer = Timer(scripted(t(1), t(2, 250)))
    timer.register()
    assert timer.duration_between(0, 1) == format_duration(1.25)


def test_duration_between_invalid_indexes():
    timer = Timer(scripted(t(1), t(2)))
    timer.register()
    assert timer.duration_between(1, 0) == "00:00:00:000"
    assert timer.duration_between(0, 5) == "00:00:00:000"
    assert timer.duration_between(-1, 1) == "00:00:00:000"
    assert timer.duration_between(1, 1) == "00:00:00:000"


def test_stop_records_end_and_extra_mark():
    start, end, mark = t(0), t(4), t(5)
    timer = Timer(scripted(start, end, mark))
    timer.stop()
    assert timer.stopped
    assert timer.records() == (start, mark)
    assert timer.end_text() == end.to_text()
    assert timer.duration_seconds() == 4.0
    assert timer.elapsed() == format_duration(5.0)


def test_end_text_uses_clock_while_running():
    now = t(30, minutes=5)
    timer = Timer(scripted(t(0), now))
    assert timer.end_text() == now.to_text()


def test_duration_seconds_while_running_uses_clock():
    timer = Timer(scripted(t(0), t(7, 500)))
    assert timer.duration_seconds() == 7.5


def test_average_ignores_final_mark():
    timer = Timer(scripted(t(0), t(1), t(3), t(4), t(50)))
    timer.register()
    timer.register()
    timer.stop()
    # intervals 1 and 2 averaged; the stop mark at 50 s is left out
    assert timer.average_per_process() == format_duration(1.5)


def test_reset_discards_marks():
    fresh = t(20)
    timer = Timer(scripted(t(0), t(1), t(2), t(3), fresh))
    timer.register()
    timer.stop()
    timer.reset()
    assert not timer.stopped
    assert timer.records() == (fresh,)
    assert timer.start_text() == fresh.to_text()


def test_elapsed_across_midnight_wraps():
    timer = Timer(scripted(t(59, 0, 59, 23), t(1)))
    timer.register()
    assert timer.elapsed() == format_duration(2.0)


def test_real_clock_timing_after_work():
    timer = Timer()
    accumulator = 0.0
    for i in range(1, 200_000):
        accumulator += math.sqrt(i)
    timer.stop()
    assert accumulator > 0
    assert re.fullmatch(r"\d{2}:\d{2}:\d{2}:\d{3}", timer.start_text())
    assert re.fullmatch(r"\d{2}:\d{2}:\d{2}:\d{3}", timer.end_text())
    assert len(timer.records()) == 2
    assert -86400.0 < timer.duration_seconds() < 86400.0