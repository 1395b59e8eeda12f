import pytest

from src.timetable_system.timetable_system.common.time_utils import (
    ClockTime,
    duration_minutes,
    format_minutes_to_hours,
    format_minutes_to_hours_minutes,
    format_shift_label,
    lunch_minutes,
    work_minutes,
)


def test_zero_to_zero_is_a_marker_not_a_full_day():
    assert duration_minutes(0, 0, 0, 0) == 0


def test_plain_interval():
    assert duration_minutes(9, 0, 17, 0) == 480


def test_overnight_shift_wraps_midnight():
    assert duration_minutes(22, 0, 6, 0) == 480


def test_end_at_midnight_means_end_of_day():
    assert duration_minutes(18, 0, 0, 0) == 360


@pytest.mark.parametrize("hour, minute", [(0, 1), (9, 30), (23, 59)])
def test_equal_non_zero_times_span_a_full_day(hour, minute):
    assert duration_minutes(hour, minute, hour, minute) == 24 * 60


@pytest.mark.parametrize("sh, sm, eh, em", [(0, 5, 0, 0), (12, 0, 11, 59), (23, 0, 1, 0), (7, 45, 19, 15)])
def test_duration_stays_within_a_day(sh, sm, eh, em):
    assert 0 <= duration_minutes(sh, sm, eh, em) <= 24 * 60


def test_explicit_lunch_wins_over_clock_pair():
    assert lunch_minutes(explicit=45, lunch_start=ClockTime(12, 0), lunch_end=ClockTime(13, 0)) == 45


def test_lunch_clock_pair_used_when_no_explicit_value():
    assert lunch_minutes(explicit=0, lunch_start=ClockTime(12, 0), lunch_end=ClockTime(12, 30)) == 30


def test_lunch_clock_pair_wraps_midnight():
    assert lunch_minutes(lunch_start=ClockTime(23, 45), lunch_end=ClockTime(0, 15)) == 30


def test_zero_or_equal_lunch_clock_pair_means_no_break():
    assert lunch_minutes(lunch_start=ClockTime(0, 0), lunch_end=ClockTime(0, 0)) == 0
    assert lunch_minutes(lunch_start=ClockTime(12, 0), lunch_end=ClockTime(12, 0)) == 0


def test_work_minutes_subtracts_lunch():
    assert work_minutes(ClockTime(9, 0), ClockTime(17, 0), lunch=30) == 450


def test_work_minutes_never_negative():
    assert work_minutes(ClockTime(9, 0), ClockTime(9, 30), lunch=60) == 0


def test_marker_shift_ignores_lunch():
    assert work_minutes(ClockTime(0, 0), ClockTime(0, 0), lunch=30) == 0


def test_total_formats():
    assert format_minutes_to_hours(0) == "0h 00m"
    assert format_minutes_to_hours(450) == "7h 30m"
    assert format_minutes_to_hours(605) == "10h 05m"
    assert format_minutes_to_hours(-5) == "0h 00m"


def test_short_duration_format():
    assert format_minutes_to_hours_minutes(0) == "0:00"
    assert format_minutes_to_hours_minutes(450) == "7:30"


def test_shift_label():
    assert format_shift_label(ClockTime(9, 0), ClockTime(17, 0), 450) == "09:00-17:00(7:30)"
    assert format_shift_label(ClockTime(22, 5), ClockTime(6, 0), 475) == "22:05-06:00(7:55)"


def test_clock_time_validity():
    assert ClockTime(23, 59).is_valid
    assert not ClockTime(24, 0).is_valid
    assert not ClockTime(8, 60).is_valid
    assert not ClockTime(-1, -1).is_valid
