from concurrent.futures import ThreadPoolExecutor
from datetime import date

import pytest

from src.timetable_system.timetable_system.common.time_utils import ClockTime
from src.timetable_system.timetable_system.core.enums import ColorPriority
from src.timetable_system.timetable_system.core.exceptions import MissingInputError
from src.timetable_system.timetable_system.records.model import (
    AttendanceRecord,
    LeaveType,
    StaffMember,
    holiday_lookup_from,
    leave_lookup_from,
)
from src.timetable_system.timetable_system.timetable.assembler import build_grid, build_grid_with_report
from src.timetable_system.timetable_system.timetable.model import GridOptions
from src.timetable_system.timetable_system.weeks.calculator import calculate_weeks

WEEKS = calculate_weeks(date(2024, 3, 1), 2)
LEAVES = leave_lookup_from([LeaveType(leave_type_id=3, title="Annual", color="#4caf50")])

STAFF = [
    StaffMember(staff_id=1, name="zoe", employee_ref="E-1"),
    StaffMember(staff_id=2, name="Adam", employee_ref="E-2"),
    StaffMember(staff_id=3, name="Old Timer", employee_ref="E-3", deleted=True, has_person_info=False),
    StaffMember(staff_id=4, name="Template", employee_ref=None, has_person_info=False),
]


def _rec(record_id, staff_ref, day, start=ClockTime(9, 0), end=ClockTime(17, 0), **kwargs):
    return AttendanceRecord(record_id=record_id, staff_ref=staff_ref, work_date=day, start=start, end=end, **kwargs)


RECORDS = [
    _rec(1, "E-1", date(2024, 3, 4), lunch_minutes=30),
    _rec(2, "E-1", date(2024, 3, 5)),
    _rec(3, "E-2", date(2024, 3, 5), start=ClockTime(), end=ClockTime(), holiday=True),
    _rec(4, "E-2", date(2024, 3, 6), start=ClockTime(), end=ClockTime(), leave_type_id=3),
    _rec(5, "E-1", date(2024, 3, 20), start=ClockTime(22, 0), end=ClockTime(6, 0)),
    _rec(6, None, date(2024, 3, 20)),
    _rec(7, "E-1", date(2024, 5, 1)),
]


def test_rows_have_seven_days_in_week_order():
    groups = build_grid(RECORDS, STAFF, WEEKS, LEAVES)

    assert len(groups) == len(WEEKS)
    for group in groups:
        for row in group.staff_rows:
            assert len(row.days) == 7
            assert [d.date for d in row.days][0] == group.week_info.week_start
            assert row.days[0].day_number == 2
            assert row.total_minutes == sum(d.total_minutes for d in row.days)


def test_shift_example_lands_in_second_week():
    groups = build_grid(RECORDS, STAFF, WEEKS, LEAVES)
    week2 = groups[1]
    zoe = next(r for r in week2.staff_rows if r.staff_id == 1)

    monday = zoe.days[0]
    assert monday.date == date(2024, 3, 4)
    assert monday.total_minutes == 450
    assert monday.formatted_content == "09:00-17:00(7:30)"
    assert zoe.total_minutes == 450 + 480
    assert zoe.formatted_total == "15h 30m"


def test_marker_days_in_grid():
    groups = build_grid(RECORDS, STAFF, WEEKS, LEAVES)
    adam = next(r for r in groups[1].staff_rows if r.staff_id == 2)

    holiday = adam.days[1]
    assert holiday.formatted_content == "Holiday"
    assert holiday.color.priority == ColorPriority.HOLIDAY
    assert holiday.total_minutes == 0

    leave = adam.days[2]
    assert leave.formatted_content == "Annual"
    assert leave.color.color == "#4caf50"
    assert adam.total_minutes == 0
    assert adam.has_data


def test_calendar_holiday_colors_work_day():
    groups = build_grid(RECORDS, STAFF, WEEKS, LEAVES, holiday_lookup_from([date(2024, 3, 4)]))
    zoe = next(r for r in groups[1].staff_rows if r.staff_id == 1)

    assert zoe.days[0].color.priority == ColorPriority.HOLIDAY
    assert zoe.days[0].total_minutes == 450


def test_week_has_data_flag():
    groups = build_grid(RECORDS, STAFF, WEEKS, LEAVES)
    assert [g.has_data for g in groups] == [False, True, False, True, False]


def test_row_sort_order():
    groups = build_grid(RECORDS, STAFF, WEEKS, LEAVES)
    assert [r.staff_name for r in groups[0].staff_rows] == ["Adam", "zoe", "Template", "Old Timer"]


def test_empty_inputs_give_empty_grid():
    assert build_grid([], STAFF, WEEKS) == []
    assert build_grid(RECORDS, [], WEEKS) == []
    assert build_grid(RECORDS, STAFF, []) == []


def test_missing_inputs_raise():
    with pytest.raises(MissingInputError):
        build_grid(RECORDS, None, WEEKS)
    with pytest.raises(MissingInputError):
        build_grid(None, STAFF, WEEKS)


def test_report_counts_skipped_and_out_of_range():
    result = build_grid_with_report(RECORDS, STAFF, WEEKS, LEAVES)

    assert result.records_total == 7
    assert result.records_in_range == 6
    assert result.skipped == 1
    assert result.shifts_built == 5


def test_marker_only_days_hidden_by_option():
    groups = build_grid(RECORDS, STAFF, WEEKS, LEAVES, options=GridOptions(include_marker_only_days=False))
    adam = next(r for r in groups[1].staff_rows if r.staff_id == 2)

    assert not adam.has_data
    assert adam.days[1].formatted_content == ""


def test_parallel_build_matches_sequential():
    sequential = build_grid(RECORDS, STAFF, WEEKS, LEAVES)
    with ThreadPoolExecutor(max_workers=4) as pool:
        parallel = build_grid(RECORDS, STAFF, WEEKS, LEAVES, executor=pool)

    assert parallel == sequential
