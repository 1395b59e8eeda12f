from datetime import date

from src.timetable_system.timetable_system.common.time_utils import ClockTime
from src.timetable_system.timetable_system.core.enums import ColorPriority
from src.timetable_system.timetable_system.days.aggregator import aggregate_day
from src.timetable_system.timetable_system.records.model import AttendanceRecord, LeaveType, leave_lookup_from
from src.timetable_system.timetable_system.shifts.builder import build_shift

DAY = date(2024, 3, 4)
LEAVES = leave_lookup_from(
    [
        LeaveType(leave_type_id=3, title="Annual", color="#4caf50"),
        LeaveType(leave_type_id=4, title="Sick", color="#2196f3"),
    ]
)


def _shift(record_id, start, end, **kwargs):
    rec = AttendanceRecord(record_id=record_id, staff_ref="E-1", work_date=DAY, start=start, end=end, **kwargs)
    return build_shift(rec, LEAVES)


def _day(shifts, **kwargs):
    return aggregate_day(shifts, day_number=2, day_date=DAY, leave_lookup=LEAVES, **kwargs)


def test_single_shift_day():
    cell = _day([_shift(1, ClockTime(9, 0), ClockTime(17, 0), lunch_minutes=30)])

    assert cell.total_minutes == 450
    assert cell.formatted_content == "09:00-17:00(7:30)"
    assert cell.has_data
    assert cell.color.priority == ColorPriority.DEFAULT
    assert cell.color.color == "#ffffff"


def test_multiple_shifts_sorted_with_total_line():
    cell = _day(
        [
            _shift(2, ClockTime(14, 0), ClockTime(18, 0)),
            _shift(1, ClockTime(8, 0), ClockTime(12, 0)),
        ]
    )

    assert [s.record_id for s in cell.shifts] == [1, 2]
    assert cell.total_minutes == 480
    assert cell.formatted_content == "08:00-12:00(4:00)\n14:00-18:00(4:00)\nTotal: 8h 00m"


def test_holiday_marker_day():
    cell = _day([_shift(1, ClockTime(), ClockTime(), holiday=True)])

    assert cell.has_data
    assert cell.has_holiday
    assert cell.total_minutes == 0
    assert cell.formatted_content == "Holiday"
    assert cell.color.priority == ColorPriority.HOLIDAY
    assert cell.color.color == "#f44336"
    assert cell.is_marker_only


def test_holiday_and_leave_day_keeps_leave_data():
    cell = _day(
        [
            _shift(1, ClockTime(), ClockTime(), holiday=True),
            _shift(2, ClockTime(), ClockTime(), leave_type_id=3),
        ]
    )

    assert cell.color.priority == ColorPriority.HOLIDAY
    assert cell.color.color == "#f44336"
    assert cell.has_leave
    assert cell.leave_title == "Annual"
    assert cell.leave_color == "#4caf50"
    assert cell.formatted_content == "Holiday"


def test_leave_marker_day_shows_title():
    cell = _day([_shift(1, ClockTime(), ClockTime(), leave_type_id=4)])

    assert cell.formatted_content == "Sick"
    assert cell.color.priority == ColorPriority.LEAVE_TYPE
    assert cell.color.color == "#2196f3"


def test_work_shift_alongside_leave_marker_shows_work_only():
    cell = _day(
        [
            _shift(1, ClockTime(), ClockTime(), leave_type_id=3),
            _shift(2, ClockTime(9, 0), ClockTime(13, 0)),
        ]
    )

    assert cell.formatted_content == "09:00-13:00(4:00)"
    assert cell.color.priority == ColorPriority.LEAVE_TYPE
    assert [s.record_id for s in cell.shifts] == [2, 1]


def test_marker_days_can_be_left_blank():
    cell = _day([_shift(1, ClockTime(), ClockTime(), holiday=True)], include_marker_only_days=False)

    assert not cell.has_data
    assert cell.formatted_content == ""
    assert cell.color.priority == ColorPriority.DEFAULT


def test_empty_day():
    cell = _day([])

    assert not cell.has_data
    assert cell.total_minutes == 0
    assert cell.formatted_content == ""
    assert cell.color.reasons == ("No shifts in day",)
