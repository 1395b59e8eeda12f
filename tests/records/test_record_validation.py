from datetime import date

from src.timetable_system.timetable_system.common.time_utils import ClockTime
from src.timetable_system.timetable_system.core.enums import IssueSeverity
from src.timetable_system.timetable_system.records.model import AttendanceRecord, holiday_lookup_from
from src.timetable_system.timetable_system.records.validation import (
    detect_holiday_leave_conflicts,
    validate_record,
    validate_records,
)


def _rec(record_id=1, **kwargs):
    base = dict(
        record_id=record_id,
        staff_ref="E-1",
        work_date=date(2024, 3, 4),
        start=ClockTime(9, 0),
        end=ClockTime(17, 0),
    )
    base.update(kwargs)
    return AttendanceRecord(**base)


def test_clean_record_has_no_issues():
    assert validate_record(_rec()) == []


def test_errors_for_unusable_records():
    assert validate_record(_rec(staff_ref=None))[0].severity == IssueSeverity.ERROR
    assert validate_record(_rec(work_date=None))[0].severity == IssueSeverity.ERROR
    assert validate_record(_rec(start=ClockTime(25, 0)))[0].severity == IssueSeverity.ERROR


def test_warnings_for_tolerated_oddities():
    issues = validate_record(_rec(holiday=True, leave_type_id="3"))
    assert {i.severity for i in issues} == {IssueSeverity.WARNING}

    issues = validate_record(_rec(lunch_start=ClockTime(12, 0), lunch_end=ClockTime(12, 99)))
    assert [i.message for i in issues] == ["invalid lunch time ignored"]


def test_validate_records_counts():
    report = validate_records([_rec(1), _rec(2, staff_ref=""), _rec(3, end=ClockTime(8, 60))])

    assert report.total == 3
    assert report.valid == 1
    assert report.invalid == 2
    assert len(report.errors) == 2
    assert not report.is_valid


def test_holiday_leave_conflicts_from_flag_and_calendar():
    records = [
        _rec(1, leave_type_id="3", holiday=True, start=ClockTime(), end=ClockTime()),
        _rec(2, leave_type_id="3", work_date=date(2024, 3, 8), start=ClockTime(), end=ClockTime()),
        _rec(3, leave_type_id="3", work_date=date(2024, 3, 9), start=ClockTime(), end=ClockTime()),
        _rec(4, holiday=True),
    ]

    conflicts = detect_holiday_leave_conflicts(records, holiday_lookup_from([date(2024, 3, 8)]))

    assert [c.record_id for c in conflicts] == [1, 2]
