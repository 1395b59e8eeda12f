from dataclasses import replace
from datetime import date

from src.timetable_system.timetable_system.common.time_utils import ClockTime
from src.timetable_system.timetable_system.core.enums import QualityRating
from src.timetable_system.timetable_system.records.model import AttendanceRecord, StaffMember
from src.timetable_system.timetable_system.reporting.diagnostics import (
    create_processing_summary,
    diagnose_week_records,
    get_processing_statistics,
    validate_week_row,
)
from src.timetable_system.timetable_system.timetable.assembler import build_grid
from src.timetable_system.timetable_system.weeks.calculator import calculate_weeks

WEEKS = calculate_weeks(date(2024, 3, 1), 2)
STAFF = [StaffMember(1, "Ann", "E-1")]


def _row(days_worked):
    records = [
        AttendanceRecord(i, "E-1", date(2024, 3, 4 + i), ClockTime(9, 0), ClockTime(17, 0)) for i in range(days_worked)
    ]
    records.append(AttendanceRecord(99, "E-1", date(2024, 3, 10), ClockTime(), ClockTime(), leave_type_id="7"))
    return build_grid(records, STAFF, WEEKS)[1].staff_rows[0]


def test_statistics_quality_bands():
    assert get_processing_statistics(_row(6)).quality == QualityRating.GOOD
    assert get_processing_statistics(_row(3)).quality == QualityRating.FAIR
    assert get_processing_statistics(_row(1)).quality == QualityRating.POOR

    stats = get_processing_statistics(_row(2))
    assert stats.days_with_data == 3
    assert stats.days_with_leave == 1
    assert stats.total_shifts == 3


def test_no_data_week():
    row = build_grid([AttendanceRecord(1, "E-1", date(2024, 3, 4), ClockTime(9, 0), ClockTime(17, 0))], STAFF, WEEKS)[0].staff_rows[0]
    assert get_processing_statistics(row).quality == QualityRating.NO_DATA


def test_valid_row_and_unnamed_leave_warning():
    result = validate_week_row(_row(2))

    assert result.is_valid
    assert result.warnings == ["Day 7 shows leave type id instead of name"]


def test_total_mismatch_is_reported():
    row = replace(_row(2), total_minutes=1)
    result = validate_week_row(row)

    assert not result.is_valid
    assert result.issues == ["Week total mismatch: calculated 960, stored 1"]


def test_processing_summary_score():
    summary = create_processing_summary(_row(1))

    # one warning (-10) and fewer than 3 days with data (-20)
    assert summary.quality_score == 70
    assert summary.summary == "Week 2: 2/7 days with data, 1 leave days, quality score: 70%"
    assert summary.recommendations[-1] == "Quality score below 80% - review configuration"


def test_diagnose_week_records():
    records = [
        AttendanceRecord(1, "E-1", date(2024, 3, 4), ClockTime(), ClockTime(), leave_type_id="3"),
        AttendanceRecord(2, "E-1", date(2024, 3, 5), ClockTime(), ClockTime(), holiday=True),
    ]

    without_lookup = diagnose_week_records(records, WEEKS[1])
    assert without_lookup.total_records == 2
    assert without_lookup.records_with_leave == 1
    assert without_lookup.records_with_holiday == 1
    assert without_lookup.quality == "MISSING_LEAVE_LOOKUP"

    assert diagnose_week_records(records, WEEKS[1], lambda _: None).quality == "GOOD"
    assert diagnose_week_records(records, WEEKS[0]).quality == "NO_DATA"
