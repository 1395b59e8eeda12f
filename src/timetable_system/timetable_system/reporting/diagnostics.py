from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Sequence

from ..core.constants import DAYS_IN_WEEK
from ..core.enums import QualityRating
from ..records.model import AttendanceRecord, LeaveColorLookup, normalize_leave_type_id
from ..timetable.model import StaffWeekRow
from ..weeks.model import WeekInfo


@dataclass(frozen=True)
class ProcessingStatistics:
    week_num: int
    days_with_data: int
    days_with_leave: int
    days_with_holiday: int
    total_shifts: int
    quality: QualityRating


def get_processing_statistics(row: StaffWeekRow) -> ProcessingStatistics:
    days = row.days
    with_data = sum(1 for d in days if d.has_data)
    completeness = round(with_data / len(days) * 100) if days else 0

    if with_data == 0:
        quality = QualityRating.NO_DATA
    elif completeness >= 75:
        quality = QualityRating.GOOD
    elif completeness >= 50:
        quality = QualityRating.FAIR
    else:
        quality = QualityRating.POOR

    return ProcessingStatistics(
        week_num=row.week_num,
        days_with_data=with_data,
        days_with_leave=sum(1 for d in days if d.has_leave),
        days_with_holiday=sum(1 for d in days if d.has_holiday),
        total_shifts=sum(len(d.shifts) for d in days),
        quality=quality,
    )


@dataclass(frozen=True)
class RowValidation:
    issues: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.issues


def validate_week_row(row: StaffWeekRow) -> RowValidation:
    """Structural checks on an assembled staff week."""
    issues: List[str] = []
    warnings: List[str] = []

    if len(row.days) != DAYS_IN_WEEK:
        issues.append(f"Expected {DAYS_IN_WEEK} days, got {len(row.days)}")

    for i, day in enumerate(row.days, start=1):
        if not isinstance(day.date, date):
            issues.append(f"Day {i} has an invalid date")
        if any(s.has_leave and not s.leave_title for s in day.shifts):
            warnings.append(f"Day {i} shows leave type id instead of name")
        if i > 1 and isinstance(day.date, date) and isinstance(row.days[i - 2].date, date):
            if (day.date - row.days[i - 2].date).days != 1:
                issues.append(f"Day {i} does not follow day {i - 1}")

    calculated = sum(d.total_minutes for d in row.days)
    if calculated != row.total_minutes:
        issues.append(f"Week total mismatch: calculated {calculated}, stored {row.total_minutes}")

    return RowValidation(issues=issues, warnings=warnings)


@dataclass(frozen=True)
class ProcessingSummary:
    week_num: int
    summary: str
    quality_score: int
    recommendations: List[str]


def create_processing_summary(row: StaffWeekRow) -> ProcessingSummary:
    stats = get_processing_statistics(row)
    validation = validate_week_row(row)

    score = 100 - 10 * len(validation.warnings)
    if stats.days_with_data < 3:
        score -= 20
    score = max(0, score)

    recommendations = list(validation.warnings)
    if score < 80:
        recommendations.append("Quality score below 80% - review configuration")

    return ProcessingSummary(
        week_num=row.week_num,
        summary=(
            f"Week {row.week_num}: {stats.days_with_data}/{DAYS_IN_WEEK} days with data, "
            f"{stats.days_with_leave} leave days, quality score: {score}%"
        ),
        quality_score=score,
        recommendations=recommendations,
    )


@dataclass(frozen=True)
class WeekRecordsDiagnosis:
    week_num: int
    total_records: int
    records_with_leave: int
    records_with_holiday: int
    has_leave_lookup: bool
    quality: str
    recommendations: List[str]


def diagnose_week_records(
    records: Sequence[AttendanceRecord],
    week: WeekInfo,
    leave_lookup: Optional[LeaveColorLookup] = None,
) -> WeekRecordsDiagnosis:
    """How well a week's raw records can be processed, before building the grid."""
    week_records = [r for r in records if isinstance(r.work_date, date) and week.contains(r.work_date)]
    with_leave = sum(1 for r in week_records if normalize_leave_type_id(r.leave_type_id) is not None)
    with_holiday = sum(1 for r in week_records if r.holiday)

    if not week_records:
        quality, advice = "NO_DATA", "No records found for this week"
    elif with_leave and leave_lookup is None:
        quality, advice = "MISSING_LEAVE_LOOKUP", "Leave records found but no leave type lookup provided"
    else:
        quality, advice = "GOOD", "Week processing should work well"

    return WeekRecordsDiagnosis(
        week_num=week.week_num,
        total_records=len(week_records),
        records_with_leave=with_leave,
        records_with_holiday=with_holiday,
        has_leave_lookup=leave_lookup is not None,
        quality=quality,
        recommendations=[advice],
    )
