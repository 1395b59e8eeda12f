"""Record integrity checks.

Errors make a record unusable (it is skipped by the shift builder); warnings
flag tolerated oddities that are still rendered.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, List, Optional, Sequence

from ..common.time_utils import ClockTime, duration_minutes, lunch_minutes
from ..core.enums import IssueSeverity
from .model import AttendanceRecord, HolidayLookup, StaffRef, no_holidays, normalize_leave_type_id


@dataclass(frozen=True)
class RecordIssue:
    record_id: int
    severity: IssueSeverity
    message: str


@dataclass(frozen=True)
class RecordValidationReport:
    total: int
    valid: int
    issues: List[RecordIssue] = field(default_factory=list)

    @property
    def invalid(self) -> int:
        return self.total - self.valid

    @property
    def errors(self) -> List[RecordIssue]:
        return [i for i in self.issues if i.severity == IssueSeverity.ERROR]

    @property
    def warnings(self) -> List[RecordIssue]:
        return [i for i in self.issues if i.severity == IssueSeverity.WARNING]

    @property
    def is_valid(self) -> bool:
        return not self.errors


@dataclass(frozen=True)
class HolidayLeaveConflict:
    record_id: int
    staff_ref: Optional[StaffRef]
    work_date: date
    leave_type_id: StaffRef


def _clock_ok(value: Optional[ClockTime]) -> bool:
    return isinstance(value, ClockTime) and value.is_valid


def _blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validate_record(record: AttendanceRecord) -> List[RecordIssue]:
    issues: List[RecordIssue] = []

    def error(message: str) -> None:
        issues.append(RecordIssue(record.record_id, IssueSeverity.ERROR, message))

    def warning(message: str) -> None:
        issues.append(RecordIssue(record.record_id, IssueSeverity.WARNING, message))

    if _blank(record.staff_ref):
        error("missing staff reference")
    if not isinstance(record.work_date, date):
        error(f"invalid date {record.work_date!r}")
    if not _clock_ok(record.start):
        error(f"invalid start time {record.start!r}")
    if not _clock_ok(record.end):
        error(f"invalid end time {record.end!r}")

    has_lunch_clock = record.lunch_start is not None or record.lunch_end is not None
    lunch_clock_ok = _clock_ok(record.lunch_start) and _clock_ok(record.lunch_end)
    if has_lunch_clock and not lunch_clock_ok:
        warning("invalid lunch time ignored")
    if record.lunch_minutes is not None and record.lunch_minutes < 0:
        warning(f"negative lunch minutes {record.lunch_minutes} ignored")

    if record.holiday and normalize_leave_type_id(record.leave_type_id) is not None:
        warning("record is both a holiday and a leave")

    if issues and any(i.severity == IssueSeverity.ERROR for i in issues):
        return issues

    if record.holiday and not record.is_zero_time:
        warning("holiday record carries work time")

    if not record.is_zero_time:
        raw = duration_minutes(record.start.hour, record.start.minute, record.end.hour, record.end.minute)
        lunch = lunch_minutes(
            explicit=record.lunch_minutes,
            lunch_start=record.lunch_start if lunch_clock_ok else None,
            lunch_end=record.lunch_end if lunch_clock_ok else None,
        )
        if lunch >= raw:
            warning(f"lunch of {lunch} minutes covers the whole {raw} minute shift")

    return issues


def has_errors(issues: Sequence[RecordIssue]) -> bool:
    return any(i.severity == IssueSeverity.ERROR for i in issues)


def validate_records(records: Iterable[AttendanceRecord]) -> RecordValidationReport:
    total = 0
    valid = 0
    issues: List[RecordIssue] = []
    for record in records:
        total += 1
        found = validate_record(record)
        if not has_errors(found):
            valid += 1
        issues.extend(found)
    return RecordValidationReport(total=total, valid=valid, issues=issues)


def detect_holiday_leave_conflicts(
    records: Iterable[AttendanceRecord],
    holiday_lookup: HolidayLookup = no_holidays,
) -> List[HolidayLeaveConflict]:
    """Leave records that fall on a holiday, either flagged or from the calendar."""
    conflicts: List[HolidayLeaveConflict] = []
    for r in records:
        if normalize_leave_type_id(r.leave_type_id) is None or not isinstance(r.work_date, date):
            continue
        if r.holiday or holiday_lookup(r.work_date):
            conflicts.append(
                HolidayLeaveConflict(
                    record_id=r.record_id,
                    staff_ref=r.staff_ref,
                    work_date=r.work_date,
                    leave_type_id=r.leave_type_id,
                )
            )
    return conflicts
