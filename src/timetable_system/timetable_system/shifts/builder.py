from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, List, Optional

from ..common.time_utils import format_shift_label, lunch_minutes, work_minutes
from ..core.constants import HOLIDAY_LABEL, LEAVE_FALLBACK_LABEL
from ..core.enums import IssueSeverity
from ..records.model import (
    AttendanceRecord,
    HolidayLookup,
    LeaveColorLookup,
    no_holidays,
    no_leave_types,
    normalize_leave_type_id,
)
from ..records.validation import RecordIssue, has_errors, validate_record
from .model import Shift

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShiftBuildResult:
    shifts: List[Shift]
    skipped: int = 0
    dropped_empty: int = 0
    issues: List[RecordIssue] = field(default_factory=list)


def _build(
    record: AttendanceRecord,
    leave_lookup: LeaveColorLookup,
    holiday_lookup: HolidayLookup,
    issues: List[RecordIssue],
) -> Optional[Shift]:
    issues.extend(validate_record(record))
    if has_errors(issues):
        return None

    work_date = record.work_date.date() if isinstance(record.work_date, datetime) else record.work_date
    is_holiday = bool(record.holiday) or bool(holiday_lookup(work_date))

    leave_type_id = normalize_leave_type_id(record.leave_type_id)
    leave = leave_lookup(leave_type_id) if leave_type_id is not None else None
    if leave_type_id is not None and leave is None:
        logger.debug("Record %s references unknown leave type %r", record.record_id, leave_type_id)

    common = dict(
        record_id=record.record_id,
        staff_ref=record.staff_ref,
        work_date=work_date,
        start=record.start,
        end=record.end,
        is_holiday=is_holiday,
        leave_type_id=leave_type_id,
        leave_title=leave.title if leave else None,
        leave_color=leave.color if leave and leave.color else None,
    )

    if record.is_zero_time:
        if not is_holiday and leave_type_id is None:
            return None
        if is_holiday:
            label = HOLIDAY_LABEL
        else:
            label = (leave.title if leave else None) or str(leave_type_id) or LEAVE_FALLBACK_LABEL
        return Shift(lunch_minutes=0, work_minutes=0, label=label, is_marker=True, **common)

    lunch_ok = (
        record.lunch_start is not None
        and record.lunch_end is not None
        and record.lunch_start.is_valid
        and record.lunch_end.is_valid
    )
    lunch = lunch_minutes(
        explicit=record.lunch_minutes,
        lunch_start=record.lunch_start if lunch_ok else None,
        lunch_end=record.lunch_end if lunch_ok else None,
    )
    minutes = work_minutes(record.start, record.end, lunch=lunch)
    if is_holiday:
        logger.info("Record %s is a holiday with %s work minutes", record.record_id, minutes)

    return Shift(
        lunch_minutes=lunch,
        work_minutes=minutes,
        label=format_shift_label(record.start, record.end, minutes),
        **common,
    )


def build_shift(
    record: AttendanceRecord,
    leave_lookup: LeaveColorLookup = no_leave_types,
    holiday_lookup: HolidayLookup = no_holidays,
) -> Optional[Shift]:
    """Shift for a record, or None when the record is invalid or carries nothing.

    Zero-time records become marker shifts only when they are a holiday or a
    leave. Invalid records are logged and skipped, never raised.
    """
    issues: List[RecordIssue] = []
    shift = _build(record, leave_lookup, holiday_lookup, issues)
    if has_errors(issues):
        logger.warning(
            "Skipping record %s: %s",
            record.record_id,
            "; ".join(i.message for i in issues if i.severity == IssueSeverity.ERROR),
        )
    return shift


def build_shifts(
    records: Iterable[AttendanceRecord],
    leave_lookup: LeaveColorLookup = no_leave_types,
    holiday_lookup: HolidayLookup = no_holidays,
) -> ShiftBuildResult:
    shifts: List[Shift] = []
    all_issues: List[RecordIssue] = []
    skipped = 0
    dropped = 0

    for record in records:
        issues: List[RecordIssue] = []
        shift = _build(record, leave_lookup, holiday_lookup, issues)
        all_issues.extend(issues)
        if shift is not None:
            shifts.append(shift)
        elif has_errors(issues):
            skipped += 1
        else:
            dropped += 1

    if skipped:
        logger.warning("Skipped %s invalid record(s) out of %s", skipped, skipped + dropped + len(shifts))
    return ShiftBuildResult(shifts=shifts, skipped=skipped, dropped_empty=dropped, issues=all_issues)


def shift_sort_key(shift: Shift):
    """Work shifts by start time, markers last."""
    return (shift.is_marker, shift.start.total_minutes, shift.record_id)
