"""Row -> model mapping.

Records arrive either with separate hour/minute columns or, in older data,
with combined start/end timestamps. Both collapse into one ClockTime pair.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from ..common.datetime_utils import to_date
from ..common.time_utils import ClockTime
from ..database.mysql_base import normalize_mysql_time
from .model import AttendanceRecord, LeaveType, StaffMember, StaffRef, normalize_leave_type_id

logger = logging.getLogger(__name__)

# Stands in for a clock value that could not be parsed; fails validation.
INVALID_CLOCK = ClockTime(hour=-1, minute=-1)


def _int_or_none(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        return int(value)
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _truthy(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "y"}
    return bool(value)


def to_clock_time(value: Any) -> Optional[ClockTime]:
    """ClockTime from a TIME/DATETIME/str value, None when absent."""
    if value is None or value == "":
        return None
    try:
        t = normalize_mysql_time(value)
    except (TypeError, ValueError):
        logger.debug("Unparsable clock value %r", value)
        return INVALID_CLOCK
    return ClockTime(hour=t.hour, minute=t.minute) if t is not None else None


def _clock(row: Mapping[str, Any], prefix: str, legacy_key: str) -> ClockTime:
    hour_raw = row.get(f"{prefix}_hour")
    if hour_raw is not None:
        hour = _int_or_none(hour_raw)
        minute_raw = row.get(f"{prefix}_minute")
        minute = 0 if minute_raw is None else _int_or_none(minute_raw)
        if hour is None or minute is None:
            return INVALID_CLOCK
        return ClockTime(hour=hour, minute=minute)

    legacy = to_clock_time(row.get(legacy_key))
    return legacy if legacy is not None else ClockTime()


def _ref(value: Any) -> Optional[StaffRef]:
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


def record_from_row(row: Mapping[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=int(row.get("record_id") or 0),
        staff_ref=_ref(row.get("staff_ref")),
        work_date=to_date(row.get("work_date")),
        start=_clock(row, "start", "shift_start"),
        end=_clock(row, "end", "shift_end"),
        lunch_minutes=_int_or_none(row.get("lunch_minutes")),
        lunch_start=to_clock_time(row.get("lunch_start")),
        lunch_end=to_clock_time(row.get("lunch_end")),
        leave_type_id=normalize_leave_type_id(row.get("leave_type_id")),
        holiday=_truthy(row.get("is_holiday")),
    )


def has_person_info(employee_ref: Any, *, deleted: bool, template: bool) -> bool:
    """A roster entry is a real person when it has a non-zero employee reference."""
    ref = _ref(employee_ref)
    if ref is None or str(ref) == "0":
        return False
    return not deleted and not template


def staff_from_row(row: Mapping[str, Any]) -> StaffMember:
    deleted = _truthy(row.get("is_deleted"))
    employee_ref = _ref(row.get("employee_ref"))
    return StaffMember(
        staff_id=row["staff_id"],
        name=str(row.get("full_name") or ""),
        employee_ref=employee_ref,
        deleted=deleted,
        has_person_info=has_person_info(employee_ref, deleted=deleted, template=_truthy(row.get("is_template"))),
    )


def leave_type_from_row(row: Mapping[str, Any]) -> LeaveType:
    color = row.get("color")
    return LeaveType(
        leave_type_id=row["leave_type_id"],
        title=str(row.get("title") or ""),
        color=str(color).strip() if color else None,
    )
