from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Iterable, Optional, Union

from ..common.time_utils import ClockTime
from ..core.constants import NO_LEAVE_TYPE_IDS

StaffRef = Union[int, str]


def normalize_leave_type_id(value: Optional[StaffRef]) -> Optional[StaffRef]:
    """None for blank and "0" ids, which mark a record without leave."""
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
    return None if str(value) in NO_LEAVE_TYPE_IDS else value


@dataclass(frozen=True)
class AttendanceRecord:
    record_id: int
    staff_ref: Optional[StaffRef]
    work_date: Optional[date]
    start: ClockTime
    end: ClockTime
    lunch_minutes: Optional[int] = None
    lunch_start: Optional[ClockTime] = None
    lunch_end: Optional[ClockTime] = None
    leave_type_id: Optional[StaffRef] = None
    holiday: bool = False

    @property
    def is_zero_time(self) -> bool:
        return self.start.is_zero and self.end.is_zero


@dataclass(frozen=True)
class StaffMember:
    staff_id: StaffRef
    name: str
    employee_ref: Optional[StaffRef] = None
    deleted: bool = False
    has_person_info: bool = True

    @property
    def record_key(self) -> StaffRef:
        """Key that attendance records use to point at this member."""
        return self.employee_ref if self.employee_ref is not None else self.staff_id


@dataclass(frozen=True)
class LeaveType:
    leave_type_id: StaffRef
    title: str
    color: Optional[str] = None


LeaveColorLookup = Callable[[StaffRef], Optional[LeaveType]]
HolidayLookup = Callable[[date], bool]


def leave_lookup_from(leave_types: Iterable[LeaveType]) -> LeaveColorLookup:
    """Lookup keyed by leave type id; ids compare as strings."""
    by_id = {str(lt.leave_type_id): lt for lt in leave_types}

    def lookup(leave_type_id: StaffRef) -> Optional[LeaveType]:
        if leave_type_id is None:
            return None
        return by_id.get(str(leave_type_id))

    return lookup


def holiday_lookup_from(dates: Iterable[date]) -> HolidayLookup:
    holidays = frozenset(dates)

    def lookup(value: date) -> bool:
        return value in holidays

    return lookup


def no_holidays(_: date) -> bool:
    return False


def no_leave_types(_: StaffRef) -> Optional[LeaveType]:
    return None
