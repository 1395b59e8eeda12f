from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord, LeaveType, StaffMember, StaffRef


class AttendanceRecordRepository(Protocol):
    def list_for_period(self, *, group_id: StaffRef, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError


class StaffRepository(Protocol):
    def list_for_group(self, group_id: StaffRef) -> Sequence[StaffMember]:
        raise NotImplementedError

    def get_group_name(self, group_id: StaffRef) -> Optional[str]:
        raise NotImplementedError


class LeaveTypeRepository(Protocol):
    def list_all(self) -> Sequence[LeaveType]:
        raise NotImplementedError


class HolidayRepository(Protocol):
    def list_dates(self, *, group_id: StaffRef, start_date: date, end_date: date) -> Sequence[date]:
        """Holiday dates in range, both group-specific and global ones."""

        raise NotImplementedError
