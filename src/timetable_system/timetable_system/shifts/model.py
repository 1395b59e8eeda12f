from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.time_utils import ClockTime
from ..records.model import StaffRef, normalize_leave_type_id


@dataclass(frozen=True)
class Shift:
    """One record after duration and label computation."""

    record_id: int
    staff_ref: StaffRef
    work_date: date
    start: ClockTime
    end: ClockTime
    lunch_minutes: int
    work_minutes: int
    label: str
    is_marker: bool = False
    is_holiday: bool = False
    leave_type_id: Optional[StaffRef] = None
    leave_title: Optional[str] = None
    leave_color: Optional[str] = None

    @property
    def has_leave(self) -> bool:
        return normalize_leave_type_id(self.leave_type_id) is not None

    @property
    def leave_display(self) -> Optional[str]:
        """Leave title, or the raw id when the type is unknown."""
        if not self.has_leave:
            return None
        return self.leave_title or str(self.leave_type_id)
