from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ..core.constants import DEFAULT_BACKGROUND_COLOR, HOLIDAY_COLOR
from ..days.model import DayCell
from ..records.model import LeaveType, StaffRef
from ..weeks.model import WeekInfo


@dataclass(frozen=True)
class GridOptions:
    """Switches for one grid build.

    `include_marker_only_days=False` renders holiday/leave-only days blank.
    """

    include_marker_only_days: bool = True
    holiday_color: str = HOLIDAY_COLOR
    default_color: str = DEFAULT_BACKGROUND_COLOR


@dataclass(frozen=True)
class StaffWeekRow:
    staff_id: StaffRef
    staff_name: str
    is_deleted: bool
    has_person_info: bool
    week_num: int
    days: List[DayCell]
    total_minutes: int
    formatted_total: str

    @property
    def has_data(self) -> bool:
        return any(d.has_data for d in self.days)


@dataclass(frozen=True)
class WeekGroup:
    week_info: WeekInfo
    staff_rows: List[StaffWeekRow]
    has_data: bool


@dataclass(frozen=True)
class GridBuildResult:
    week_groups: List[WeekGroup]
    records_total: int = 0
    records_in_range: int = 0
    shifts_built: int = 0
    skipped: int = 0
    dropped_empty: int = 0


@dataclass(frozen=True)
class TimetableView:
    """Everything the service returns for one group and month."""

    group_id: StaffRef
    group_name: str
    week_start_day: int
    weeks: List[WeekInfo]
    week_groups: List[WeekGroup]
    leave_types: List[LeaveType] = field(default_factory=list)
    skipped_records: int = 0


@dataclass(frozen=True)
class ExportFile:
    file_name: str
    content: bytes
