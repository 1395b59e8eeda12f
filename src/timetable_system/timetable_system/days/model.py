from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from ..colors.model import ColorResolution
from ..shifts.model import Shift


@dataclass(frozen=True)
class DayCell:
    day_number: int
    date: date
    shifts: List[Shift]
    total_minutes: int
    has_data: bool
    has_holiday: bool
    has_leave: bool
    leave_title: Optional[str]
    leave_color: Optional[str]
    color: ColorResolution
    formatted_content: str

    @property
    def work_shifts(self) -> List[Shift]:
        return [s for s in self.shifts if not s.is_marker]

    @property
    def marker_shifts(self) -> List[Shift]:
        return [s for s in self.shifts if s.is_marker]

    @property
    def is_marker_only(self) -> bool:
        return bool(self.shifts) and not self.work_shifts

    @property
    def background_color(self) -> str:
        return self.color.color
