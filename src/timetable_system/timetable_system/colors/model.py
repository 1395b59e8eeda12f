from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from ..core.constants import DEFAULT_BACKGROUND_COLOR, HOLIDAY_COLOR
from ..core.enums import ColorPriority


@dataclass(frozen=True)
class ColorPalette:
    holiday_color: str = HOLIDAY_COLOR
    default_color: str = DEFAULT_BACKGROUND_COLOR


@dataclass(frozen=True)
class DayColorFacts:
    """What the shifts of one day say about coloring."""

    holiday_shifts_count: int = 0
    leave_shifts_count: int = 0
    leave_colors: Tuple[str, ...] = ()
    shifts_count: int = 0

    @property
    def has_holiday(self) -> bool:
        return self.holiday_shifts_count > 0

    @property
    def has_leave(self) -> bool:
        return self.leave_shifts_count > 0


@dataclass(frozen=True)
class ColorResolution:
    color: str
    priority: ColorPriority
    reasons: Tuple[str, ...] = field(default_factory=tuple)
    has_holiday: bool = False
    has_leave: bool = False
    holiday_shifts_count: int = 0
    leave_shifts_count: int = 0

    def as_dict(self) -> dict:
        return {
            "color": self.color,
            "priority": self.priority.name,
            "reasons": list(self.reasons),
            "has_holiday": self.has_holiday,
            "has_leave": self.has_leave,
            "holiday_shifts_count": self.holiday_shifts_count,
            "leave_shifts_count": self.leave_shifts_count,
        }
