from __future__ import annotations

from dataclasses import dataclass

from .model import DayColorFacts
from .strategies.base import ColorStrategy
from .strategies.default_strategy import DefaultColorStrategy
from .strategies.holiday_strategy import HolidayColorStrategy
from .strategies.leave_type_strategy import LeaveTypeColorStrategy


@dataclass
class ColorStrategyFactory:
    """Factory Pattern: choose the color tier that applies to a day."""

    def for_day(self, facts: DayColorFacts) -> ColorStrategy:
        if facts.has_holiday:
            return HolidayColorStrategy()
        if facts.leave_colors:
            return LeaveTypeColorStrategy()
        return DefaultColorStrategy()
