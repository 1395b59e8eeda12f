from __future__ import annotations

from abc import ABC, abstractmethod

from ...core.enums import ColorPriority
from ..model import ColorPalette, ColorResolution, DayColorFacts


class ColorStrategy(ABC):
    """Strategy Pattern: encapsulate how a day's display color is chosen."""

    priority: ColorPriority

    @abstractmethod
    def decide(self, *, facts: DayColorFacts, palette: ColorPalette) -> ColorResolution:
        raise NotImplementedError

    def _resolution(self, color: str, facts: DayColorFacts, reasons: list[str]) -> ColorResolution:
        return ColorResolution(
            color=color,
            priority=self.priority,
            reasons=tuple(reasons),
            has_holiday=facts.has_holiday,
            has_leave=facts.has_leave,
            holiday_shifts_count=facts.holiday_shifts_count,
            leave_shifts_count=facts.leave_shifts_count,
        )
