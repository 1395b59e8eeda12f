from __future__ import annotations

from ...core.enums import ColorPriority
from ..model import ColorPalette, ColorResolution, DayColorFacts
from .base import ColorStrategy


class HolidayColorStrategy(ColorStrategy):
    """Any holiday shift paints the whole day."""

    priority = ColorPriority.HOLIDAY

    def decide(self, *, facts: DayColorFacts, palette: ColorPalette) -> ColorResolution:
        reasons = [f"HOLIDAY priority: {facts.holiday_shifts_count} holiday shift(s) found"]
        if facts.has_leave:
            reasons.append(f"Note: {facts.leave_shifts_count} leave shift(s) ignored due to holiday priority")
        return self._resolution(palette.holiday_color, facts, reasons)
