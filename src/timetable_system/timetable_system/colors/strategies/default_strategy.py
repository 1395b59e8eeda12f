from __future__ import annotations

from ...core.enums import ColorPriority
from ..model import ColorPalette, ColorResolution, DayColorFacts
from .base import ColorStrategy


class DefaultColorStrategy(ColorStrategy):
    """No holiday and no resolvable leave color."""

    priority = ColorPriority.DEFAULT

    def decide(self, *, facts: DayColorFacts, palette: ColorPalette) -> ColorResolution:
        if facts.shifts_count == 0:
            reason = "No shifts in day"
        elif facts.has_leave:
            reason = "Leave shifts found but no valid colors available"
        else:
            reason = "DEFAULT priority: no holidays or leave types found"
        return self._resolution(palette.default_color, facts, [reason])
