from __future__ import annotations

from collections import Counter
from typing import Optional, Sequence

from ...core.enums import ColorPriority
from ..model import ColorPalette, ColorResolution, DayColorFacts
from .base import ColorStrategy


def get_dominant_leave_color(colors: Sequence[str]) -> Optional[str]:
    """Most frequent color; ties go to the one seen first."""
    if not colors:
        return None
    counts = Counter(colors)
    best = colors[0]
    for color in colors:
        if counts[color] > counts[best]:
            best = color
    return best


class LeaveTypeColorStrategy(ColorStrategy):
    priority = ColorPriority.LEAVE_TYPE

    def decide(self, *, facts: DayColorFacts, palette: ColorPalette) -> ColorResolution:
        color = get_dominant_leave_color(facts.leave_colors)
        if color is None:
            # Factory only picks this strategy with at least one color.
            return self._resolution(palette.default_color, facts, ["Leave shifts found but no valid colors available"])

        used = facts.leave_colors.count(color)
        reasons = [f"LEAVE_TYPE priority: dominant leave color {color} ({used} of {len(facts.leave_colors)} colored leave shift(s))"]
        if len(set(facts.leave_colors)) > 1:
            reasons.append(f"Multiple leave colors found: {', '.join(dict.fromkeys(facts.leave_colors))}")
        return self._resolution(color, facts, reasons)
