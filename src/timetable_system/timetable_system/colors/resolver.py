"""Day color resolution shared by the grid view and the spreadsheet export.

Tiers, first match wins: HOLIDAY, then the dominant LEAVE_TYPE color, then
DEFAULT. Resolution is pure: the same shifts always give the same result.
"""
from __future__ import annotations

from typing import List, Optional, Sequence

from ..core.constants import (
    BORDER_DARKEN_FACTOR,
    BRIGHTNESS_THRESHOLD,
    DARK_TEXT_COLOR,
    DEFAULT_BACKGROUND_COLOR,
    HOLIDAY_COLOR,
    LIGHT_TEXT_COLOR,
)
from ..records.model import LeaveColorLookup
from ..shifts.model import Shift
from .factory import ColorStrategyFactory
from .model import ColorPalette, ColorResolution, DayColorFacts
from .strategies.leave_type_strategy import get_dominant_leave_color

_FACTORY = ColorStrategyFactory()


def shift_leave_color(shift: Shift, leave_lookup: Optional[LeaveColorLookup] = None) -> Optional[str]:
    if not shift.has_leave:
        return None
    if shift.leave_color:
        return shift.leave_color.strip()
    if leave_lookup is not None:
        leave = leave_lookup(shift.leave_type_id)
        if leave is not None and leave.color and leave.color.strip():
            return leave.color.strip()
    return None


def collect_color_facts(shifts: Sequence[Shift], leave_lookup: Optional[LeaveColorLookup] = None) -> DayColorFacts:
    holidays = 0
    leaves = 0
    colors: List[str] = []
    for shift in shifts:
        if shift.is_holiday:
            holidays += 1
        if shift.has_leave:
            leaves += 1
            color = shift_leave_color(shift, leave_lookup)
            if color:
                colors.append(color)
    return DayColorFacts(
        holiday_shifts_count=holidays,
        leave_shifts_count=leaves,
        leave_colors=tuple(colors),
        shifts_count=len(shifts),
    )


def resolve_day_color(
    shifts: Sequence[Shift],
    leave_lookup: Optional[LeaveColorLookup] = None,
    *,
    holiday_color: str = HOLIDAY_COLOR,
    default_color: str = DEFAULT_BACKGROUND_COLOR,
) -> ColorResolution:
    facts = collect_color_facts(shifts, leave_lookup)
    palette = ColorPalette(holiday_color=holiday_color, default_color=default_color)
    return _FACTORY.for_day(facts).decide(facts=facts, palette=palette)


def _rgb(hex_color: str) -> Optional[tuple[int, int, int]]:
    value = (hex_color or "").strip().lstrip("#")
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    if len(value) != 6:
        return None
    try:
        return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)
    except ValueError:
        return None


def get_text_color_for_background(background: str) -> str:
    """Black on light backgrounds, white on dark ones."""
    rgb = _rgb(background)
    if rgb is None:
        return DARK_TEXT_COLOR
    r, g, b = rgb
    brightness = (r * 299 + g * 587 + b * 114) / 1000
    return DARK_TEXT_COLOR if brightness > BRIGHTNESS_THRESHOLD else LIGHT_TEXT_COLOR


def darken_hex_color(hex_color: str, factor: float = BORDER_DARKEN_FACTOR) -> str:
    rgb = _rgb(hex_color)
    if rgb is None:
        return hex_color
    r, g, b = (max(0, min(255, int(round(c * (1 - factor))))) for c in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def to_argb(hex_color: str) -> str:
    """Spreadsheet fill color, e.g. "#f44336" -> "FFF44336"."""
    rgb = _rgb(hex_color)
    if rgb is None:
        rgb = _rgb(DEFAULT_BACKGROUND_COLOR)
    r, g, b = rgb
    return f"FF{r:02X}{g:02X}{b:02X}"
