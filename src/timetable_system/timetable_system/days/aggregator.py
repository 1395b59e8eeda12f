from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..colors.resolver import get_dominant_leave_color, resolve_day_color, shift_leave_color
from ..common.time_utils import format_minutes_to_hours
from ..core.constants import DEFAULT_BACKGROUND_COLOR, HOLIDAY_COLOR, HOLIDAY_LABEL
from ..records.model import LeaveColorLookup
from ..shifts.builder import shift_sort_key
from ..shifts.model import Shift
from .model import DayCell


def format_day_content(shifts: Sequence[Shift]) -> str:
    """Cell text for a day.

    One work shift shows its label, several show one label per line and a
    total line. A day with markers only shows "Holiday" or the leave name.
    """
    work = [s for s in shifts if not s.is_marker]
    if work:
        if len(work) == 1:
            return work[0].label
        lines = [s.label for s in work]
        lines.append(f"Total: {format_minutes_to_hours(sum(s.work_minutes for s in work))}")
        return "\n".join(lines)

    if any(s.is_holiday for s in shifts):
        return HOLIDAY_LABEL
    for s in shifts:
        if s.leave_display:
            return s.leave_display
    return ""


def aggregate_day(
    shifts: Sequence[Shift],
    *,
    day_number: int,
    day_date: date,
    leave_lookup: Optional[LeaveColorLookup] = None,
    include_marker_only_days: bool = True,
    holiday_color: str = HOLIDAY_COLOR,
    default_color: str = DEFAULT_BACKGROUND_COLOR,
) -> DayCell:
    if not include_marker_only_days:
        shifts = [s for s in shifts if not s.is_marker]
    ordered = sorted(shifts, key=shift_sort_key)

    leave_shifts = [s for s in ordered if s.has_leave]
    leave_colors = [c for c in (shift_leave_color(s, leave_lookup) for s in leave_shifts) if c]

    return DayCell(
        day_number=day_number,
        date=day_date,
        shifts=ordered,
        total_minutes=sum(s.work_minutes for s in ordered),
        has_data=bool(ordered),
        has_holiday=any(s.is_holiday for s in ordered),
        has_leave=bool(leave_shifts),
        leave_title=leave_shifts[0].leave_display if leave_shifts else None,
        leave_color=get_dominant_leave_color(leave_colors),
        color=resolve_day_color(ordered, leave_lookup, holiday_color=holiday_color, default_color=default_color),
        formatted_content=format_day_content(ordered),
    )
