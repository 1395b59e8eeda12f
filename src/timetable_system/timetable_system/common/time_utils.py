"""Minute arithmetic for shift intervals.

All values are whole minutes. A shift whose start and end are both 00:00 is a
marker (holiday/leave only) and lasts zero minutes; any other interval whose
end is not after its start runs past midnight into the next day.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import MINUTES_PER_DAY, MINUTES_PER_HOUR


@dataclass(frozen=True)
class ClockTime:
    hour: int = 0
    minute: int = 0

    @property
    def total_minutes(self) -> int:
        return self.hour * MINUTES_PER_HOUR + self.minute

    @property
    def is_zero(self) -> bool:
        return self.hour == 0 and self.minute == 0

    @property
    def is_valid(self) -> bool:
        return _is_int(self.hour) and _is_int(self.minute) and 0 <= self.hour <= 23 and 0 <= self.minute <= 59

    def __str__(self) -> str:
        return format_clock(self.hour, self.minute)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def to_minutes(hour: int, minute: int) -> int:
    return hour * MINUTES_PER_HOUR + minute


def duration_minutes(start_hour: int, start_minute: int, end_hour: int, end_minute: int) -> int:
    start = to_minutes(start_hour, start_minute)
    end = to_minutes(end_hour, end_minute)

    if start == 0 and end == 0:
        return 0
    if end <= start:
        return (MINUTES_PER_DAY - start) + end
    return end - start


def lunch_minutes(
    *,
    explicit: Optional[int] = None,
    lunch_start: Optional[ClockTime] = None,
    lunch_end: Optional[ClockTime] = None,
) -> int:
    """Lunch break length.

    A positive explicit value wins; otherwise the lunch clock pair is used when
    present and not both 00:00. Equal start/end means no break.
    """
    if explicit is not None and explicit > 0:
        return int(explicit)

    if lunch_start is None or lunch_end is None:
        return 0
    if lunch_start.is_zero and lunch_end.is_zero:
        return 0

    start = lunch_start.total_minutes
    end = lunch_end.total_minutes
    if end > start:
        return end - start
    if end < start:
        return (MINUTES_PER_DAY - start) + end
    return 0


def work_minutes(start: ClockTime, end: ClockTime, *, lunch: int = 0) -> int:
    if start.is_zero and end.is_zero:
        return 0
    raw = duration_minutes(start.hour, start.minute, end.hour, end.minute)
    return max(0, raw - max(0, lunch))


def format_clock(hour: int, minute: int) -> str:
    return f"{hour:02d}:{minute:02d}"


def format_minutes_to_hours(minutes: int) -> str:
    """Total in "Hh MMm" form, e.g. 450 -> "7h 30m"."""
    if not minutes or minutes <= 0:
        return "0h 00m"
    return f"{minutes // MINUTES_PER_HOUR}h {minutes % MINUTES_PER_HOUR:02d}m"


def format_minutes_to_hours_minutes(minutes: int) -> str:
    """Duration in "H:MM" form, e.g. 450 -> "7:30"."""
    if not minutes or minutes <= 0:
        return "0:00"
    return f"{minutes // MINUTES_PER_HOUR}:{minutes % MINUTES_PER_HOUR:02d}"


def format_shift_label(start: ClockTime, end: ClockTime, minutes: int) -> str:
    return f"{start}-{end}({format_minutes_to_hours_minutes(minutes)})"
