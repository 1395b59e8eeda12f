"""Calendar weeks of a month for a configurable week start day.

Day numbers run 1=Sunday .. 7=Saturday. A month is covered by whole weeks, so
the first and last weeks usually spill into the neighbouring months.
"""
from __future__ import annotations

import calendar
import logging
import math
from datetime import date, datetime, timedelta
from typing import List, Optional

from ..common.datetime_utils import day_number, format_day_month
from ..core.constants import DAY_NAMES, DAYS_IN_WEEK, MAX_WEEKS_IN_MONTH, SHORT_DAY_NAMES
from ..core.settings import normalize_week_start_day
from .model import WeekInfo

logger = logging.getLogger(__name__)


def _as_date(value: date) -> date:
    return value.date() if isinstance(value, datetime) else value


def get_week_start(value: date, week_start_day: int) -> date:
    """Most recent `week_start_day` on or before `value`."""
    value = _as_date(value)
    week_start_day = normalize_week_start_day(week_start_day)
    offset = (day_number(value) - week_start_day) % DAYS_IN_WEEK
    return value - timedelta(days=offset)


def get_week_end(value: date, week_start_day: int) -> date:
    return get_week_start(value, week_start_day) + timedelta(days=DAYS_IN_WEEK - 1)


def build_week_label(week_num: int, week_start: date, week_end: date) -> str:
    return f"Week {week_num}: {format_day_month(week_start)} - {format_day_month(week_end)}"


def calculate_weeks(month_ref: date, week_start_day: int, *, weeks_count: Optional[int] = None) -> List[WeekInfo]:
    """Every week intersecting the month of `month_ref`, in order.

    Invalid `week_start_day` values are clamped to the default. `weeks_count`
    overrides the computed count only when it still covers the whole month
    and stays within MAX_WEEKS_IN_MONTH; other values are ignored.
    """
    month_ref = _as_date(month_ref)
    week_start_day = normalize_week_start_day(week_start_day)

    first = month_ref.replace(day=1)
    days_in_month = calendar.monthrange(first.year, first.month)[1]
    last = first.replace(day=days_in_month)

    leading = (day_number(first) - week_start_day) % DAYS_IN_WEEK
    trailing = (week_start_day + DAYS_IN_WEEK - 1 - day_number(last)) % DAYS_IN_WEEK
    count = math.ceil((days_in_month + leading + trailing) / DAYS_IN_WEEK)

    if weeks_count is not None:
        valid = isinstance(weeks_count, int) and not isinstance(weeks_count, bool)
        if valid and count <= weeks_count <= MAX_WEEKS_IN_MONTH:
            count = weeks_count
        else:
            logger.warning("Invalid weeks count %r, using computed %s", weeks_count, count)

    first_week_start = first - timedelta(days=leading)
    weeks: List[WeekInfo] = []
    for i in range(count):
        start = first_week_start + timedelta(days=i * DAYS_IN_WEEK)
        end = start + timedelta(days=DAYS_IN_WEEK - 1)
        weeks.append(WeekInfo(week_num=i + 1, week_start=start, week_end=end, label=build_week_label(i + 1, start, end)))
    return weeks


def get_ordered_days_of_week(week_start_day: int) -> List[int]:
    """Day numbers in display order, e.g. 2 -> [2, 3, 4, 5, 6, 7, 1]."""
    week_start_day = normalize_week_start_day(week_start_day)
    return [(week_start_day - 1 + i) % DAYS_IN_WEEK + 1 for i in range(DAYS_IN_WEEK)]


def get_date_for_day_in_week(week_start: date, day: int, week_start_day: int) -> date:
    week_start_day = normalize_week_start_day(week_start_day)
    offset = (day - week_start_day) % DAYS_IN_WEEK
    return _as_date(week_start) + timedelta(days=offset)


def get_dates_in_week(week_start: date) -> List[date]:
    week_start = _as_date(week_start)
    return [week_start + timedelta(days=i) for i in range(DAYS_IN_WEEK)]


def get_working_days_in_week(week_start: date, week_end: date) -> int:
    """Days Monday..Friday in the closed range."""
    count = 0
    current = _as_date(week_start)
    week_end = _as_date(week_end)
    while current <= week_end:
        if current.weekday() < 5:
            count += 1
        current += timedelta(days=1)
    return count


def is_date_in_week(value: date, week_start: date, week_end: date) -> bool:
    return _as_date(week_start) <= _as_date(value) <= _as_date(week_end)


def are_dates_in_same_week(first: date, second: date, week_start_day: int) -> bool:
    return get_week_start(first, week_start_day) == get_week_start(second, week_start_day)


def get_week_number(value: date) -> int:
    """ISO 8601 week number."""
    return _as_date(value).isocalendar()[1]


def get_day_name(day: int) -> str:
    return DAY_NAMES[(day - 1) % DAYS_IN_WEEK]


def get_short_day_name(day: int) -> str:
    return SHORT_DAY_NAMES[(day - 1) % DAYS_IN_WEEK]
