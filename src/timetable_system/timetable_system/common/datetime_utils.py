from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def to_date(value: Any) -> Optional[date]:
    """Reduce a date-ish value to a plain date, or None when it is not one.

    Accepts date, datetime and ISO strings (time part ignored).
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return parse_iso_date(value.strip()[:10])
        except ValueError:
            return None
    return None


def day_number(value: date) -> int:
    """Day of week as 1=Sunday .. 7=Saturday."""
    return value.isoweekday() % 7 + 1


def format_day_month(value: date) -> str:
    return value.strftime("%d/%m")


def format_day_month_dashed(value: date) -> str:
    return value.strftime("%d-%m")


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch it easier.
    """
    return datetime.now().date()
