from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def parse_month(value: Optional[str], *, default: Optional[date] = None) -> date:
    """Month reference from "YYYY-MM" or "YYYY-MM-DD"; day is reset to 1."""
    if not value or not value.strip():
        if default is None:
            raise ValidationError("month is required")
        return default.replace(day=1)

    text = value.strip()
    for fmt in ("%Y-%m-%d", "%Y-%m"):
        try:
            return datetime.strptime(text, fmt).date().replace(day=1)
        except ValueError:
            continue
    raise ValidationError(f"Invalid month {value!r}, expected YYYY-MM or YYYY-MM-DD")


def parse_optional_int(value: Optional[str], field_name: str) -> Optional[int]:
    if value is None or not str(value).strip():
        return None
    try:
        return int(str(value).strip())
    except ValueError as e:
        raise ValidationError(f"{field_name} must be a number") from e


def parse_flag(value: Optional[str]) -> Optional[bool]:
    if value is None or not value.strip():
        return None
    return value.strip().lower() in {"1", "true", "yes", "on"}
