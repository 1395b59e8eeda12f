from __future__ import annotations

from enum import Enum, IntEnum


class ColorPriority(IntEnum):
    """Tier that decided a day's display color. Lower value wins."""

    HOLIDAY = 1
    LEAVE_TYPE = 2
    DEFAULT = 3


class IssueSeverity(str, Enum):
    """Severity of a record integrity finding."""

    ERROR = "ERROR"
    WARNING = "WARNING"


class QualityRating(str, Enum):
    """Coarse rating of how much of a staff week carries data."""

    GOOD = "GOOD"
    FAIR = "FAIR"
    POOR = "POOR"
    NO_DATA = "NO_DATA"
