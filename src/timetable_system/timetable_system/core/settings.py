from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from types import ModuleType
from typing import Any

from .constants import DEFAULT_WEEK_START_DAY, HOLIDAY_COLOR
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


def is_valid_week_start_day(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 1 <= value <= 7


def normalize_week_start_day(value: Any) -> int:
    """Return a usable week start day (1=Sunday..7=Saturday).

    Strings such as "2" are accepted; anything else falls back to the default.
    """
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value.strip())
    if is_valid_week_start_day(value):
        return value
    logger.warning("Invalid week start day %r, using %s", value, DEFAULT_WEEK_START_DAY)
    return DEFAULT_WEEK_START_DAY


def require_setting(settings: ModuleType, name: str) -> Any:
    """Value of a setting that has no usable default."""
    value = getattr(settings, name, None)
    if value is None or value == "" or value == {}:
        raise ConfigurationError(f"{getattr(settings, '__name__', 'settings')} does not define {name}")
    return value


def normalize_hex_color(value: Any, default: str) -> str:
    if isinstance(value, str) and _HEX_COLOR.match(value.strip()):
        return value.strip().lower()
    if value not in (None, ""):
        logger.warning("Invalid color %r, using %s", value, default)
    return default


@dataclass(frozen=True)
class TimetableSettings:
    week_start_day: int = DEFAULT_WEEK_START_DAY
    holiday_color: str = HOLIDAY_COLOR
    include_marker_only_days: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_module(cls, settings: ModuleType) -> "TimetableSettings":
        return cls(
            week_start_day=normalize_week_start_day(getattr(settings, "WEEK_START_DAY", DEFAULT_WEEK_START_DAY)),
            holiday_color=normalize_hex_color(getattr(settings, "HOLIDAY_COLOR", HOLIDAY_COLOR), HOLIDAY_COLOR),
            include_marker_only_days=bool(getattr(settings, "INCLUDE_MARKER_ONLY_DAYS", True)),
            log_level=str(getattr(settings, "LOG_LEVEL", "INFO")).upper(),
        )
