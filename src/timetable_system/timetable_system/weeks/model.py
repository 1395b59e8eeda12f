from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class WeekInfo:
    week_num: int
    week_start: date
    week_end: date
    label: str

    def contains(self, value: date) -> bool:
        return self.week_start <= value <= self.week_end
