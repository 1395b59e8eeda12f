from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Dict, Iterable, List

from ..records.model import StaffRef
from ..shifts.model import Shift


def staff_key(ref: StaffRef) -> str:
    return str(ref).strip()


class ShiftIndex:
    """Shifts grouped by staff reference and date for constant-time cell lookup."""

    def __init__(self, shifts: Iterable[Shift]):
        self._by_staff: Dict[str, Dict[date, List[Shift]]] = defaultdict(lambda: defaultdict(list))
        self._count = 0
        for shift in shifts:
            self._by_staff[staff_key(shift.staff_ref)][shift.work_date].append(shift)
            self._count += 1

    def __len__(self) -> int:
        return self._count

    def for_day(self, ref: StaffRef, day: date) -> List[Shift]:
        days = self._by_staff.get(staff_key(ref))
        if not days:
            return []
        return list(days.get(day, ()))

    def staff_keys(self) -> List[str]:
        return list(self._by_staff.keys())
