"""Week grid assembly.

Records are turned into shifts once, indexed by staff and date, then every
staff member gets one row of seven day cells per week. Rows are independent,
so an optional executor may compute them in parallel; the output is the same.
"""
from __future__ import annotations

import logging
from concurrent.futures import Executor
from datetime import date, datetime
from typing import Iterable, List, Optional, Sequence

from ..common.datetime_utils import day_number
from ..common.time_utils import format_minutes_to_hours
from ..core.exceptions import MissingInputError
from ..days.aggregator import aggregate_day
from ..records.model import (
    AttendanceRecord,
    HolidayLookup,
    LeaveColorLookup,
    StaffMember,
    no_holidays,
    no_leave_types,
)
from ..shifts.builder import build_shifts
from ..weeks.calculator import get_dates_in_week
from ..weeks.model import WeekInfo
from .index import ShiftIndex, staff_key
from .model import GridBuildResult, GridOptions, StaffWeekRow, WeekGroup

logger = logging.getLogger(__name__)


def staff_sort_key(member: StaffMember):
    """Active before deleted, real people before templates, then by name."""
    return (bool(member.deleted), not member.has_person_info, (member.name or "").casefold(), str(member.staff_id))


def sort_staff(roster: Iterable[StaffMember]) -> List[StaffMember]:
    seen: set[str] = set()
    unique: List[StaffMember] = []
    for member in roster:
        key = staff_key(member.staff_id)
        if key in seen:
            logger.warning("Duplicate staff member %s ignored", member.staff_id)
            continue
        seen.add(key)
        unique.append(member)
    return sorted(unique, key=staff_sort_key)


def sort_staff_rows(rows: Iterable[StaffWeekRow]) -> List[StaffWeekRow]:
    return sorted(
        rows,
        key=lambda r: (bool(r.is_deleted), not r.has_person_info, (r.staff_name or "").casefold(), str(r.staff_id)),
    )


def build_staff_row(
    member: StaffMember,
    week: WeekInfo,
    index: ShiftIndex,
    *,
    leave_lookup: LeaveColorLookup,
    options: GridOptions,
) -> StaffWeekRow:
    days = [
        aggregate_day(
            index.for_day(member.record_key, day),
            day_number=day_number(day),
            day_date=day,
            leave_lookup=leave_lookup,
            include_marker_only_days=options.include_marker_only_days,
            holiday_color=options.holiday_color,
            default_color=options.default_color,
        )
        for day in get_dates_in_week(week.week_start)
    ]
    total = sum(d.total_minutes for d in days)
    return StaffWeekRow(
        staff_id=member.staff_id,
        staff_name=member.name,
        is_deleted=bool(member.deleted),
        has_person_info=bool(member.has_person_info),
        week_num=week.week_num,
        days=days,
        total_minutes=total,
        formatted_total=format_minutes_to_hours(total),
    )


def _in_range(record: AttendanceRecord, first: date, last: date) -> bool:
    # Records without a usable date stay in so they get counted as skipped.
    if not isinstance(record.work_date, date):
        return True
    value = record.work_date.date() if isinstance(record.work_date, datetime) else record.work_date
    return first <= value <= last


def build_grid_with_report(
    records: Optional[Sequence[AttendanceRecord]],
    staff_roster: Optional[Sequence[StaffMember]],
    weeks: Optional[Sequence[WeekInfo]],
    leave_lookup: Optional[LeaveColorLookup] = None,
    holiday_lookup: Optional[HolidayLookup] = None,
    *,
    options: GridOptions = GridOptions(),
    executor: Optional[Executor] = None,
) -> GridBuildResult:
    if records is None:
        raise MissingInputError("records are required")
    if staff_roster is None:
        raise MissingInputError("staff roster is required")
    if weeks is None:
        raise MissingInputError("weeks are required")

    records = list(records)
    if not records or not staff_roster or not weeks:
        return GridBuildResult(week_groups=[], records_total=len(records))

    leave_lookup = leave_lookup or no_leave_types
    holiday_lookup = holiday_lookup or no_holidays
    weeks = sorted(weeks, key=lambda w: w.week_start)

    first, last = weeks[0].week_start, weeks[-1].week_end
    in_range = [r for r in records if _in_range(r, first, last)]
    built = build_shifts(in_range, leave_lookup, holiday_lookup)
    index = ShiftIndex(built.shifts)
    members = sort_staff(staff_roster)

    def rows_for(member: StaffMember) -> List[StaffWeekRow]:
        return [build_staff_row(member, week, index, leave_lookup=leave_lookup, options=options) for week in weeks]

    if executor is not None:
        per_member = list(executor.map(rows_for, members))
    else:
        per_member = [rows_for(m) for m in members]

    groups: List[WeekGroup] = []
    for i, week in enumerate(weeks):
        rows = [member_rows[i] for member_rows in per_member]
        groups.append(WeekGroup(week_info=week, staff_rows=rows, has_data=any(r.has_data for r in rows)))

    known = {staff_key(m.record_key) for m in members}
    orphans = [k for k in index.staff_keys() if k not in known]
    if orphans:
        logger.info("%s staff reference(s) in records have no roster entry", len(orphans))

    logger.debug(
        "Built %s week(s) for %s staff from %s record(s) (%s skipped)",
        len(groups), len(members), len(in_range), built.skipped,
    )
    return GridBuildResult(
        week_groups=groups,
        records_total=len(records),
        records_in_range=len(in_range),
        shifts_built=len(built.shifts),
        skipped=built.skipped,
        dropped_empty=built.dropped_empty,
    )


def build_grid(
    records: Optional[Sequence[AttendanceRecord]],
    staff_roster: Optional[Sequence[StaffMember]],
    weeks: Optional[Sequence[WeekInfo]],
    leave_lookup: Optional[LeaveColorLookup] = None,
    holiday_lookup: Optional[HolidayLookup] = None,
    *,
    options: GridOptions = GridOptions(),
    executor: Optional[Executor] = None,
) -> List[WeekGroup]:
    """Weekly staff grid for the given weeks; empty when any input is empty."""
    return build_grid_with_report(
        records, staff_roster, weeks, leave_lookup, holiday_lookup, options=options, executor=executor
    ).week_groups
