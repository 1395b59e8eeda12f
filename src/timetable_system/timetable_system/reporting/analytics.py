"""Read-only analytics over a built grid.

Nothing here changes the grid; every function takes the week groups produced
by the assembler and returns plain summary values.
"""
from __future__ import annotations

from collections import Counter, OrderedDict
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from ..core.constants import DAYS_IN_WEEK, MINUTES_PER_HOUR
from ..days.model import DayCell
from ..timetable.model import StaffWeekRow, WeekGroup
from ..weeks.calculator import get_day_name


def _days(week_groups: Sequence[WeekGroup]) -> Iterator[Tuple[WeekGroup, StaffWeekRow, DayCell]]:
    for group in week_groups:
        for row in group.staff_rows:
            for day in row.days:
                yield group, row, day


def _percent(part: float, whole: float) -> int:
    return int(round(part / whole * 100)) if whole else 0


@dataclass(frozen=True)
class DataSummary:
    total_weeks: int
    weeks_with_data: int
    total_staff: int
    active_staff: int
    deleted_staff: int
    template_staff: int
    total_shifts: int
    total_work_minutes: int
    total_leave_shifts: int
    unique_leave_types: int
    average_hours_per_week: float
    data_completeness: int
    leave_usage_rate: int


def get_data_summary(week_groups: Sequence[WeekGroup]) -> DataSummary:
    roster = week_groups[0].staff_rows if week_groups else []
    total_weeks = len(week_groups)
    total_staff = len(roster)

    shifts = 0
    minutes = 0
    leave_shifts = 0
    leave_types = set()
    for _, _, day in _days(week_groups):
        shifts += len(day.shifts)
        minutes += day.total_minutes
        for s in day.shifts:
            if s.has_leave:
                leave_shifts += 1
                leave_types.add(str(s.leave_type_id))

    weeks_with_data = sum(1 for g in week_groups if g.has_data)
    slots = total_staff * total_weeks
    return DataSummary(
        total_weeks=total_weeks,
        weeks_with_data=weeks_with_data,
        total_staff=total_staff,
        active_staff=sum(1 for r in roster if not r.is_deleted),
        deleted_staff=sum(1 for r in roster if r.is_deleted),
        template_staff=sum(1 for r in roster if not r.has_person_info),
        total_shifts=shifts,
        total_work_minutes=minutes,
        total_leave_shifts=leave_shifts,
        unique_leave_types=len(leave_types),
        average_hours_per_week=round(minutes / MINUTES_PER_HOUR / slots, 2) if slots else 0.0,
        data_completeness=_percent(weeks_with_data, total_weeks),
        leave_usage_rate=_percent(leave_shifts, shifts),
    )


@dataclass(frozen=True)
class LeaveColorUsage:
    total_days_with_leave: int
    breakdown: List[dict]
    most_used_color: Optional[str]
    least_used_color: Optional[str]
    distribution_quality: str

    @property
    def unique_colors(self) -> int:
        return len(self.breakdown)


def analyze_leave_colors_usage(week_groups: Sequence[WeekGroup]) -> LeaveColorUsage:
    counts: "OrderedDict[str, int]" = OrderedDict()
    titles: Dict[str, List[str]] = {}
    total = 0
    for _, _, day in _days(week_groups):
        if not (day.has_leave and day.leave_color):
            continue
        total += 1
        counts[day.leave_color] = counts.get(day.leave_color, 0) + 1
        bucket = titles.setdefault(day.leave_color, [])
        for s in day.shifts:
            if s.leave_title and s.leave_title not in bucket:
                bucket.append(s.leave_title)

    breakdown = [
        {"color": color, "count": n, "percentage": _percent(n, total), "associated_types": titles[color]}
        for color, n in counts.items()
    ]
    breakdown.sort(key=lambda b: b["count"], reverse=True)

    if not counts:
        quality = "NONE"
    elif len(counts) == 1:
        quality = "SINGLE_COLOR"
    elif len(counts) <= 3:
        quality = "LIMITED_VARIETY"
    else:
        quality = "GOOD_VARIETY"

    return LeaveColorUsage(
        total_days_with_leave=total,
        breakdown=breakdown,
        most_used_color=breakdown[0]["color"] if breakdown else None,
        least_used_color=breakdown[-1]["color"] if len(breakdown) > 1 else None,
        distribution_quality=quality,
    )


@dataclass(frozen=True)
class StaffWeekAnalysis:
    has_data: bool
    days_with_data: int
    total_shifts: int
    leave_types_count: int
    total_minutes: int


def analyze_staff_week(row: StaffWeekRow) -> StaffWeekAnalysis:
    with_data = [d for d in row.days if d.has_data]
    leave_types = {str(s.leave_type_id) for d in with_data for s in d.shifts if s.has_leave}
    return StaffWeekAnalysis(
        has_data=bool(with_data),
        days_with_data=len(with_data),
        total_shifts=sum(len(d.shifts) for d in with_data),
        leave_types_count=len(leave_types),
        total_minutes=row.total_minutes,
    )


@dataclass(frozen=True)
class ProductivityMetrics:
    average_hours_per_staff: float
    median_hours_per_staff: float
    max_hours_per_staff: float
    min_hours_per_staff: float
    staff_utilization_rate: int
    average_shifts_per_day: float
    peak_work_days: List[dict] = field(default_factory=list)
    underutilized_staff: List[dict] = field(default_factory=list)
    overutilized_staff: List[dict] = field(default_factory=list)


def analyze_productivity_metrics(week_groups: Sequence[WeekGroup]) -> ProductivityMetrics:
    staff_minutes: "OrderedDict[str, int]" = OrderedDict()
    names: Dict[str, str] = {}
    day_minutes: Counter = Counter()
    shifts = 0

    for group in week_groups:
        for row in group.staff_rows:
            key = str(row.staff_id)
            names.setdefault(key, row.staff_name)
            staff_minutes[key] = staff_minutes.get(key, 0) + row.total_minutes
            for day in row.days:
                day_minutes[day.day_number] += day.total_minutes
                shifts += len(day.shifts)

    hours = [{"staff_name": names[k], "total_hours": round(m / MINUTES_PER_HOUR, 2)} for k, m in staff_minutes.items()]
    values = sorted(h["total_hours"] for h in hours)
    average = round(sum(values) / len(values), 2) if values else 0.0

    peak = [
        {"day_name": get_day_name(day), "total_hours": round(m / MINUTES_PER_HOUR, 2)}
        for day, m in day_minutes.items()
    ]
    peak.sort(key=lambda p: p["total_hours"], reverse=True)

    total_days = len(week_groups) * DAYS_IN_WEEK
    return ProductivityMetrics(
        average_hours_per_staff=average,
        median_hours_per_staff=values[len(values) // 2] if values else 0.0,
        max_hours_per_staff=values[-1] if values else 0.0,
        min_hours_per_staff=values[0] if values else 0.0,
        staff_utilization_rate=_percent(sum(1 for v in values if v > 0), len(values)),
        average_shifts_per_day=round(shifts / total_days, 2) if total_days else 0.0,
        peak_work_days=peak,
        underutilized_staff=sorted(
            (h for h in hours if 0 < h["total_hours"] < average * 0.5), key=lambda h: h["total_hours"]
        ),
        overutilized_staff=sorted(
            (h for h in hours if h["total_hours"] > average * 1.5), key=lambda h: h["total_hours"], reverse=True
        ),
    )


@dataclass(frozen=True)
class LeavePatterns:
    total_leave_requests: int
    by_type: List[dict]
    by_day: List[dict]
    by_week: List[dict]
    staff_with_most_leave: List[dict]
    average_leave_per_staff: float
    distribution_quality: str


def analyze_leave_patterns(week_groups: Sequence[WeekGroup], *, top: int = 10) -> LeavePatterns:
    total = 0
    by_type: Counter = Counter()
    by_day: Counter = Counter()
    by_week: Counter = Counter()
    by_staff: Counter = Counter()

    for group, row, day in _days(week_groups):
        for s in day.shifts:
            if not s.has_leave:
                continue
            total += 1
            by_type[s.leave_display] += 1
            by_day[day.day_number] += 1
            by_week[group.week_info.week_num] += 1
            by_staff[row.staff_name] += 1

    total_staff = len(week_groups[0].staff_rows) if week_groups else 0
    if total == 0:
        quality = "NO_LEAVE"
    elif len(by_staff) < total_staff * 0.2:
        quality = "CONCENTRATED"
    elif len(by_staff) < total_staff * 0.5:
        quality = "MODERATE"
    else:
        quality = "WELL_DISTRIBUTED"

    return LeavePatterns(
        total_leave_requests=total,
        by_type=[{"type": t, "count": n, "percentage": _percent(n, total)} for t, n in by_type.most_common()],
        by_day=[{"day_name": get_day_name(d), "count": n} for d, n in by_day.most_common()],
        by_week=[{"week_num": w, "count": by_week[w]} for w in sorted(by_week)],
        staff_with_most_leave=[{"staff_name": name, "leave_count": n} for name, n in by_staff.most_common(top)],
        average_leave_per_staff=round(total / total_staff, 2) if total_staff else 0.0,
        distribution_quality=quality,
    )


@dataclass(frozen=True)
class ComprehensiveReport:
    summary: DataSummary
    leave_colors: LeaveColorUsage
    productivity: ProductivityMetrics
    leave_patterns: LeavePatterns
    recommendations: List[str]
    generated_at: datetime


def generate_comprehensive_report(week_groups: Sequence[WeekGroup], *, now: Optional[datetime] = None) -> ComprehensiveReport:
    summary = get_data_summary(week_groups)
    leave_colors = analyze_leave_colors_usage(week_groups)
    productivity = analyze_productivity_metrics(week_groups)
    patterns = analyze_leave_patterns(week_groups)

    recommendations: List[str] = []
    if summary.data_completeness < 50:
        recommendations.append(f"Improve data completeness - only {summary.data_completeness}% of weeks have data")
    if summary.leave_usage_rate > 30:
        recommendations.append(f"High leave usage rate ({summary.leave_usage_rate}%) - consider reviewing leave policies")
    if productivity.staff_utilization_rate < 70:
        recommendations.append(
            f"Low staff utilization ({productivity.staff_utilization_rate}%) - consider workload redistribution"
        )
    if productivity.overutilized_staff:
        recommendations.append(
            f"{len(productivity.overutilized_staff)} staff members are overutilized - consider workload balancing"
        )
    if leave_colors.distribution_quality == "SINGLE_COLOR":
        recommendations.append("Only one leave color type detected - consider diversifying leave types")
    if patterns.distribution_quality == "CONCENTRATED":
        recommendations.append("Leave requests are concentrated among few staff - monitor leave distribution")

    return ComprehensiveReport(
        summary=summary,
        leave_colors=leave_colors,
        productivity=productivity,
        leave_patterns=patterns,
        recommendations=recommendations,
        generated_at=now or datetime.now(),
    )
