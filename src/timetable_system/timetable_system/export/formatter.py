from __future__ import annotations

import re
from typing import Any, Dict, List, Sequence, Tuple

from ..colors.resolver import get_text_color_for_background
from ..common.datetime_utils import format_day_month, format_day_month_dashed
from ..core.constants import (
    DAYS_IN_WEEK,
    DEFAULT_WEEK_START_DAY,
    EXPORT_DAY_COLUMN_WIDTH,
    EXPORT_NAME_COLUMN_WIDTH,
)
from ..core.enums import ColorPriority
from ..core.settings import normalize_week_start_day
from ..days.model import DayCell
from ..timetable.model import WeekGroup
from ..weeks.calculator import get_date_for_day_in_week, get_day_name, get_ordered_days_of_week
from ..weeks.model import WeekInfo
from .model import CellStyle, ExportMatrix, ExportStatistics, MergeRange

TITLE_STYLE = CellStyle(bold=True, font_size=14, horizontal="center")
WEEK_TITLE_STYLE = CellStyle(bold=True, fill="#e6e6e6", horizontal="center")
HEADER_STYLE = CellStyle(bold=True, fill="#f0f0f0", horizontal="center", border=True)
DATES_STYLE = CellStyle(fill="#f8f8f8", horizontal="center", border=True)
NAME_STYLE = CellStyle(bold=True, vertical="top", border=True)
TOTAL_STYLE = CellStyle(italic=True, horizontal="right")


def _clean_name(value: str) -> str:
    return re.sub(r"[^a-zA-Z0-9]", "_", value or "")


def generate_file_name(group_name: str, weeks: Sequence[WeekInfo]) -> str:
    clean = _clean_name(group_name)
    if not weeks:
        return f"Timetable_{clean}.xlsx"
    start = format_day_month_dashed(weeks[0].week_start)
    end = format_day_month_dashed(weeks[-1].week_end)
    return f"Timetable_{clean}_{start}_to_{end}.xlsx"


def day_cell_style(cell: DayCell) -> CellStyle:
    """Export style taken from the same color resolution the view uses."""
    fill = cell.color.color
    return CellStyle(
        fill=fill,
        font_color=get_text_color_for_background(fill),
        bold=cell.color.priority == ColorPriority.HOLIDAY,
        vertical="top",
        wrap_text=True,
        border=True,
    )


def to_export_matrix(
    week_groups: Sequence[WeekGroup],
    *,
    group_name: str,
    week_start_day: int = DEFAULT_WEEK_START_DAY,
) -> ExportMatrix:
    week_start_day = normalize_week_start_day(week_start_day)
    ordered_days = get_ordered_days_of_week(week_start_day)
    width = 1 + DAYS_IN_WEEK

    rows: List[List[Any]] = []
    styles: Dict[Tuple[int, int], CellStyle] = {}
    merges: List[MergeRange] = []

    def add(row: List[Any], style: CellStyle | None = None) -> int:
        rows.append(row)
        index = len(rows) - 1
        if style is not None:
            for col in range(len(row)):
                styles[(index, col)] = style
        return index

    title = add([f"Time table for Centre: {group_name}"], TITLE_STYLE)
    merges.append(MergeRange(title, 0, width - 1))
    add([])
    header_count = len(rows)

    for position, group in enumerate(week_groups):
        week = group.week_info
        week_row = add([week.label] + [""] * DAYS_IN_WEEK, WEEK_TITLE_STYLE)
        merges.append(MergeRange(week_row, 0, width - 1))
        add(["Employee"] + [get_day_name(d) for d in ordered_days], HEADER_STYLE)
        add(
            [""] + [format_day_month(get_date_for_day_in_week(week.week_start, d, week_start_day)) for d in ordered_days],
            DATES_STYLE,
        )

        for staff_row in group.staff_rows:
            index = add([staff_row.staff_name] + [day.formatted_content for day in staff_row.days])
            styles[(index, 0)] = NAME_STYLE
            for col, day in enumerate(staff_row.days, start=1):
                styles[(index, col)] = day_cell_style(day)
            add([staff_row.formatted_total.strip()] + [""] * DAYS_IN_WEEK)
            styles[(len(rows) - 1, 0)] = TOTAL_STYLE

        if position < len(week_groups) - 1:
            add([])

    return ExportMatrix(
        header_rows=rows[:header_count],
        data_rows=rows[header_count:],
        cell_styles=styles,
        merges=merges,
        column_widths=[EXPORT_NAME_COLUMN_WIDTH] + [EXPORT_DAY_COLUMN_WIDTH] * DAYS_IN_WEEK,
        file_name=generate_file_name(group_name, [g.week_info for g in week_groups]),
    )


def get_export_statistics(week_groups: Sequence[WeekGroup]) -> ExportStatistics:
    staff_ids = set()
    shifts = 0
    for group in week_groups:
        for row in group.staff_rows:
            staff_ids.add(str(row.staff_id))
            shifts += sum(len(d.shifts) for d in row.days)

    if week_groups:
        first = week_groups[0].week_info.week_start
        last = week_groups[-1].week_info.week_end
        date_range = f"{format_day_month(first)} - {format_day_month(last)}"
    else:
        date_range = "No data"

    return ExportStatistics(
        total_weeks=len(week_groups),
        total_staff=len(staff_ids),
        total_records=shifts,
        date_range=date_range,
    )
