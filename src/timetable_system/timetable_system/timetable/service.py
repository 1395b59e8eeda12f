from __future__ import annotations

import logging
from concurrent.futures import Executor
from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from ..core.settings import TimetableSettings
from ..days.model import DayCell
from ..export.formatter import to_export_matrix
from ..export.workbook import write_workbook
from ..records.model import AttendanceRecord, StaffRef, holiday_lookup_from, leave_lookup_from
from ..records.repository import (
    AttendanceRecordRepository,
    HolidayRepository,
    LeaveTypeRepository,
    StaffRepository,
)
from ..records.validation import HolidayLeaveConflict, RecordValidationReport, detect_holiday_leave_conflicts, validate_records
from ..reporting.analytics import ComprehensiveReport, generate_comprehensive_report
from ..weeks.calculator import calculate_weeks
from ..weeks.model import WeekInfo
from .assembler import build_grid_with_report
from .model import ExportFile, GridOptions, TimetableView

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MonthValidation:
    report: RecordValidationReport
    conflicts: List[HolidayLeaveConflict]


class TimetableService:
    """Loads one group's month once and runs the grid pipeline over it."""

    def __init__(
        self,
        records: AttendanceRecordRepository,
        staff: StaffRepository,
        leave_types: LeaveTypeRepository,
        holidays: HolidayRepository,
        *,
        settings: Optional[TimetableSettings] = None,
        executor: Optional[Executor] = None,
    ):
        self._records = records
        self._staff = staff
        self._leave_types = leave_types
        self._holidays = holidays
        self._settings = settings or TimetableSettings()
        self._executor = executor

    @property
    def settings(self) -> TimetableSettings:
        return self._settings

    def get_weeks(self, month_ref: date, *, week_start_day: Optional[int] = None) -> List[WeekInfo]:
        return calculate_weeks(month_ref, week_start_day or self._settings.week_start_day)

    def _load_records(self, group_id: StaffRef, weeks: List[WeekInfo]) -> List[AttendanceRecord]:
        return list(
            self._records.list_for_period(group_id=group_id, start_date=weeks[0].week_start, end_date=weeks[-1].week_end)
        )

    def build_month(
        self,
        *,
        month_ref: date,
        group_id: StaffRef,
        week_start_day: Optional[int] = None,
        include_marker_only_days: Optional[bool] = None,
    ) -> TimetableView:
        start_day = week_start_day or self._settings.week_start_day
        weeks = self.get_weeks(month_ref, week_start_day=start_day)
        first, last = weeks[0].week_start, weeks[-1].week_end

        records = self._load_records(group_id, weeks)
        roster = list(self._staff.list_for_group(group_id))
        leave_types = list(self._leave_types.list_all())
        holidays = self._holidays.list_dates(group_id=group_id, start_date=first, end_date=last)
        group_name = self._staff.get_group_name(group_id) or str(group_id)

        options = GridOptions(
            include_marker_only_days=(
                self._settings.include_marker_only_days if include_marker_only_days is None else include_marker_only_days
            ),
            holiday_color=self._settings.holiday_color,
        )
        result = build_grid_with_report(
            records,
            roster,
            weeks,
            leave_lookup_from(leave_types),
            holiday_lookup_from(holidays),
            options=options,
            executor=self._executor,
        )
        logger.info(
            "Timetable for group %s, %s..%s: %s record(s), %s staff, %s skipped",
            group_id, first, last, len(records), len(roster), result.skipped,
        )
        return TimetableView(
            group_id=group_id,
            group_name=group_name,
            week_start_day=start_day,
            weeks=weeks,
            week_groups=result.week_groups,
            leave_types=leave_types,
            skipped_records=result.skipped,
        )

    def export_month(self, *, month_ref: date, group_id: StaffRef, week_start_day: Optional[int] = None) -> ExportFile:
        view = self.build_month(month_ref=month_ref, group_id=group_id, week_start_day=week_start_day)
        matrix = to_export_matrix(view.week_groups, group_name=view.group_name, week_start_day=view.week_start_day)
        return ExportFile(file_name=matrix.file_name, content=write_workbook(matrix))

    def report_month(
        self, *, month_ref: date, group_id: StaffRef, week_start_day: Optional[int] = None
    ) -> ComprehensiveReport:
        view = self.build_month(month_ref=month_ref, group_id=group_id, week_start_day=week_start_day)
        return generate_comprehensive_report(view.week_groups)

    def validate_month(
        self, *, month_ref: date, group_id: StaffRef, week_start_day: Optional[int] = None
    ) -> MonthValidation:
        weeks = self.get_weeks(month_ref, week_start_day=week_start_day)
        records = self._load_records(group_id, weeks)
        holidays = self._holidays.list_dates(group_id=group_id, start_date=weeks[0].week_start, end_date=weeks[-1].week_end)
        return MonthValidation(
            report=validate_records(records),
            conflicts=detect_holiday_leave_conflicts(records, holiday_lookup_from(holidays)),
        )

    @staticmethod
    def to_ui(view: TimetableView) -> dict:
        """Plain dict form of a view for JSON responses."""

        def day_ui(day: DayCell) -> dict:
            return {
                "day_number": day.day_number,
                "date": day.date.strftime("%Y-%m-%d"),
                "content": day.formatted_content,
                "total_minutes": day.total_minutes,
                "has_data": day.has_data,
                "has_holiday": day.has_holiday,
                "has_leave": day.has_leave,
                "leave_title": day.leave_title,
                "color": day.color.as_dict(),
            }

        return {
            "group_id": view.group_id,
            "group_name": view.group_name,
            "week_start_day": view.week_start_day,
            "skipped_records": view.skipped_records,
            "leave_types": [
                {"id": lt.leave_type_id, "title": lt.title, "color": lt.color} for lt in view.leave_types
            ],
            "weeks": [
                {
                    "week_num": g.week_info.week_num,
                    "label": g.week_info.label,
                    "start": g.week_info.week_start.strftime("%Y-%m-%d"),
                    "end": g.week_info.week_end.strftime("%Y-%m-%d"),
                    "has_data": g.has_data,
                    "staff": [
                        {
                            "staff_id": r.staff_id,
                            "name": r.staff_name,
                            "is_deleted": r.is_deleted,
                            "has_person_info": r.has_person_info,
                            "total_minutes": r.total_minutes,
                            "total": r.formatted_total,
                            "days": [day_ui(d) for d in r.days],
                        }
                        for r in g.staff_rows
                    ],
                }
                for g in view.week_groups
            ],
        }
