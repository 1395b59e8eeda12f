from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core.settings import TimetableSettings
from .database.connection import DBConfig, DatabaseConnection
from .records.mysql_holiday_repository import MySQLHolidayRepository
from .records.mysql_leave_type_repository import MySQLLeaveTypeRepository
from .records.mysql_record_repository import MySQLAttendanceRecordRepository
from .records.mysql_staff_repository import MySQLStaffRepository
from .timetable.service import TimetableService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection
    settings: TimetableSettings

    records_repo: MySQLAttendanceRecordRepository
    staff_repo: MySQLStaffRepository
    leave_types_repo: MySQLLeaveTypeRepository
    holidays_repo: MySQLHolidayRepository

    timetable_service: TimetableService


def build_container(*, db_config: dict, settings: Optional[TimetableSettings] = None) -> Container:
    settings = settings or TimetableSettings()
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    records_repo = MySQLAttendanceRecordRepository(conn)
    staff_repo = MySQLStaffRepository(conn)
    leave_types_repo = MySQLLeaveTypeRepository(conn)
    holidays_repo = MySQLHolidayRepository(conn)

    timetable_service = TimetableService(
        records_repo,
        staff_repo,
        leave_types_repo,
        holidays_repo,
        settings=settings,
    )

    return Container(
        conn=conn,
        settings=settings,
        records_repo=records_repo,
        staff_repo=staff_repo,
        leave_types_repo=leave_types_repo,
        holidays_repo=holidays_repo,
        timetable_service=timetable_service,
    )
