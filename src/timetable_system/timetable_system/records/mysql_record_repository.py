from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .mapper import record_from_row
from .model import AttendanceRecord, StaffRef
from .repository import AttendanceRecordRepository


class MySQLAttendanceRecordRepository(AttendanceRecordRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_period(self, *, group_id: StaffRef, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT record_id, staff_ref, work_date,
                       start_hour, start_minute, end_hour, end_minute,
                       shift_start, shift_end,
                       lunch_minutes, lunch_start, lunch_end,
                       leave_type_id, is_holiday
                FROM attendance_records
                WHERE group_id=%s AND work_date BETWEEN %s AND %s
                ORDER BY work_date, record_id
                """,
                (group_id, start_date, end_date),
            )
            return [record_from_row(r) for r in fetchall(cur)]
