from __future__ import annotations

from datetime import date
from typing import Sequence

from ..common.datetime_utils import to_date
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import StaffRef
from .repository import HolidayRepository


class MySQLHolidayRepository(HolidayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_dates(self, *, group_id: StaffRef, start_date: date, end_date: date) -> Sequence[date]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT DISTINCT holiday_date
                FROM holidays
                WHERE holiday_date BETWEEN %s AND %s
                  AND (group_id IS NULL OR group_id=%s)
                ORDER BY holiday_date
                """,
                (start_date, end_date, group_id),
            )
            dates = (to_date(r["holiday_date"]) for r in fetchall(cur))
            return [d for d in dates if d is not None]
