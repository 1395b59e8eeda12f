from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .mapper import leave_type_from_row
from .model import LeaveType
from .repository import LeaveTypeRepository


class MySQLLeaveTypeRepository(LeaveTypeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[LeaveType]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT leave_type_id, title, color FROM leave_types ORDER BY title")
            return [leave_type_from_row(r) for r in fetchall(cur)]
