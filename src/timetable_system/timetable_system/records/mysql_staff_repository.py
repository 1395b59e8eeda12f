from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .mapper import staff_from_row
from .model import StaffMember, StaffRef
from .repository import StaffRepository


class MySQLStaffRepository(StaffRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_group(self, group_id: StaffRef) -> Sequence[StaffMember]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT staff_id, full_name, employee_ref, is_deleted, is_template
                FROM staff_members
                WHERE group_id=%s
                ORDER BY full_name
                """,
                (group_id,),
            )
            return [staff_from_row(r) for r in fetchall(cur)]

    def get_group_name(self, group_id: StaffRef) -> Optional[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT group_name FROM staff_groups WHERE group_id=%s", (group_id,))
            rows = fetchall(cur)
            return str(rows[0]["group_name"]) if rows else None
