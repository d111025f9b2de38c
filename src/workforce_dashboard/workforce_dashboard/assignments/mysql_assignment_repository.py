from __future__ import annotations

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, dump_json_column, fetchone, load_json_column
from .model import EmployeeAssignments, SaveOutcome
from .repository import AssignmentRepository
from .store import normalize_month


class MySQLAssignmentRepository(AssignmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def load_assignments(self, project_id: str, month_key: str) -> EmployeeAssignments:
        with db_cursor(self._conn_factory, readonly=True) as (_, cur):
            cur.execute(
                "SELECT assignments FROM shift_assignments WHERE project_id=%s AND month_year=%s",
                (project_id, month_key),
            )
            r = fetchone(cur)
            if not r:
                return {}
            return normalize_month(load_json_column(r["assignments"], default={}))

    def save_assignments(self, project_id: str, month_key: str, assignments: EmployeeAssignments) -> SaveOutcome:
        with db_cursor(self._conn_factory) as (_, cur):
            # Lock the row (if any) so the insert/update answer matches what gets written.
            cur.execute(
                "SELECT 1 AS found FROM shift_assignments WHERE project_id=%s AND month_year=%s FOR UPDATE",
                (project_id, month_key),
            )
            existed = fetchone(cur) is not None
            cur.execute(
                """
                INSERT INTO shift_assignments(project_id, month_year, assignments)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE assignments=VALUES(assignments)
                """,
                (project_id, month_key, dump_json_column(assignments)),
            )
            return SaveOutcome(inserted=not existed)
