from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, dump_json_column, fetchall, fetchone
from .model import Project
from .repository import ProjectRepository
from .roster import parse_roster


def _to_project(r: dict) -> Project:
    return Project(
        project_id=str(r["project_id"]),
        name=r["name"],
        department=r.get("department") or "",
        employee_ids=parse_roster(r.get("employees")),
    )


class MySQLProjectRepository(ProjectRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Project]:
        with db_cursor(self._conn_factory, readonly=True) as (_, cur):
            cur.execute(
                """
                SELECT project_id, name, department, employees
                FROM projects
                ORDER BY created_at, project_id
                """
            )
            return [_to_project(r) for r in fetchall(cur)]

    def get_by_id(self, project_id: str) -> Optional[Project]:
        with db_cursor(self._conn_factory, readonly=True) as (_, cur):
            cur.execute(
                "SELECT project_id, name, department, employees FROM projects WHERE project_id=%s",
                (project_id,),
            )
            r = fetchone(cur)
            return _to_project(r) if r else None

    def create(self, project: Project) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO projects(project_id, name, department, employees) VALUES(%s,%s,%s,%s)",
                (project.project_id, project.name, project.department, dump_json_column(sorted(project.employee_ids))),
            )

    def update(self, project: Project) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE projects SET name=%s, department=%s, employees=%s WHERE project_id=%s",
                (project.name, project.department, dump_json_column(sorted(project.employee_ids)), project.project_id),
            )
            return cur.rowcount > 0

    def delete(self, project_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM projects WHERE project_id=%s", (project_id,))
            return cur.rowcount > 0
