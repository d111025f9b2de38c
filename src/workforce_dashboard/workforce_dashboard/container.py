from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from typing import Mapping, Optional
from zoneinfo import ZoneInfo

from .assignments.exporter import ScheduleWriter
from .assignments.grid import AssignmentGridController
from .assignments.mysql_assignment_repository import MySQLAssignmentRepository
from .assignments.repository import AssignmentRepository
from .assignments.service import AssignmentService
from .core.constants import DEFAULT_TIMEZONE
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .projects.mysql_project_repository import MySQLProjectRepository
from .projects.repository import ProjectRepository
from .projects.service import ProjectService


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    projects_repo: ProjectRepository
    assignments_repo: AssignmentRepository

    employee_service: EmployeeService
    project_service: ProjectService
    assignment_service: AssignmentService

    tz: Optional[tzinfo] = None
    conn: Optional[DatabaseConnection] = None


def build_services(
    *,
    employees_repo: EmployeeRepository,
    projects_repo: ProjectRepository,
    assignments_repo: AssignmentRepository,
    tz: Optional[tzinfo] = None,
    writer: Optional[ScheduleWriter] = None,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    def grid_factory() -> AssignmentGridController:
        return AssignmentGridController(assignments_repo, employees_repo, projects_repo, writer=writer, tz=tz)

    return Container(
        employees_repo=employees_repo,
        projects_repo=projects_repo,
        assignments_repo=assignments_repo,
        employee_service=EmployeeService(employees_repo),
        project_service=ProjectService(projects_repo, employees_repo),
        assignment_service=AssignmentService(assignments_repo, projects_repo, grid_factory=grid_factory),
        tz=tz,
        conn=conn,
    )


def build_container(*, db_config: Mapping, timezone: str = DEFAULT_TIMEZONE) -> Container:
    conn = DatabaseConnection(DBConfig.from_mapping(db_config))
    return build_services(
        employees_repo=MySQLEmployeeRepository(conn),
        projects_repo=MySQLProjectRepository(conn),
        assignments_repo=MySQLAssignmentRepository(conn),
        tz=ZoneInfo(timezone),
        conn=conn,
    )
