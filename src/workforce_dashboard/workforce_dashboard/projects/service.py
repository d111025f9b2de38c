from __future__ import annotations

import uuid
from dataclasses import replace
from typing import Any, Mapping, Sequence

from ..common.validators import optional_text, require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import Project
from .repository import ProjectRepository
from .roster import parse_roster

DEPARTMENT_SUFFIX = " Department"


def department_matches(project_department: str, department: str) -> bool:
    """``"IT"`` matches both ``"IT"`` and ``"IT Department"``."""
    wanted = department.strip().lower()
    actual = (project_department or "").strip().lower()
    return actual in {wanted, f"{wanted}{DEPARTMENT_SUFFIX.lower()}"}


class ProjectService:
    """Use case: manage projects and their employee rosters."""

    def __init__(self, projects: ProjectRepository, employees: EmployeeRepository):
        self._projects = projects
        self._employees = employees

    def list_projects(self, *, department: str | None = None) -> Sequence[Project]:
        projects = self._projects.list_all()
        if not department:
            return projects
        return [p for p in projects if department_matches(p.department, department)]

    def get_project(self, project_id: str) -> Project:
        project = self._projects.get_by_id(project_id)
        if not project:
            raise NotFoundError(f"Project {project_id} not found")
        return project

    def _validated_roster(self, raw: Any) -> frozenset[str]:
        roster = parse_roster(raw)
        unknown = sorted(e for e in roster if not self._employees.get_by_id(e))
        if unknown:
            raise ValidationError(f"Unknown employee(s): {', '.join(unknown)}")
        return roster

    def create_project(self, payload: Mapping[str, Any]) -> Project:
        name = require_non_empty(payload.get("name", ""), "Project name")
        project_id = optional_text(payload.get("id")) or uuid.uuid4().hex[:12]

        if self._projects.get_by_id(project_id):
            raise ValidationError(f"Project ID {project_id} already exists")

        project = Project(
            project_id=project_id,
            name=name,
            department=optional_text(payload.get("department")),
            employee_ids=self._validated_roster(payload.get("employees")),
        )
        self._projects.create(project)
        return project

    def update_project(self, project_id: str, updates: Mapping[str, Any]) -> Project:
        project = self.get_project(project_id)

        changes: dict[str, Any] = {}
        if "name" in updates:
            changes["name"] = require_non_empty(updates.get("name", ""), "Project name")
        if "department" in updates:
            changes["department"] = optional_text(updates.get("department"))
        if "employees" in updates:
            changes["employee_ids"] = self._validated_roster(updates.get("employees"))

        updated = replace(project, **changes)
        self._projects.update(updated)
        return updated

    def delete_project(self, project_id: str) -> None:
        if not self._projects.delete(project_id):
            raise NotFoundError(f"Project {project_id} not found")
