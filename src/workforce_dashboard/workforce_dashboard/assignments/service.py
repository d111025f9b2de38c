from __future__ import annotations

from typing import Any, Callable

from ..common.calendar_utils import parse_month_key
from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError, PersistenceError
from ..projects.repository import ProjectRepository
from .grid import AssignmentGridController, ExportResult
from .model import EmployeeAssignments, SaveOutcome
from .repository import AssignmentRepository
from .store import normalize_month


class AssignmentService:
    """Use case: read/replace a project's monthly assignments and export them."""

    def __init__(
        self,
        assignments: AssignmentRepository,
        projects: ProjectRepository,
        *,
        grid_factory: Callable[[], AssignmentGridController],
    ):
        self._assignments = assignments
        self._projects = projects
        self._grid_factory = grid_factory

    def _require_project(self, project_id: str) -> str:
        project_id = require_non_empty(project_id, "Project ID")
        if not self._projects.get_by_id(project_id):
            raise NotFoundError(f"Project {project_id} not found")
        return project_id

    def get_assignments(self, project_id: str, month_year: str) -> EmployeeAssignments:
        parse_month_key(month_year)
        project_id = self._require_project(project_id)
        try:
            return self._assignments.load_assignments(project_id, month_year.strip())
        except Exception as exc:
            raise PersistenceError(f"Failed to load shift assignments for {month_year}") from exc

    def replace_assignments(self, project_id: str, month_year: str, assignments: Any) -> SaveOutcome:
        parse_month_key(month_year)
        project_id = self._require_project(project_id)
        try:
            return self._assignments.save_assignments(project_id, month_year.strip(), normalize_month(assignments))
        except Exception as exc:
            raise PersistenceError(f"Failed to save shift assignments for {month_year}") from exc

    def open_grid(self, project_id: str, month_year: str) -> AssignmentGridController:
        year, month = parse_month_key(month_year)
        project_id = self._require_project(project_id)
        grid = self._grid_factory()
        grid.load_directory()
        grid.load(project_id, year, month)
        return grid

    def export_month(self, project_id: str, month_year: str) -> ExportResult:
        return self.open_grid(project_id, month_year).on_export()
