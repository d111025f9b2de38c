from __future__ import annotations

from typing import Optional

from src.workforce_dashboard.workforce_dashboard.assignments.exporter import ScheduleDocument
from src.workforce_dashboard.workforce_dashboard.assignments.model import SaveOutcome
from src.workforce_dashboard.workforce_dashboard.employees.model import Employee
from src.workforce_dashboard.workforce_dashboard.projects.model import Project


class InMemoryEmployees:
    def __init__(self, employees=()):
        self._by_id: dict[str, Employee] = {e.employee_id: e for e in employees}
        self.fail = False

    def list_all(self):
        if self.fail:
            raise ConnectionError("employees backend down")
        return list(self._by_id.values())

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._by_id.get(employee_id)

    def create(self, employee: Employee) -> None:
        self._by_id[employee.employee_id] = employee

    def update(self, employee: Employee) -> bool:
        if employee.employee_id not in self._by_id:
            return False
        self._by_id[employee.employee_id] = employee
        return True

    def delete(self, employee_id: str) -> bool:
        return self._by_id.pop(employee_id, None) is not None


class InMemoryProjects:
    def __init__(self, projects=()):
        self._by_id: dict[str, Project] = {p.project_id: p for p in projects}
        self.fail = False

    def list_all(self):
        if self.fail:
            raise ConnectionError("projects backend down")
        return list(self._by_id.values())

    def get_by_id(self, project_id: str) -> Optional[Project]:
        return self._by_id.get(project_id)

    def create(self, project: Project) -> None:
        self._by_id[project.project_id] = project

    def update(self, project: Project) -> bool:
        if project.project_id not in self._by_id:
            return False
        self._by_id[project.project_id] = project
        return True

    def delete(self, project_id: str) -> bool:
        return self._by_id.pop(project_id, None) is not None


class InMemoryAssignments:
    def __init__(self, saved=None):
        self.saved: dict[tuple[str, str], dict] = dict(saved or {})
        self.load_calls: list[tuple[str, str]] = []
        self.save_calls: list[tuple[str, str, dict]] = []
        self.fail_load = False
        self.fail_save = False

    def load_assignments(self, project_id: str, month_key: str) -> dict:
        self.load_calls.append((project_id, month_key))
        if self.fail_load:
            raise ConnectionError("assignments backend down")
        return self.saved.get((project_id, month_key), {})

    def save_assignments(self, project_id: str, month_key: str, assignments: dict) -> SaveOutcome:
        self.save_calls.append((project_id, month_key, assignments))
        if self.fail_save:
            raise ConnectionError("assignments backend down")
        inserted = (project_id, month_key) not in self.saved
        self.saved[(project_id, month_key)] = assignments
        return SaveOutcome(inserted=inserted)


class RecordingWriter:
    def __init__(self):
        self.documents: list[ScheduleDocument] = []

    def write(self, document: ScheduleDocument) -> bytes:
        self.documents.append(document)
        return b"xlsx-bytes"
