from __future__ import annotations

from datetime import datetime

import pytest

from src.workforce_dashboard.workforce_dashboard.assignments.grid import AssignmentGridController
from src.workforce_dashboard.workforce_dashboard.employees.model import Employee
from src.workforce_dashboard.workforce_dashboard.projects.model import Project
from tests.fakes import InMemoryAssignments, InMemoryEmployees, InMemoryProjects, RecordingWriter


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 10, 15, 9, 0, 0)


@pytest.fixture
def employees_repo() -> InMemoryEmployees:
    # Deliberately not sorted: grid rows must follow this order.
    return InMemoryEmployees(
        [
            Employee(employee_id="E2", name="Kumari Silva", department="IT Department"),
            Employee(employee_id="E1", name="Nimal Perera", department="IT Department"),
            Employee(employee_id="E3", name="Ruwan Fernando", department="Data Entry Department"),
        ]
    )


@pytest.fixture
def projects_repo() -> InMemoryProjects:
    return InMemoryProjects(
        [
            Project(project_id="P1", name="Helpdesk", department="IT Department", employee_ids=frozenset({"E1", "E2"})),
            Project(project_id="P2", name="Claims", department="Data Entry Department", employee_ids=frozenset({"E3"})),
        ]
    )


@pytest.fixture
def assignments_repo() -> InMemoryAssignments:
    return InMemoryAssignments()


@pytest.fixture
def writer() -> RecordingWriter:
    return RecordingWriter()


@pytest.fixture
def grid(assignments_repo, employees_repo, projects_repo, writer) -> AssignmentGridController:
    controller = AssignmentGridController(assignments_repo, employees_repo, projects_repo, writer=writer)
    controller.load_directory()
    return controller
