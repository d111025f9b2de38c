import pytest

from src.workforce_dashboard.workforce_dashboard.core.exceptions import NotFoundError, ValidationError
from src.workforce_dashboard.workforce_dashboard.employees.model import Employee
from src.workforce_dashboard.workforce_dashboard.projects.roster import parse_roster, roster_rows
from src.workforce_dashboard.workforce_dashboard.projects.service import ProjectService, department_matches


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, set()),
        ("", set()),
        (["E1", "E2"], {"E1", "E2"}),
        ([{"id": "E1"}, {"name": "no id"}, {"id": " E2 "}], {"E1", "E2"}),
        ('["E1", "E2"]', {"E1", "E2"}),
        ('[{"id": "E3"}]', {"E3"}),
        ("E1, E2,,", {"E1", "E2"}),
        (b'["E4"]', {"E4"}),
    ],
)
def test_parse_roster(raw, expected):
    assert parse_roster(raw) == frozenset(expected)


def test_roster_rows_keep_directory_order():
    everyone = [Employee("E3", "c"), Employee("E1", "a"), Employee("E2", "b")]
    assert [e.employee_id for e in roster_rows(everyone, ["E1", "E3"])] == ["E3", "E1"]


def test_department_matches_with_and_without_suffix():
    assert department_matches("IT Department", "IT")
    assert department_matches("IT", "it")
    assert not department_matches("Data Entry Department", "IT")


def test_list_projects_filters_by_department(projects_repo, employees_repo):
    service = ProjectService(projects_repo, employees_repo)
    assert [p.project_id for p in service.list_projects(department="IT")] == ["P1"]
    assert len(service.list_projects()) == 2


def test_create_project_validates_roster(projects_repo, employees_repo):
    service = ProjectService(projects_repo, employees_repo)

    project = service.create_project({"name": "Audit", "department": "IT Department", "employees": ["E1"]})
    assert project.project_id
    assert projects_repo.get_by_id(project.project_id).employee_ids == frozenset({"E1"})

    with pytest.raises(ValidationError):
        service.create_project({"name": "Ghost", "employees": ["E9"]})
    with pytest.raises(ValidationError):
        service.create_project({"name": " "})
    with pytest.raises(ValidationError):
        service.create_project({"id": "P1", "name": "Duplicate"})


def test_update_and_delete_project(projects_repo, employees_repo):
    service = ProjectService(projects_repo, employees_repo)

    updated = service.update_project("P2", {"employees": [{"id": "E3"}, {"id": "E1"}]})
    assert updated.employee_ids == frozenset({"E1", "E3"})
    assert updated.name == "Claims"

    service.delete_project("P2")
    with pytest.raises(NotFoundError):
        service.get_project("P2")
    with pytest.raises(NotFoundError):
        service.delete_project("P2")


def test_create_project_accepts_numeric_id(projects_repo, employees_repo):
    service = ProjectService(projects_repo, employees_repo)

    project = service.create_project({"id": 42, "name": "Numbers", "department": None})

    assert project.project_id == "42"
    assert project.department == ""
