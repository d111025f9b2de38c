import pytest

from src.workforce_dashboard.workforce_dashboard.core.enums import EmployeeStatus
from src.workforce_dashboard.workforce_dashboard.core.exceptions import NotFoundError, ValidationError
from src.workforce_dashboard.workforce_dashboard.employees.service import EmployeeService


def test_create_employee_defaults_to_active(employees_repo):
    service = EmployeeService(employees_repo)

    employee = service.create_employee({"id": "E9", "name": " Saman ", "department": "IT Department"})

    assert employee.name == "Saman"
    assert employee.status == EmployeeStatus.ACTIVE
    assert service.get_employee("E9") == employee


def test_create_employee_rejects_bad_input(employees_repo):
    service = EmployeeService(employees_repo)

    with pytest.raises(ValidationError):
        service.create_employee({"id": "E1", "name": "Duplicate"})
    with pytest.raises(ValidationError):
        service.create_employee({"id": "", "name": "No id"})
    with pytest.raises(ValidationError):
        service.create_employee({"id": "E8", "name": "x", "status": "retired"})


def test_update_employee_changes_only_given_fields(employees_repo):
    service = EmployeeService(employees_repo)

    updated = service.update_employee("E1", {"status": "inactive"})

    assert updated.status == EmployeeStatus.INACTIVE
    assert updated.name == "Nimal Perera"
    assert employees_repo.get_by_id("E1").status == EmployeeStatus.INACTIVE


def test_missing_employee(employees_repo):
    service = EmployeeService(employees_repo)
    with pytest.raises(NotFoundError):
        service.get_employee("nobody")
    with pytest.raises(NotFoundError):
        service.update_employee("nobody", {"name": "x"})
    with pytest.raises(NotFoundError):
        service.delete_employee("nobody")


def test_numeric_fields_are_stringified(employees_repo):
    service = EmployeeService(employees_repo)

    employee = service.create_employee({"id": 77, "name": "Numeric", "department": 12})
    assert employee.employee_id == "77"
    assert employee.department == "12"

    assert service.update_employee("77", {"gender": 1}).gender == "1"
