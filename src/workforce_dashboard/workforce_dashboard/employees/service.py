from __future__ import annotations

from dataclasses import replace
from typing import Any, Mapping, Sequence

from ..common.validators import optional_text, require_non_empty
from ..core.enums import EmployeeStatus
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository


def _parse_status(value: Any) -> EmployeeStatus:
    try:
        return EmployeeStatus(str(value).strip().capitalize())
    except ValueError:
        raise ValidationError(f"Unknown employee status: {value!r}")


class EmployeeService:
    """Use case: manage employee records."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")
        return employee

    def create_employee(self, payload: Mapping[str, Any]) -> Employee:
        employee_id = require_non_empty(payload.get("id", ""), "Employee ID")
        name = require_non_empty(payload.get("name", ""), "Employee name")

        if self._employees.get_by_id(employee_id):
            raise ValidationError(f"Employee ID {employee_id} already exists")

        employee = Employee(
            employee_id=employee_id,
            name=name,
            department=optional_text(payload.get("department")),
            status=_parse_status(payload.get("status") or EmployeeStatus.ACTIVE.value),
            gender=optional_text(payload.get("gender")),
            profile_image=payload.get("profileImage") or None,
        )
        self._employees.create(employee)
        return employee

    def update_employee(self, employee_id: str, updates: Mapping[str, Any]) -> Employee:
        employee = self.get_employee(employee_id)

        changes: dict[str, Any] = {}
        if "name" in updates:
            changes["name"] = require_non_empty(updates.get("name", ""), "Employee name")
        if "department" in updates:
            changes["department"] = optional_text(updates.get("department"))
        if "status" in updates:
            changes["status"] = _parse_status(updates.get("status"))
        if "gender" in updates:
            changes["gender"] = optional_text(updates.get("gender"))
        if "profileImage" in updates:
            changes["profile_image"] = updates.get("profileImage") or None

        updated = replace(employee, **changes)
        self._employees.update(updated)
        return updated

    def delete_employee(self, employee_id: str) -> None:
        if not self._employees.delete(employee_id):
            raise NotFoundError(f"Employee {employee_id} not found")
