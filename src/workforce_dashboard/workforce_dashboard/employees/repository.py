from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    def list_all(self) -> Sequence[Employee]:
        """All employees in stable insertion order (grid rows follow this order)."""

        raise NotImplementedError

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def create(self, employee: Employee) -> None:
        raise NotImplementedError

    def update(self, employee: Employee) -> bool:
        """Returns False when nothing changed (or the employee is gone)."""

        raise NotImplementedError

    def delete(self, employee_id: str) -> bool:
        raise NotImplementedError
