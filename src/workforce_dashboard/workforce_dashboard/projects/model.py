from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet


@dataclass(frozen=True)
class Project:
    """Domain entity: a project and the set of employee ids rostered on it."""

    project_id: str
    name: str
    department: str = ""
    employee_ids: FrozenSet[str] = field(default_factory=frozenset)

    def has_employee(self, employee_id: str) -> bool:
        return employee_id in self.employee_ids

    def to_dict(self) -> dict:
        return {
            "id": self.project_id,
            "name": self.name,
            "department": self.department,
            "employees": sorted(self.employee_ids),
        }
