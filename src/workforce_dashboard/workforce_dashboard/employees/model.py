from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import EmployeeStatus


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee that can be rostered onto projects."""

    employee_id: str
    name: str
    department: str = ""
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    gender: str = ""
    profile_image: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.employee_id,
            "name": self.name,
            "department": self.department,
            "status": self.status.value,
            "gender": self.gender,
            "profileImage": self.profile_image,
        }
