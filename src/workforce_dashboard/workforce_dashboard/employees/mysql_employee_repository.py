from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import EmployeeStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "employee_id, name, department, gender, status, profile_image"


def _to_employee(r: dict) -> Employee:
    try:
        status = EmployeeStatus(r.get("status") or EmployeeStatus.ACTIVE.value)
    except ValueError:
        status = EmployeeStatus.INACTIVE
    return Employee(
        employee_id=str(r["employee_id"]),
        name=r["name"],
        department=r.get("department") or "",
        status=status,
        gender=r.get("gender") or "",
        profile_image=r.get("profile_image"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory, readonly=True) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY created_at, employee_id")
            return [_to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory, readonly=True) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (employee_id,))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def create(self, employee: Employee) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(employee_id, name, department, gender, status, profile_image)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (
                    employee.employee_id,
                    employee.name,
                    employee.department,
                    employee.gender,
                    employee.status.value,
                    employee.profile_image,
                ),
            )

    def update(self, employee: Employee) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET name=%s, department=%s, gender=%s, status=%s, profile_image=%s
                WHERE employee_id=%s
                """,
                (
                    employee.name,
                    employee.department,
                    employee.gender,
                    employee.status.value,
                    employee.profile_image,
                    employee.employee_id,
                ),
            )
            return cur.rowcount > 0

    def delete(self, employee_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE employee_id=%s", (employee_id,))
            return cur.rowcount > 0
