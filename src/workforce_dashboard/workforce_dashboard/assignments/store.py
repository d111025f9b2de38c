"""Nested assignment mapping with copy-on-write, single-cell updates.

``set_cell`` copies the path it touches (top level, month, employee) and shares
every untouched branch, so an edit to one employee/day never disturbs another
employee or another day of the same employee.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from .model import AssignmentSet, DayMap, EmployeeAssignments

Day = Union[int, str]


def _day_key(day: Day) -> str:
    return str(int(day)) if isinstance(day, int) else str(day).strip()


def get_cell(assignments: Optional[Mapping], month_key: str, employee_id: str, day: Day) -> str:
    month = (assignments or {}).get(month_key)
    if not isinstance(month, Mapping):
        return ""
    days = month.get(employee_id)
    if not isinstance(days, Mapping):
        return ""
    value = days.get(_day_key(day), "")
    return value if isinstance(value, str) else ""


def set_cell(
    assignments: Optional[Mapping],
    month_key: str,
    employee_id: str,
    day: Day,
    value: str,
) -> AssignmentSet:
    current = dict(assignments or {})
    month_level = current.get(month_key)
    month: EmployeeAssignments = dict(month_level) if isinstance(month_level, Mapping) else {}
    employee_level = month.get(employee_id)
    days: DayMap = dict(employee_level) if isinstance(employee_level, Mapping) else {}
    days[_day_key(day)] = value
    month[employee_id] = days
    current[month_key] = month
    return current


def month_assignments(assignments: Optional[Mapping], month_key: str) -> EmployeeAssignments:
    month = (assignments or {}).get(month_key)
    return month if isinstance(month, dict) else {}


def with_month(assignments: Optional[Mapping], month_key: str, employees: EmployeeAssignments) -> AssignmentSet:
    current = dict(assignments or {})
    current[month_key] = employees
    return current


def normalize_month(raw: Any) -> EmployeeAssignments:
    """Clean an externally loaded ``EmployeeId -> Day -> value`` payload.

    Non-mapping levels and non-string leaves are dropped; cell strings are kept
    verbatim (decoding happens at read time).
    """
    if not isinstance(raw, Mapping):
        return {}

    out: EmployeeAssignments = {}
    for employee_id, days in raw.items():
        if not isinstance(days, Mapping):
            continue
        out[str(employee_id)] = {
            _day_key(day): value for day, value in days.items() if isinstance(value, str)
        }
    return out
