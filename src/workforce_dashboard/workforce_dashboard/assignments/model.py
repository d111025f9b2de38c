from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Union

# Wire shapes: MonthKey -> EmployeeId -> Day ("1".."31") -> ShiftCellValue.
DayMap = Dict[str, str]
EmployeeAssignments = Dict[str, DayMap]
AssignmentSet = Dict[str, EmployeeAssignments]


@dataclass(frozen=True)
class Unset:
    """No shift assigned."""


@dataclass(frozen=True)
class RestDay:
    """Employee is not scheduled to work; excludes any time range."""


@dataclass(frozen=True)
class TimeRange:
    """Start/end pair; either side may still be empty while it is being entered."""

    start: str = ""
    end: str = ""


ShiftCell = Union[Unset, RestDay, TimeRange]


@dataclass(frozen=True)
class SaveOutcome:
    """Result of a create-or-replace save of one project/month assignment set."""

    inserted: bool
