from __future__ import annotations

from typing import Protocol

from .model import EmployeeAssignments, SaveOutcome


class AssignmentRepository(Protocol):
    """Backing store for per-project, per-month shift assignments."""

    def load_assignments(self, project_id: str, month_key: str) -> EmployeeAssignments:
        """Return ``EmployeeId -> Day -> cell``; empty when nothing was saved yet."""

        raise NotImplementedError

    def save_assignments(self, project_id: str, month_key: str, assignments: EmployeeAssignments) -> SaveOutcome:
        """Create or wholly replace the set for ``(project_id, month_key)``."""

        raise NotImplementedError
