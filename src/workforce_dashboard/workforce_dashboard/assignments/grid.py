"""Shift grid for one project/month selection.

The controller owns the in-memory assignment set for the current selection:
it loads it from an :class:`AssignmentRepository`, applies cell edits locally
(no round-trip per edit), saves the whole month as one create-or-replace and
exports the grid as a spreadsheet.

Loads and saves are split into ``select``/``receive_*`` and
``begin_save``/``complete_save``/``fail_save`` so an asynchronous caller can
hand responses back whenever they arrive. A response whose ticket no longer
matches the current selection is dropped silently. ``load`` and ``on_save``
run the same steps synchronously.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Any, Optional, Sequence

from ..common.calendar_utils import day_columns, month_key
from ..common.validators import require_month_index
from ..core.enums import GridState
from ..core.exceptions import PersistenceError, SaveInProgressError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..projects.model import Project
from ..projects.repository import ProjectRepository
from ..projects.roster import roster_rows
from ..shifts.model import ShiftWindowSpan
from ..shifts.windows import current_shift_window, shift_window_span
from .codec import decode_cell, edit_time_bound, normalize_cell_value, toggle_rest_day
from .exporter import ExcelScheduleWriter, ScheduleDocument, ScheduleWriter, build_schedule_document
from .model import AssignmentSet, EmployeeAssignments, SaveOutcome, ShiftCell
from .repository import AssignmentRepository
from .store import get_cell, month_assignments, normalize_month, set_cell, with_month

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridSelection:
    project_id: str
    year: int
    month: int

    @property
    def month_key(self) -> str:
        return month_key(self.year, self.month)


@dataclass(frozen=True)
class LoadTicket:
    serial: int
    selection: GridSelection


@dataclass(frozen=True)
class SaveTicket:
    serial: int
    selection: GridSelection
    assignments: EmployeeAssignments


@dataclass(frozen=True)
class ExportResult:
    document: ScheduleDocument
    payload: bytes


class AssignmentGridController:
    def __init__(
        self,
        assignments: AssignmentRepository,
        employees: EmployeeRepository,
        projects: ProjectRepository,
        *,
        writer: Optional[ScheduleWriter] = None,
        tz: Optional[tzinfo] = None,
    ):
        self._assignments_repo = assignments
        self._employees_repo = employees
        self._projects_repo = projects
        self._writer = writer or ExcelScheduleWriter()
        self._tz = tz

        self._employees: list[Employee] = []
        self._projects: dict[str, Project] = {}

        self._state = GridState.IDLE
        self._selection: Optional[GridSelection] = None
        self._serial = 0
        self._assignments: AssignmentSet = {}
        self._save_in_flight: Optional[SaveTicket] = None
        # Survives selection changes until the next successful load_directory().
        self._directory_notice: Optional[str] = None
        self.notice: Optional[str] = None

    # -- read side -------------------------------------------------------

    @property
    def state(self) -> GridState:
        return self._state

    @property
    def selection(self) -> Optional[GridSelection]:
        return self._selection

    @property
    def saving(self) -> bool:
        return self._save_in_flight is not None

    @property
    def can_save(self) -> bool:
        return self._state == GridState.READY and not self.saving

    @property
    def employees(self) -> Sequence[Employee]:
        return list(self._employees)

    @property
    def projects(self) -> Sequence[Project]:
        return list(self._projects.values())

    @property
    def project(self) -> Optional[Project]:
        if self._selection is None:
            return None
        return self._projects.get(self._selection.project_id)

    @property
    def assignments(self) -> EmployeeAssignments:
        if self._selection is None:
            return {}
        return month_assignments(self._assignments, self._selection.month_key)

    def rows(self) -> list[Employee]:
        project = self.project
        if project is None:
            return []
        return roster_rows(self._employees, project.employee_ids)

    def day_columns(self) -> list[str]:
        if self._selection is None:
            return []
        return day_columns(self._selection.year, self._selection.month)

    def cell(self, employee_id: str, day: Any) -> str:
        if self._selection is None:
            return ""
        return get_cell(self._assignments, self._selection.month_key, employee_id, day)

    def cell_view(self, employee_id: str, day: Any) -> ShiftCell:
        return decode_cell(self.cell(employee_id, day))

    def current_shift(self, now: Optional[datetime] = None) -> ShiftWindowSpan:
        return shift_window_span(current_shift_window(now, tz=self._tz))

    def grid_view(self) -> dict:
        days = self.day_columns()
        return {
            "state": self._state.value,
            "projectId": self._selection.project_id if self._selection else None,
            "monthYear": self._selection.month_key if self._selection else None,
            "days": days,
            "rows": [
                {
                    "id": emp.employee_id,
                    "name": emp.name,
                    "cells": {d: self.cell(emp.employee_id, d) for d in days},
                }
                for emp in self.rows()
            ],
            "saving": self.saving,
            "notice": self.notice,
        }

    # -- loading ---------------------------------------------------------

    def load_directory(self) -> bool:
        """Refresh employees and projects; keeps the previous lists on failure."""
        try:
            employees = list(self._employees_repo.list_all())
            projects = list(self._projects_repo.list_all())
        except Exception as exc:
            logger.warning("Failed to load employees/projects: %s", exc)
            self._directory_notice = "Failed to fetch employees and projects. Please try again later."
            self.notice = self._directory_notice
            return False

        self._employees = employees
        self._projects = {p.project_id: p for p in projects}
        if self.notice == self._directory_notice:
            self.notice = None
        self._directory_notice = None
        return True

    def select(self, project_id: str, year: int, month: int) -> LoadTicket:
        """Switch to a project/month. Unsaved edits of the previous selection are dropped."""
        selection = GridSelection(str(project_id), int(year), require_month_index(month))
        self._serial += 1
        self._selection = selection
        self._assignments = {}
        self._state = GridState.LOADING
        self.notice = self._directory_notice
        return LoadTicket(self._serial, selection)

    def _is_current(self, serial: int) -> bool:
        return serial == self._serial

    def receive_assignments(self, ticket: LoadTicket, payload: Any) -> bool:
        if not self._is_current(ticket.serial):
            logger.debug("Dropping stale assignments for %s", ticket.selection)
            return False

        self._assignments = with_month({}, ticket.selection.month_key, normalize_month(payload))
        self._state = GridState.READY
        return True

    def receive_load_failure(self, ticket: LoadTicket, exc: BaseException) -> bool:
        if not self._is_current(ticket.serial):
            logger.debug("Dropping stale load failure for %s: %s", ticket.selection, exc)
            return False

        logger.warning(
            "Failed to load assignments for %s %s: %s",
            ticket.selection.project_id,
            ticket.selection.month_key,
            exc,
        )
        self._assignments = with_month({}, ticket.selection.month_key, {})
        self._state = GridState.READY
        self.notice = "Failed to load shift assignments. Showing an empty schedule."
        return True

    def load(self, project_id: str, year: int, month: int) -> GridSelection:
        ticket = self.select(project_id, year, month)
        try:
            payload = self._assignments_repo.load_assignments(ticket.selection.project_id, ticket.selection.month_key)
        except Exception as exc:
            self.receive_load_failure(ticket, exc)
        else:
            self.receive_assignments(ticket, payload)
        return ticket.selection

    # -- editing ---------------------------------------------------------

    def _editable_day(self, employee_id: str, day: Any) -> str:
        if self._selection is None or self._state not in (GridState.READY, GridState.SAVING):
            raise ValidationError("Shift grid is not ready for editing")

        day_key = str(day).strip()
        if day_key not in self.day_columns():
            raise ValidationError(f"Day {day_key} is outside {self._selection.month_key}")
        project = self.project
        on_roster = project is not None and project.has_employee(employee_id)
        if not on_roster or not any(emp.employee_id == employee_id for emp in self._employees):
            raise ValidationError(f"Employee {employee_id} is not on this project's roster")
        return day_key

    def on_cell_edit(self, employee_id: str, day: Any, raw_value: Any) -> str:
        """Store one cell locally; returns the normalised value that was stored."""
        day_key = self._editable_day(employee_id, day)
        value = normalize_cell_value(raw_value)
        self._assignments = set_cell(self._assignments, self._selection.month_key, employee_id, day_key, value)
        return value

    def on_toggle_rest_day(self, employee_id: str, day: Any) -> str:
        return self.on_cell_edit(employee_id, day, toggle_rest_day(self.cell(employee_id, day)))

    def on_time_edit(
        self,
        employee_id: str,
        day: Any,
        *,
        start: Optional[str] = None,
        end: Optional[str] = None,
    ) -> str:
        value = edit_time_bound(self.cell(employee_id, day), start=start, end=end)
        return self.on_cell_edit(employee_id, day, value)

    # -- saving ----------------------------------------------------------

    def begin_save(self) -> SaveTicket:
        if self._save_in_flight is not None:
            raise SaveInProgressError("A save is already in progress")
        if self._selection is None or self._state != GridState.READY:
            raise ValidationError("Shift grid is not ready to be saved")

        snapshot = {emp: dict(days) for emp, days in self.assignments.items()}
        ticket = SaveTicket(self._serial, self._selection, snapshot)
        self._save_in_flight = ticket
        self._state = GridState.SAVING
        return ticket

    def _finish_save(self, ticket: SaveTicket) -> bool:
        if self._save_in_flight is ticket:
            self._save_in_flight = None
        current = self._is_current(ticket.serial)
        if current and self._state == GridState.SAVING:
            self._state = GridState.READY
        return current

    def complete_save(self, ticket: SaveTicket, outcome: SaveOutcome) -> SaveOutcome:
        if self._finish_save(ticket):
            self.notice = self._directory_notice
        logger.info(
            "Saved shift assignments for %s %s (%s)",
            ticket.selection.project_id,
            ticket.selection.month_key,
            "inserted" if outcome.inserted else "updated",
        )
        return outcome

    def fail_save(self, ticket: SaveTicket, exc: BaseException) -> None:
        logger.error(
            "Failed to save shift assignments for %s %s",
            ticket.selection.project_id,
            ticket.selection.month_key,
            exc_info=exc,
        )
        if self._finish_save(ticket):
            self.notice = "Failed to save shift assignments. Your changes are kept; please try again."

    def on_save(self) -> SaveOutcome:
        ticket = self.begin_save()
        try:
            outcome = self._assignments_repo.save_assignments(
                ticket.selection.project_id,
                ticket.selection.month_key,
                ticket.assignments,
            )
        except Exception as exc:
            self.fail_save(ticket, exc)
            raise PersistenceError(f"Failed to save shift assignments for {ticket.selection.month_key}") from exc
        return self.complete_save(ticket, outcome)

    # -- export ----------------------------------------------------------

    def build_document(self) -> ScheduleDocument:
        if self._selection is None or self._state not in (GridState.READY, GridState.SAVING):
            raise ValidationError("Shift grid is not ready to be exported")

        project = self.project
        return build_schedule_document(
            project_name=project.name if project else self._selection.project_id,
            month_key=self._selection.month_key,
            employees=self.rows(),
            days=self.day_columns(),
            assignments=self.assignments,
        )

    def on_export(self) -> ExportResult:
        document = self.build_document()
        previous = self._state
        self._state = GridState.EXPORTING
        try:
            payload = self._writer.write(document)
        finally:
            self._state = previous
        return ExportResult(document=document, payload=payload)
