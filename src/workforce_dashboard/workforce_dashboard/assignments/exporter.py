from __future__ import annotations

import io
import re
from dataclasses import dataclass
from typing import Protocol, Sequence

import pandas as pd

from ..core.constants import (
    EXPORT_EMPLOYEE_ID_COLUMN,
    EXPORT_EMPLOYEE_NAME_COLUMN,
    EXPORT_EMPTY_CELL,
    EXPORT_SHEET_NAME,
)
from ..employees.model import Employee
from .model import EmployeeAssignments

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

_UNSAFE_FILENAME_CHARS = re.compile(r'[\\/:*?"<>|]+')


@dataclass(frozen=True)
class ScheduleDocument:
    """Tabular form of one project/month grid, ready for a spreadsheet writer."""

    filename: str
    sheet_name: str
    columns: tuple[str, ...]
    rows: tuple[dict, ...]

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(list(self.rows), columns=list(self.columns))


class ScheduleWriter(Protocol):
    def write(self, document: ScheduleDocument) -> bytes:
        raise NotImplementedError


def export_filename(project_name: str, month_key: str) -> str:
    safe_name = _UNSAFE_FILENAME_CHARS.sub("_", project_name.strip()) or "project"
    return f"{safe_name}_{month_key}_Schedule.xlsx"


def build_schedule_document(
    *,
    project_name: str,
    month_key: str,
    employees: Sequence[Employee],
    days: Sequence[str],
    assignments: EmployeeAssignments,
) -> ScheduleDocument:
    """One row per employee (in the given order), one ``Day n`` column per day.

    Empty cells are written as ``"-"``; everything else verbatim.
    """
    columns = (EXPORT_EMPLOYEE_ID_COLUMN, EXPORT_EMPLOYEE_NAME_COLUMN, *(f"Day {d}" for d in days))

    rows = []
    for emp in employees:
        day_map = assignments.get(emp.employee_id) or {}
        row = {EXPORT_EMPLOYEE_ID_COLUMN: emp.employee_id, EXPORT_EMPLOYEE_NAME_COLUMN: emp.name}
        for d in days:
            row[f"Day {d}"] = day_map.get(d) or EXPORT_EMPTY_CELL
        rows.append(row)

    return ScheduleDocument(
        filename=export_filename(project_name, month_key),
        sheet_name=EXPORT_SHEET_NAME,
        columns=columns,
        rows=tuple(rows),
    )


class ExcelScheduleWriter:
    """Writes a :class:`ScheduleDocument` as an .xlsx workbook in memory."""

    mimetype = XLSX_MIMETYPE

    def write(self, document: ScheduleDocument) -> bytes:
        output = io.BytesIO()
        with pd.ExcelWriter(output, engine="openpyxl") as writer:
            document.to_frame().to_excel(writer, index=False, sheet_name=document.sheet_name)
        return output.getvalue()
