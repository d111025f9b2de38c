import io

import pandas as pd

from src.workforce_dashboard.workforce_dashboard.assignments.exporter import (
    ExcelScheduleWriter,
    build_schedule_document,
    export_filename,
)
from src.workforce_dashboard.workforce_dashboard.employees.model import Employee


def _document():
    return build_schedule_document(
        project_name="Helpdesk",
        month_key="2025-02",
        employees=[Employee("E2", "Kumari Silva"), Employee("E1", "Nimal Perera")],
        days=[str(d) for d in range(1, 29)],
        assignments={"E1": {"3": "RD", "4": "08:30-20:30"}},
    )


def test_document_layout():
    doc = _document()

    assert doc.filename == "Helpdesk_2025-02_Schedule.xlsx"
    assert doc.sheet_name == "Shift Schedule"
    assert doc.columns[:3] == ("EmployeeId", "EmployeeName", "Day 1")
    assert doc.columns[-1] == "Day 28"
    assert [r["EmployeeId"] for r in doc.rows] == ["E2", "E1"]
    assert doc.rows[1]["Day 3"] == "RD"
    assert doc.rows[1]["Day 4"] == "08:30-20:30"
    assert doc.rows[1]["Day 5"] == "-"
    assert set(doc.rows[0].values()) - {"E2", "Kumari Silva"} == {"-"}


def test_export_filename_replaces_path_characters():
    assert export_filename("Ops/Night: A", "2025-10") == "Ops_Night_ A_2025-10_Schedule.xlsx"
    assert export_filename("  ", "2025-10") == "project_2025-10_Schedule.xlsx"


def test_excel_writer_produces_readable_workbook():
    doc = _document()

    payload = ExcelScheduleWriter().write(doc)
    frame = pd.read_excel(io.BytesIO(payload), sheet_name="Shift Schedule", dtype=str)

    assert list(frame.columns) == list(doc.columns)
    assert frame["EmployeeId"].tolist() == ["E2", "E1"]
    assert frame.loc[1, "Day 3"] == "RD"
    assert frame.loc[0, "Day 28"] == "-"
