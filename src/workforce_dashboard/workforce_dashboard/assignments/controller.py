from __future__ import annotations

import io

from flask import Flask, request, send_file

from ..common.responses import json_errors, ok
from ..container import Container
from .exporter import XLSX_MIMETYPE


def register(app: Flask, container: Container) -> None:
    @app.route(
        "/api/shiftAssignments/<project_id>/<month_year>",
        methods=["GET"],
        endpoint="api_shift_assignments",
    )
    @json_errors
    def api_shift_assignments(project_id: str, month_year: str):
        assignments = container.assignment_service.get_assignments(project_id, month_year)
        return ok({"assignments": assignments})

    @app.route("/api/shiftAssignments", methods=["POST"], endpoint="api_shift_assignments_save")
    @json_errors
    def api_shift_assignments_save():
        payload = request.get_json(silent=True) or {}
        outcome = container.assignment_service.replace_assignments(
            str(payload.get("projectId") or ""),
            str(payload.get("monthYear") or ""),
            payload.get("assignments") or {},
        )
        message = "Shift assignments saved" if outcome.inserted else "Shift assignments updated"
        return ok({"inserted": outcome.inserted}, status=201 if outcome.inserted else 200, message=message)

    @app.route(
        "/api/shiftAssignments/<project_id>/<month_year>/grid",
        methods=["GET"],
        endpoint="api_shift_assignments_grid",
    )
    @json_errors
    def api_shift_assignments_grid(project_id: str, month_year: str):
        grid = container.assignment_service.open_grid(project_id, month_year)
        return ok(grid.grid_view())

    @app.route(
        "/api/shiftAssignments/<project_id>/<month_year>/export",
        methods=["GET"],
        endpoint="api_shift_assignments_export",
    )
    @json_errors
    def api_shift_assignments_export(project_id: str, month_year: str):
        result = container.assignment_service.export_month(project_id, month_year)
        return send_file(
            io.BytesIO(result.payload),
            download_name=result.document.filename,
            as_attachment=True,
            mimetype=XLSX_MIMETYPE,
        )
