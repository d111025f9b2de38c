from __future__ import annotations

from flask import Flask, request

from ..common.responses import json_errors, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/projects", methods=["GET"], endpoint="api_projects")
    @json_errors
    def api_projects():
        department = request.args.get("department") or None
        projects = container.project_service.list_projects(department=department)
        return ok([p.to_dict() for p in projects])

    @app.route("/api/projects/<project_id>", methods=["GET"], endpoint="api_project")
    @json_errors
    def api_project(project_id: str):
        return ok(container.project_service.get_project(project_id).to_dict())

    @app.route("/api/projects", methods=["POST"], endpoint="api_projects_create")
    @json_errors
    def api_projects_create():
        project = container.project_service.create_project(request.get_json(silent=True) or {})
        return ok(project.to_dict(), status=201, message="Project added")

    @app.route("/api/projects/<project_id>", methods=["PUT"], endpoint="api_projects_update")
    @json_errors
    def api_projects_update(project_id: str):
        project = container.project_service.update_project(project_id, request.get_json(silent=True) or {})
        return ok(project.to_dict(), message="Project updated")

    @app.route("/api/projects/<project_id>", methods=["DELETE"], endpoint="api_projects_delete")
    @json_errors
    def api_projects_delete(project_id: str):
        container.project_service.delete_project(project_id)
        return ok(message="Project deleted")
