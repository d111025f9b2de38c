from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Project


class ProjectRepository(Protocol):
    def list_all(self) -> Sequence[Project]:
        raise NotImplementedError

    def get_by_id(self, project_id: str) -> Optional[Project]:
        raise NotImplementedError

    def create(self, project: Project) -> None:
        raise NotImplementedError

    def update(self, project: Project) -> bool:
        raise NotImplementedError

    def delete(self, project_id: str) -> bool:
        raise NotImplementedError
