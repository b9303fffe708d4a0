"""Project repository port."""

from typing import Protocol

from rolekeeper.domain.entities import Project


class ProjectRepository(Protocol):
    """Port for project lookup."""

    async def get_by_id(self, project_id: int) -> Project | None: ...
