"""Assignment repository port - the (actor, role, actee) relation."""

from typing import Protocol

from rolekeeper.application.dto.query_options import QueryOptions
from rolekeeper.domain.entities import Assignment


class AssignmentRepository(Protocol):
    """Port for assignment persistence, keyed on actee id."""

    async def list_by_actee(
        self, actee_id: str, options: QueryOptions
    ) -> list[Assignment]: ...

    async def list_by_actee_and_role(
        self, actee_id: str, role_id: int, options: QueryOptions
    ) -> list[Assignment]: ...

    async def list_for_forms_in_project(
        self,
        project_id: int,
        options: QueryOptions,
        role_id: int | None = None,
    ) -> dict[str, list[Assignment]]: ...

    async def list_for_actor_on_actees(
        self, actor_id: str, actee_ids: list[str]
    ) -> list[Assignment]: ...

    async def grant(self, actor_id: str, role_id: int, actee_id: str) -> bool: ...

    async def revoke(self, actor_id: str, role_id: int, actee_id: str) -> bool: ...
