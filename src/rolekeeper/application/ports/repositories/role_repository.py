"""Role repository port."""

from typing import Protocol

from rolekeeper.domain.entities import Role


class RoleRepository(Protocol):
    """Port for role lookup. Roles are seeded and never written here."""

    async def get_by_id(self, role_id: int) -> Role | None: ...

    async def get_by_system_name(self, system: str) -> Role | None: ...

    async def list_all(self) -> list[Role]: ...

    async def get_by_ids(self, role_ids: list[int]) -> list[Role]: ...
