"""Role catalog use cases."""

from rolekeeper.application.services import Resolver
from rolekeeper.domain.entities import Role


class ListRolesUseCase:
    """List the seeded roles."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self) -> list[Role]:
        async with self._uow_factory() as uow:
            roles = await uow.roles.list_all()
        return sorted(roles, key=lambda r: r.id)


class GetRoleUseCase:
    """Get one role by system name or numeric id."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._resolver = Resolver(unit_of_work_factory)

    async def execute(self, role_ref: str) -> Role:
        return await self._resolver.role(role_ref)
