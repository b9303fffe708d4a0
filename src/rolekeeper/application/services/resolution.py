"""Reference resolution - roles, actors and actees, looked up concurrently."""

import asyncio
from collections.abc import Awaitable
from typing import Any

from rolekeeper.application.ports import ActeeLocator
from rolekeeper.domain.entities import Actee, Actor, Project, Role
from rolekeeper.domain.exceptions import NotFound
from rolekeeper.domain.value_objects import RoleReference


async def gather_or_fail(*aws: Awaitable[Any]) -> list[Any]:
    """Run independent lookups concurrently; on first failure cancel the rest and re-raise."""
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


class Resolver:
    """Resolves path references to entities. Each lookup uses its own unit of work."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def role(self, reference: str) -> Role:
        """Resolve a role by system name or numeric id - never both."""
        ref = RoleReference.parse(reference)
        async with self._uow_factory() as uow:
            if ref.system_name is not None:
                role = await uow.roles.get_by_system_name(ref.system_name)
            else:
                role = await uow.roles.get_by_id(ref.role_id)
        if not role:
            raise NotFound("Role", reference)
        return role

    async def actor(self, actor_id: str) -> Actor:
        """Resolve a live actor by id."""
        async with self._uow_factory() as uow:
            actor = await uow.actors.get_by_id(actor_id)
        if not actor or actor.deleted_at is not None:
            raise NotFound("Actor", actor_id)
        return actor

    async def actee(self, locator: ActeeLocator, params: dict[str, str]) -> Actee:
        """Locate an actee through its type-specific locator."""
        async with self._uow_factory() as uow:
            return await locator.locate(uow, params)

    async def project(self, project_id: int) -> Project:
        """Resolve a live project by id."""
        async with self._uow_factory() as uow:
            project = await uow.projects.get_by_id(project_id)
        if not project or project.deleted_at is not None:
            raise NotFound("Project", project_id)
        return project
