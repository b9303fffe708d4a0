"""List actors holding one role on an actee."""

import asyncio

from rolekeeper.application.dto.query_options import EXTENDED
from rolekeeper.application.ports import ActeeLocator, Authorizer
from rolekeeper.application.services import Resolver, gather_or_fail
from rolekeeper.domain.entities import Actor
from rolekeeper.domain.value_objects import Capability


class ListAssignmentsByRoleUseCase:
    """List the actors assigned a given role on an actee."""

    def __init__(
        self,
        unit_of_work_factory: type,
        authorizer: Authorizer,
        timeout: float | None = None,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._authorizer = authorizer
        self._resolver = Resolver(unit_of_work_factory)
        self._timeout = timeout

    async def execute(
        self,
        actor_id: str,
        locator: ActeeLocator,
        params: dict[str, str],
        role_ref: str,
    ) -> list[Actor]:
        async with asyncio.timeout(self._timeout):
            actee, role = await gather_or_fail(
                self._resolver.actee(locator, params),
                self._resolver.role(role_ref),
            )
            await self._authorizer.can_or_reject(
                actor_id, Capability.ASSIGNMENT_LIST, actee
            )
            async with self._uow_factory() as uow:
                assignments = await uow.assignments.list_by_actee_and_role(
                    actee.actee_id, role.id, EXTENDED
                )
        return [a.actor for a in assignments if a.actor is not None]
