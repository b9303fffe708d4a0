"""List assignments use case."""

import asyncio

from rolekeeper.application.dto.query_options import MINIMAL, QueryOptions
from rolekeeper.application.ports import ActeeLocator, Authorizer
from rolekeeper.application.services import Resolver
from rolekeeper.domain.entities import Assignment
from rolekeeper.domain.value_objects import Capability


class ListAssignmentsUseCase:
    """List every assignment on one actee."""

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
        options: QueryOptions = MINIMAL,
    ) -> list[Assignment]:
        """Locate the actee, require assignment.list, return its assignments."""
        async with asyncio.timeout(self._timeout):
            actee = await self._resolver.actee(locator, params)
            await self._authorizer.can_or_reject(
                actor_id, Capability.ASSIGNMENT_LIST, actee
            )
            async with self._uow_factory() as uow:
                return await uow.assignments.list_by_actee(actee.actee_id, options)
