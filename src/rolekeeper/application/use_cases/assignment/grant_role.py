"""Grant role use case."""

import asyncio
import logging

from rolekeeper.application.ports import ActeeLocator, Authorizer
from rolekeeper.application.services import Resolver, gather_or_fail
from rolekeeper.domain.value_objects import Capability

logger = logging.getLogger(__name__)


class GrantRoleUseCase:
    """Assign a role to an actor on an actee and audit the attempt."""

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
        target_actor_id: str,
    ) -> bool:
        """Grant role to target actor. Returns False if the role was already held.

        The acting actor needs assignment.create on the actee and must be able
        to assign this particular role there. Both checks pass before anything
        is written; the grant and its audit record share one transaction.
        """
        async with asyncio.timeout(self._timeout):
            actee, role, target = await gather_or_fail(
                self._resolver.actee(locator, params),
                self._resolver.role(role_ref),
                self._resolver.actor(target_actor_id),
            )
            await self._authorizer.authorize_grant(actor_id, role, actee)

            async with self._uow_factory() as uow:
                created = await uow.assignments.grant(target.id, role.id, actee.actee_id)
                await uow.audits.log(
                    actor_id,
                    Capability.ASSIGNMENT_CREATE.value,
                    target.id,
                    {
                        "roleId": role.id,
                        "grantedActeeId": actee.actee_id,
                        "projectId": actee.project_id,
                        "changed": created,
                    },
                )

        logger.info(
            "Actor %s granted role %s to %s on %s (changed=%s)",
            actor_id,
            role.system,
            target.id,
            actee.actee_id,
            created,
        )
        return created
