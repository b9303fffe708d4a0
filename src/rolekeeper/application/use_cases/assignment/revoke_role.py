"""Revoke role use case."""

import asyncio
import logging

from rolekeeper.application.ports import ActeeLocator, Authorizer
from rolekeeper.application.services import Resolver, gather_or_fail
from rolekeeper.domain.exceptions import NotFound
from rolekeeper.domain.value_objects import Capability

logger = logging.getLogger(__name__)


class RevokeRoleUseCase:
    """Remove a role from an actor on an actee and audit the attempt."""

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
    ) -> None:
        """Revoke role from target actor. Raises NotFound if it was not assigned.

        The audit record of the attempt is committed either way.
        """
        async with asyncio.timeout(self._timeout):
            actee, role, target = await gather_or_fail(
                self._resolver.actee(locator, params),
                self._resolver.role(role_ref),
                self._resolver.actor(target_actor_id),
            )
            await self._authorizer.can_or_reject(
                actor_id, Capability.ASSIGNMENT_DELETE, actee
            )

            async with self._uow_factory() as uow:
                existed = await uow.assignments.revoke(target.id, role.id, actee.actee_id)
                await uow.audits.log(
                    actor_id,
                    Capability.ASSIGNMENT_DELETE.value,
                    target.id,
                    {
                        "roleId": role.id,
                        "revokedActeeId": actee.actee_id,
                        "projectId": actee.project_id,
                        "changed": existed,
                    },
                )

        if not existed:
            raise NotFound("Assignment", f"{actee.actee_id}/{role.system}/{target.id}")
        logger.info(
            "Actor %s revoked role %s from %s on %s",
            actor_id,
            role.system,
            target.id,
            actee.actee_id,
        )
