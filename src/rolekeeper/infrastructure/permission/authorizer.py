"""Authorizer implementation - checks against the assignment relation and role verbs."""

import logging

from rolekeeper.domain.entities import Actee, Role
from rolekeeper.domain.exceptions import PermissionDenied
from rolekeeper.domain.value_objects import Capability, delegate_verb

logger = logging.getLogger(__name__)


def _may_assign(verbs: frozenset[str], role: Role) -> bool:
    if delegate_verb(role.system) in verbs:
        return True
    return verbs.issuperset(role.verbs)


class RoleKeeperAuthorizer:
    """Derives an actor's effective verbs on an actee from roles held on it or its ancestors."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def verbs_on(self, actor_id: str, actee: Actee) -> frozenset[str]:
        """Union of verbs from every role the actor holds on the actee's scope chain."""
        async with self._uow_factory() as uow:
            held = await uow.assignments.list_for_actor_on_actees(
                actor_id, list(actee.scope_actee_ids)
            )
            if not held:
                return frozenset()
            roles = await uow.roles.get_by_ids(sorted({a.role_id for a in held}))

        verbs: set[str] = set()
        for role in roles:
            verbs.update(role.verbs)
        return frozenset(verbs)

    async def can(self, actor_id: str, verb: str, actee: Actee) -> bool:
        """Check if actor has verb on actee."""
        return verb in await self.verbs_on(actor_id, actee)

    def _reject_unless(
        self, verbs: frozenset[str], actor_id: str, verb: str, actee: Actee
    ) -> None:
        if verb not in verbs:
            logger.info("Denied %s on %s for actor %s", verb, actee.actee_id, actor_id)
            raise PermissionDenied(f"Actor lacks {verb} on {actee.species}")

    async def can_or_reject(self, actor_id: str, verb: str, actee: Actee) -> Actee:
        """Return the actee if allowed, raise PermissionDenied otherwise."""
        self._reject_unless(await self.verbs_on(actor_id, actee), actor_id, verb, actee)
        return actee

    async def can_assign_role(self, actor_id: str, role: Role, actee: Actee) -> bool:
        """Escalation guard: the actor must hold every verb the role grants,
        or be explicitly allowed to delegate this role."""
        return _may_assign(await self.verbs_on(actor_id, actee), role)

    async def authorize_grant(self, actor_id: str, role: Role, actee: Actee) -> None:
        """assignment.create plus the escalation guard, from a single verb lookup."""
        verbs = await self.verbs_on(actor_id, actee)
        self._reject_unless(verbs, actor_id, Capability.ASSIGNMENT_CREATE, actee)
        if not _may_assign(verbs, role):
            logger.warning(
                "Actor %s may not grant role %s on %s", actor_id, role.system, actee.actee_id
            )
            raise PermissionDenied(f"Insufficient rights to grant role '{role.system}'")
