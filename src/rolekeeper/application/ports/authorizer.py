"""Authorizer port - RBAC policy decisions on actees."""

from typing import Protocol

from rolekeeper.domain.entities import Actee, Role


class Authorizer(Protocol):
    """Port for capability checks and the role-grant escalation guard."""

    async def verbs_on(self, actor_id: str, actee: Actee) -> frozenset[str]: ...

    async def can(self, actor_id: str, verb: str, actee: Actee) -> bool: ...

    async def can_or_reject(self, actor_id: str, verb: str, actee: Actee) -> Actee: ...

    async def can_assign_role(self, actor_id: str, role: Role, actee: Actee) -> bool: ...

    async def authorize_grant(self, actor_id: str, role: Role, actee: Actee) -> None: ...
