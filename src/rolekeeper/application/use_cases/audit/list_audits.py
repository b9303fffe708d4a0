"""List audit records use case."""

from rolekeeper.application.ports import Authorizer
from rolekeeper.domain.entities import ROOT, AuditRecord
from rolekeeper.domain.value_objects import Capability


class ListAuditsUseCase:
    """Read the audit trail. Requires audit.read on the root actee."""

    def __init__(self, unit_of_work_factory: type, authorizer: Authorizer) -> None:
        self._uow_factory = unit_of_work_factory
        self._authorizer = authorizer

    async def execute(
        self,
        actor_id: str,
        action: str | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[AuditRecord]:
        await self._authorizer.can_or_reject(actor_id, Capability.AUDIT_READ, ROOT)
        async with self._uow_factory() as uow:
            return await uow.audits.list_recent(action=action, limit=limit, offset=offset)
