"""Audit repository port - append-only."""

from typing import Any, Protocol

from rolekeeper.domain.entities import AuditRecord


class AuditRepository(Protocol):
    """Port for writing and reading audit records."""

    async def log(
        self,
        actor_id: str | None,
        action: str,
        acted_actor_id: str | None,
        details: dict[str, Any],
    ) -> AuditRecord: ...

    async def list_recent(
        self,
        *,
        action: str | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[AuditRecord]: ...
