"""PostgreSQL audit repository implementation."""

import logging
from typing import Any

import psycopg
from psycopg import AsyncConnection
from psycopg.types.json import Jsonb

from rolekeeper.domain.entities import AuditRecord
from rolekeeper.domain.exceptions import AuditFailure

logger = logging.getLogger(__name__)


class PostgresAuditRepository:
    """Audit repository implementation. Rows are inserted, never updated."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def log(
        self,
        actor_id: str | None,
        action: str,
        acted_actor_id: str | None,
        details: dict[str, Any],
    ) -> AuditRecord:
        """Append an audit record in the current transaction."""
        try:
            cur = await self._conn.execute(
                "INSERT INTO audit (actor_id, action, acted_actor_id, details, logged_at) "
                "VALUES (%s, %s, %s, %s, NOW()) RETURNING id, logged_at",
                (actor_id, action, acted_actor_id, Jsonb(details)),
            )
            r = await cur.fetchone()
        except psycopg.Error as e:
            logger.error("Audit write failed for %s by %s: %s", action, actor_id, e)
            raise AuditFailure(f"Could not record {action}") from e
        return AuditRecord(
            id=r[0],
            actor_id=actor_id,
            action=action,
            acted_actor_id=acted_actor_id,
            details=details,
            logged_at=r[1],
        )

    async def list_recent(
        self,
        *,
        action: str | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[AuditRecord]:
        """List audit records, newest first."""
        where = ""
        params: list[object] = []
        if action:
            where = " WHERE action = %s"
            params.append(action)
        cur = await self._conn.execute(
            "SELECT id, actor_id, action, acted_actor_id, details, logged_at "
            f"FROM audit{where} ORDER BY logged_at DESC, id DESC LIMIT %s OFFSET %s",
            (*params, limit, offset),
        )
        rows = await cur.fetchall()
        return [
            AuditRecord(
                id=r[0],
                actor_id=r[1],
                action=r[2],
                acted_actor_id=r[3],
                details=r[4],
                logged_at=r[5],
            )
            for r in rows
        ]
