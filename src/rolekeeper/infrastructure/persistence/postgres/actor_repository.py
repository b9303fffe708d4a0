"""PostgreSQL actor repository implementation."""

from psycopg import AsyncConnection

from rolekeeper.domain.entities import Actor


class PostgresActorRepository:
    """Actor repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, actor_id: str) -> Actor | None:
        """Get actor by id."""
        cur = await self._conn.execute(
            "SELECT id, type, display_name, created_at, deleted_at FROM actor WHERE id = %s",
            (actor_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Actor(
            id=r[0],
            type=r[1],
            display_name=r[2],
            created_at=r[3],
            deleted_at=r[4],
        )
