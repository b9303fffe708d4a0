"""PostgreSQL project repository implementation."""

from psycopg import AsyncConnection

from rolekeeper.domain.entities import Project


class PostgresProjectRepository:
    """Project repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, project_id: int) -> Project | None:
        """Get project by id."""
        cur = await self._conn.execute(
            "SELECT id, actee_id, name, created_at, deleted_at FROM project WHERE id = %s",
            (project_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Project(
            id=r[0],
            actee_id=r[1],
            name=r[2],
            created_at=r[3],
            deleted_at=r[4],
        )
