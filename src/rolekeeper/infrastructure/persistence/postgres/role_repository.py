"""PostgreSQL role repository implementation."""

from psycopg import AsyncConnection

from rolekeeper.domain.entities import Role

_SELECT_ROLE = (
    "SELECT r.id, r.system, r.name, "
    "COALESCE(array_agg(v.verb ORDER BY v.position) FILTER (WHERE v.verb IS NOT NULL), '{}') "
    "FROM role r LEFT JOIN role_verb v ON v.role_id = r.id"
)


def _to_role(r: tuple) -> Role:
    return Role(id=r[0], system=r[1], name=r[2], verbs=tuple(r[3]))


class PostgresRoleRepository:
    """Role repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, role_id: int) -> Role | None:
        """Get role by id."""
        cur = await self._conn.execute(
            f"{_SELECT_ROLE} WHERE r.id = %s GROUP BY r.id",
            (role_id,),
        )
        r = await cur.fetchone()
        return _to_role(r) if r else None

    async def get_by_system_name(self, system: str) -> Role | None:
        """Get role by system name."""
        cur = await self._conn.execute(
            f"{_SELECT_ROLE} WHERE r.system = %s GROUP BY r.id",
            (system,),
        )
        r = await cur.fetchone()
        return _to_role(r) if r else None

    async def list_all(self) -> list[Role]:
        """List all roles."""
        cur = await self._conn.execute(f"{_SELECT_ROLE} GROUP BY r.id ORDER BY r.id")
        rows = await cur.fetchall()
        return [_to_role(r) for r in rows]

    async def get_by_ids(self, role_ids: list[int]) -> list[Role]:
        """Get several roles with their verbs."""
        cur = await self._conn.execute(
            f"{_SELECT_ROLE} WHERE r.id = ANY(%s) GROUP BY r.id ORDER BY r.id",
            (role_ids,),
        )
        rows = await cur.fetchall()
        return [_to_role(r) for r in rows]
