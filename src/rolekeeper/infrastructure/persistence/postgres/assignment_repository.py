"""PostgreSQL assignment repository implementation."""

from psycopg import AsyncConnection

from rolekeeper.application.dto.query_options import QueryOptions
from rolekeeper.domain.entities import Actor, Assignment

_ACTOR_COLUMNS = "ac.type, ac.display_name, ac.created_at, ac.deleted_at"


def _build_listing_query(
    where: str, options: QueryOptions
) -> tuple[str, list[object]]:
    """Build an assignment listing query. Extended listings join live actors."""
    columns = "a.actor_id, a.role_id, a.actee_id"
    source = "assignment a"
    if options.extended:
        columns = f"{columns}, {_ACTOR_COLUMNS}"
        source = (
            "assignment a JOIN actor ac "
            "ON ac.id = a.actor_id AND ac.deleted_at IS NULL"
        )
    q = f"SELECT {columns} FROM {source} WHERE {where} ORDER BY a.role_id, a.actor_id"
    params: list[object] = []
    if options.limit is not None:
        q += " LIMIT %s"
        params.append(options.limit)
    if options.offset:
        q += " OFFSET %s"
        params.append(options.offset)
    return q, params


def _build_forms_query(
    options: QueryOptions, role_id: int | None
) -> tuple[str, list[object]]:
    """Build the project-wide form aggregation.

    Forms are the driving table so a form with no assignments still yields a
    row (with NULL assignment columns). The role filter sits in the join
    condition for the same reason.
    """
    params: list[object] = []
    assignments = "assignment a"
    columns = "f.xml_form_id, a.actor_id, a.role_id, a.actee_id"
    if options.extended:
        assignments = (
            "(assignment a JOIN actor ac "
            "ON ac.id = a.actor_id AND ac.deleted_at IS NULL)"
        )
        columns = f"{columns}, {_ACTOR_COLUMNS}"
    join_on = "a.actee_id = f.actee_id"
    if role_id is not None:
        join_on += " AND a.role_id = %s"
        params.append(role_id)
    q = (
        f"SELECT {columns} FROM form f LEFT JOIN {assignments} ON {join_on} "
        "WHERE f.project_id = %s AND f.deleted_at IS NULL "
        "ORDER BY f.xml_form_id, a.role_id, a.actor_id"
    )
    return q, params


def _to_assignment(r: tuple, extended: bool) -> Assignment:
    actor = None
    if extended:
        actor = Actor(
            id=r[0],
            type=r[3],
            display_name=r[4],
            created_at=r[5],
            deleted_at=r[6],
        )
    return Assignment(actor_id=r[0], role_id=r[1], actee_id=r[2], actor=actor)


class PostgresAssignmentRepository:
    """Assignment repository implementation. The primary key is (actor_id, role_id, actee_id)."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_by_actee(
        self, actee_id: str, options: QueryOptions
    ) -> list[Assignment]:
        """List assignments on an actee."""
        q, paging = _build_listing_query("a.actee_id = %s", options)
        cur = await self._conn.execute(q, (actee_id, *paging))
        rows = await cur.fetchall()
        return [_to_assignment(r, options.extended) for r in rows]

    async def list_by_actee_and_role(
        self, actee_id: str, role_id: int, options: QueryOptions
    ) -> list[Assignment]:
        """List assignments of one role on an actee."""
        q, paging = _build_listing_query("a.actee_id = %s AND a.role_id = %s", options)
        cur = await self._conn.execute(q, (actee_id, role_id, *paging))
        rows = await cur.fetchall()
        return [_to_assignment(r, options.extended) for r in rows]

    async def list_for_forms_in_project(
        self,
        project_id: int,
        options: QueryOptions,
        role_id: int | None = None,
    ) -> dict[str, list[Assignment]]:
        """Group assignments on every live form of a project by xml_form_id."""
        q, params = _build_forms_query(options, role_id)
        cur = await self._conn.execute(q, (*params, project_id))
        rows = await cur.fetchall()
        by_form: dict[str, list[Assignment]] = {}
        for r in rows:
            assignments = by_form.setdefault(r[0], [])
            if r[1] is not None:
                assignments.append(_to_assignment(r[1:], options.extended))
        return by_form

    async def list_for_actor_on_actees(
        self, actor_id: str, actee_ids: list[str]
    ) -> list[Assignment]:
        """List an actor's assignments on any of the given actees."""
        cur = await self._conn.execute(
            "SELECT actor_id, role_id, actee_id FROM assignment "
            "WHERE actor_id = %s AND actee_id = ANY(%s)",
            (actor_id, actee_ids),
        )
        rows = await cur.fetchall()
        return [Assignment(actor_id=r[0], role_id=r[1], actee_id=r[2]) for r in rows]

    async def grant(self, actor_id: str, role_id: int, actee_id: str) -> bool:
        """Insert the assignment. Returns False if it already existed."""
        cur = await self._conn.execute(
            "INSERT INTO assignment (actor_id, role_id, actee_id) VALUES (%s, %s, %s) "
            "ON CONFLICT DO NOTHING",
            (actor_id, role_id, actee_id),
        )
        return cur.rowcount == 1

    async def revoke(self, actor_id: str, role_id: int, actee_id: str) -> bool:
        """Delete the assignment. Returns whether a row was removed."""
        cur = await self._conn.execute(
            "DELETE FROM assignment WHERE actor_id = %s AND role_id = %s AND actee_id = %s",
            (actor_id, role_id, actee_id),
        )
        return cur.rowcount > 0
