"""PostgreSQL form repository implementation."""

from psycopg import AsyncConnection

from rolekeeper.domain.entities import Form


class PostgresFormRepository:
    """Form repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_project_and_xml_form_id(
        self, project_id: int, xml_form_id: str
    ) -> Form | None:
        """Get form by project and xmlFormId, only within a live project."""
        cur = await self._conn.execute(
            "SELECT f.id, f.project_id, f.xml_form_id, f.actee_id, p.actee_id, "
            "f.name, f.created_at, f.deleted_at "
            "FROM form f JOIN project p ON p.id = f.project_id "
            "WHERE f.project_id = %s AND f.xml_form_id = %s AND p.deleted_at IS NULL",
            (project_id, xml_form_id),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Form(
            id=r[0],
            project_id=r[1],
            xml_form_id=r[2],
            actee_id=r[3],
            project_actee_id=r[4],
            name=r[5],
            created_at=r[6],
            deleted_at=r[7],
        )
