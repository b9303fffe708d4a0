"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from psycopg_pool import AsyncConnectionPool

from rolekeeper.infrastructure.persistence.postgres.actor_repository import (
    PostgresActorRepository,
)
from rolekeeper.infrastructure.persistence.postgres.assignment_repository import (
    PostgresAssignmentRepository,
)
from rolekeeper.infrastructure.persistence.postgres.audit_repository import (
    PostgresAuditRepository,
)
from rolekeeper.infrastructure.persistence.postgres.form_repository import (
    PostgresFormRepository,
)
from rolekeeper.infrastructure.persistence.postgres.project_repository import (
    PostgresProjectRepository,
)
from rolekeeper.infrastructure.persistence.postgres.role_repository import (
    PostgresRoleRepository,
)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction.

    Assignment mutations and their audit records are written through the
    same connection, so they commit or roll back together.
    """

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._conn: object | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        self._actors = PostgresActorRepository(self._conn)
        self._roles = PostgresRoleRepository(self._conn)
        self._projects = PostgresProjectRepository(self._conn)
        self._forms = PostgresFormRepository(self._conn)
        self._assignments = PostgresAssignmentRepository(self._conn)
        self._audits = PostgresAuditRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self._conn.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def actors(self) -> PostgresActorRepository:
        return self._actors

    @property
    def roles(self) -> PostgresRoleRepository:
        return self._roles

    @property
    def projects(self) -> PostgresProjectRepository:
        return self._projects

    @property
    def forms(self) -> PostgresFormRepository:
        return self._forms

    @property
    def assignments(self) -> PostgresAssignmentRepository:
        return self._assignments

    @property
    def audits(self) -> PostgresAuditRepository:
        return self._audits

    async def commit(self) -> None:
        if self._conn:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """Create UnitOfWork factory (async context manager)."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        uow = PostgresUnitOfWork(pool)
        async with uow:
            try:
                yield uow
                await uow.commit()
            except BaseException:
                await uow.rollback()
                raise

    return factory
