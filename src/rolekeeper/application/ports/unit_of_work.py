"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from rolekeeper.application.ports.repositories import (
    ActorRepository,
    AssignmentRepository,
    AuditRepository,
    FormRepository,
    ProjectRepository,
    RoleRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def actors(self) -> ActorRepository: ...

    @property
    def roles(self) -> RoleRepository: ...

    @property
    def projects(self) -> ProjectRepository: ...

    @property
    def forms(self) -> FormRepository: ...

    @property
    def assignments(self) -> AssignmentRepository: ...

    @property
    def audits(self) -> AuditRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
