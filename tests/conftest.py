"""Pytest fixtures for RoleKeeper tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import Any

import pytest

from rolekeeper.application.dto.query_options import QueryOptions
from rolekeeper.domain.entities import (
    ROOT_ACTEE_ID,
    Actor,
    Assignment,
    AuditRecord,
    Form,
    Project,
    Role,
)
from rolekeeper.domain.exceptions import AuditFailure

NOW = datetime(2026, 1, 1, tzinfo=UTC)

ALL_VERBS = (
    "assignment.list",
    "assignment.create",
    "assignment.delete",
    "audit.read",
    "project.read",
    "project.update",
    "form.read",
    "form.update",
    "submission.create",
    "submission.read",
)

ADMIN = Role(id=1, system="admin", name="Administrator", verbs=ALL_VERBS)
APP_USER = Role(id=2, system="app-user", name="App User", verbs=("form.read", "submission.create"))
MANAGER = Role(
    id=3,
    system="manager",
    name="Project Manager",
    verbs=tuple(v for v in ALL_VERBS if v != "audit.read"),
)
VIEWER = Role(id=4, system="viewer", name="Project Viewer", verbs=("project.read", "form.read", "submission.read"))
# Test-only roles for the escalation guard.
ASSIGNER = Role(
    id=6,
    system="assigner",
    name="Assigner",
    verbs=("assignment.list", "assignment.create", "assignment.delete"),
)
DELEGATOR = Role(
    id=7,
    system="delegator",
    name="Delegator",
    verbs=("assignment.create", "assignment.delegate.app-user"),
)


# --- In-memory database ---


class FakeDatabase:
    """Shared in-memory state. Units of work snapshot and restore the mutable parts."""

    def __init__(self) -> None:
        self.actors: dict[str, Actor] = {}
        self.roles: dict[int, Role] = {}
        self.projects: dict[int, Project] = {}
        self.forms: dict[tuple[int, str], Form] = {}
        self.assignments: list[tuple[str, int, str]] = []
        self.audits: list[AuditRecord] = []
        self.fail_audit = False

    def add_actor(self, actor_id: str, display_name: str | None = None) -> Actor:
        actor = Actor(
            id=actor_id,
            type="user",
            display_name=display_name or actor_id,
            created_at=NOW,
        )
        self.actors[actor_id] = actor
        return actor

    def add_role(self, role: Role) -> None:
        self.roles[role.id] = role

    def add_project(self, project_id: int, name: str = "Project") -> Project:
        project = Project(
            id=project_id,
            actee_id=f"project-{project_id}",
            name=name,
            created_at=NOW,
        )
        self.projects[project_id] = project
        return project

    def add_form(self, project_id: int, xml_form_id: str) -> Form:
        project = self.projects[project_id]
        form = Form(
            id=len(self.forms) + 1,
            project_id=project_id,
            xml_form_id=xml_form_id,
            actee_id=f"form-{project_id}-{xml_form_id}",
            project_actee_id=project.actee_id,
            name=xml_form_id,
            created_at=NOW,
        )
        self.forms[(project_id, xml_form_id)] = form
        return form

    def assign(self, actor_id: str, role: Role, actee_id: str) -> None:
        triple = (actor_id, role.id, actee_id)
        if triple not in self.assignments:
            self.assignments.append(triple)


# --- Fake repositories ---


class FakeActorRepository:
    """In-memory actor repository."""

    def __init__(self, db: FakeDatabase) -> None:
        self._db = db

    async def get_by_id(self, actor_id: str) -> Actor | None:
        return self._db.actors.get(actor_id)


class FakeRoleRepository:
    """In-memory role repository."""

    def __init__(self, db: FakeDatabase) -> None:
        self._db = db

    async def get_by_id(self, role_id: int) -> Role | None:
        return self._db.roles.get(role_id)

    async def get_by_system_name(self, system: str) -> Role | None:
        for role in self._db.roles.values():
            if role.system == system:
                return role
        return None

    async def list_all(self) -> list[Role]:
        return list(self._db.roles.values())

    async def get_by_ids(self, role_ids: list[int]) -> list[Role]:
        return [self._db.roles[i] for i in role_ids if i in self._db.roles]


class FakeProjectRepository:
    """In-memory project repository."""

    def __init__(self, db: FakeDatabase) -> None:
        self._db = db

    async def get_by_id(self, project_id: int) -> Project | None:
        return self._db.projects.get(project_id)


class FakeFormRepository:
    """In-memory form repository."""

    def __init__(self, db: FakeDatabase) -> None:
        self._db = db

    async def get_by_project_and_xml_form_id(
        self, project_id: int, xml_form_id: str
    ) -> Form | None:
        return self._db.forms.get((project_id, xml_form_id))


class FakeAssignmentRepository:
    """In-memory assignment repository over a list of (actor_id, role_id, actee_id)."""

    def __init__(self, db: FakeDatabase) -> None:
        self._db = db

    def _to_assignment(self, triple: tuple[str, int, str], extended: bool) -> Assignment:
        actor = self._db.actors.get(triple[0]) if extended else None
        return Assignment(actor_id=triple[0], role_id=triple[1], actee_id=triple[2], actor=actor)

    def _select(self, triples: list[tuple[str, int, str]], options: QueryOptions) -> list[Assignment]:
        triples = sorted(triples, key=lambda t: (t[1], t[0]))
        if options.extended:
            triples = [
                t
                for t in triples
                if t[0] in self._db.actors and self._db.actors[t[0]].deleted_at is None
            ]
        end = None if options.limit is None else options.offset + options.limit
        return [self._to_assignment(t, options.extended) for t in triples[options.offset : end]]

    async def list_by_actee(self, actee_id: str, options: QueryOptions) -> list[Assignment]:
        return self._select([t for t in self._db.assignments if t[2] == actee_id], options)

    async def list_by_actee_and_role(
        self, actee_id: str, role_id: int, options: QueryOptions
    ) -> list[Assignment]:
        return self._select(
            [t for t in self._db.assignments if t[2] == actee_id and t[1] == role_id],
            options,
        )

    async def list_for_forms_in_project(
        self,
        project_id: int,
        options: QueryOptions,
        role_id: int | None = None,
    ) -> dict[str, list[Assignment]]:
        forms = sorted(
            (f for f in self._db.forms.values() if f.project_id == project_id and f.deleted_at is None),
            key=lambda f: f.xml_form_id,
        )
        return {
            f.xml_form_id: self._select(
                [
                    t
                    for t in self._db.assignments
                    if t[2] == f.actee_id and (role_id is None or t[1] == role_id)
                ],
                QueryOptions(extended=options.extended),
            )
            for f in forms
        }

    async def list_for_actor_on_actees(
        self, actor_id: str, actee_ids: list[str]
    ) -> list[Assignment]:
        return [
            Assignment(actor_id=t[0], role_id=t[1], actee_id=t[2])
            for t in self._db.assignments
            if t[0] == actor_id and t[2] in actee_ids
        ]

    async def grant(self, actor_id: str, role_id: int, actee_id: str) -> bool:
        triple = (actor_id, role_id, actee_id)
        if triple in self._db.assignments:
            return False
        self._db.assignments.append(triple)
        return True

    async def revoke(self, actor_id: str, role_id: int, actee_id: str) -> bool:
        triple = (actor_id, role_id, actee_id)
        if triple not in self._db.assignments:
            return False
        self._db.assignments.remove(triple)
        return True


class FakeAuditRepository:
    """In-memory audit repository. Set ``db.fail_audit`` to simulate a write failure."""

    def __init__(self, db: FakeDatabase) -> None:
        self._db = db

    async def log(
        self,
        actor_id: str | None,
        action: str,
        acted_actor_id: str | None,
        details: dict[str, Any],
    ) -> AuditRecord:
        if self._db.fail_audit:
            raise AuditFailure(f"Could not record {action}")
        record = AuditRecord(
            id=len(self._db.audits) + 1,
            actor_id=actor_id,
            action=action,
            acted_actor_id=acted_actor_id,
            details=details,
            logged_at=NOW,
        )
        self._db.audits.append(record)
        return record

    async def list_recent(
        self,
        *,
        action: str | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[AuditRecord]:
        records = [r for r in reversed(self._db.audits) if action is None or r.action == action]
        return records[offset : offset + limit]


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work. Rollback restores assignments and audits."""

    def __init__(self, db: FakeDatabase) -> None:
        self._db = db
        self._snapshot = (list(db.assignments), list(db.audits))
        self.actors = FakeActorRepository(db)
        self.roles = FakeRoleRepository(db)
        self.projects = FakeProjectRepository(db)
        self.forms = FakeFormRepository(db)
        self.assignments = FakeAssignmentRepository(db)
        self.audits = FakeAuditRepository(db)

    async def commit(self) -> None:
        self._snapshot = (list(self._db.assignments), list(self._db.audits))

    async def rollback(self) -> None:
        self._db.assignments[:] = self._snapshot[0]
        self._db.audits[:] = self._snapshot[1]


def make_uow_factory(db: FakeDatabase):
    """Factory with the same commit/rollback contract as the Postgres one."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        uow = FakeUnitOfWork(db)
        try:
            yield uow
            await uow.commit()
        except BaseException:
            await uow.rollback()
            raise

    return _factory


# --- Fixtures ---


@pytest.fixture
def db() -> FakeDatabase:
    """Seeded database.

    Project 1 has forms "alpha" and "beta". "root-admin" is admin on the root,
    "manager" manages project 1, "viewer" views project 1, "assigner" may
    create assignments on project 1 but holds no other verbs, "delegator" may
    delegate app-user on project 1. "target" and "other" hold nothing.
    """
    db = FakeDatabase()
    for role in (ADMIN, APP_USER, MANAGER, VIEWER, ASSIGNER, DELEGATOR):
        db.add_role(role)
    project = db.add_project(1, "Household Survey")
    db.add_form(1, "alpha")
    db.add_form(1, "beta")
    for actor_id in ("root-admin", "manager", "viewer", "assigner", "delegator", "target", "other"):
        db.add_actor(actor_id)
    db.assign("root-admin", ADMIN, ROOT_ACTEE_ID)
    db.assign("manager", MANAGER, project.actee_id)
    db.assign("viewer", VIEWER, project.actee_id)
    db.assign("assigner", ASSIGNER, project.actee_id)
    db.assign("delegator", DELEGATOR, project.actee_id)
    return db


@pytest.fixture
def uow_factory(db: FakeDatabase):
    """Factory returning async context manager over the shared FakeDatabase."""
    return make_uow_factory(db)


@pytest.fixture
def authorizer(uow_factory):
    """Real authorizer over the fake database."""
    from rolekeeper.infrastructure.permission.authorizer import RoleKeeperAuthorizer

    return RoleKeeperAuthorizer(uow_factory)


@pytest.fixture
def mock_authorizer():
    """AsyncMock authorizer - allows everything by default."""
    from unittest.mock import AsyncMock

    mock = AsyncMock()
    mock.can.return_value = True
    mock.can_assign_role.return_value = True
    mock.authorize_grant.return_value = None
    mock.can_or_reject.side_effect = lambda actor_id, verb, actee: actee
    return mock
