"""Initial schema - actors, actees, roles, assignments, audit.

Revision ID: 001
Revises:
Create Date: 2026-10-17

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

ALL_VERBS = [
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
]

ROLES = [
    (1, "admin", "Administrator", ALL_VERBS),
    (2, "app-user", "App User", ["form.read", "submission.create"]),
    (3, "manager", "Project Manager", [v for v in ALL_VERBS if v != "audit.read"]),
    (4, "viewer", "Project Viewer", ["project.read", "form.read", "submission.read"]),
    (5, "formfill", "Data Collector", ["project.read", "form.read", "submission.create"]),
]


def upgrade() -> None:
    op.create_table(
        "actor",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column("type", sa.String(50), nullable=False),
        sa.Column("display_name", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        "actee",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("species", sa.String(50), nullable=False),
        sa.Column("parent", sa.String(64), sa.ForeignKey("actee.id"), nullable=True),
    )

    op.create_table(
        "role",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("system", sa.String(50), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
    )
    op.create_index("ix_role_system", "role", ["system"], unique=True)

    op.create_table(
        "role_verb",
        sa.Column("role_id", sa.Integer(), sa.ForeignKey("role.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("verb", sa.String(100), primary_key=True),
        sa.Column("position", sa.Integer(), nullable=False),
    )

    op.create_table(
        "project",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("actee_id", sa.String(64), sa.ForeignKey("actee.id"), nullable=False, unique=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        "form",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("project_id", sa.Integer(), sa.ForeignKey("project.id", ondelete="CASCADE"), nullable=False),
        sa.Column("xml_form_id", sa.String(255), nullable=False),
        sa.Column("actee_id", sa.String(64), sa.ForeignKey("actee.id"), nullable=False, unique=True),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_form_project_xml_form_id", "form", ["project_id", "xml_form_id"], unique=True)

    op.create_table(
        "assignment",
        sa.Column("actor_id", sa.String(255), sa.ForeignKey("actor.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("role_id", sa.Integer(), sa.ForeignKey("role.id"), primary_key=True),
        sa.Column("actee_id", sa.String(64), sa.ForeignKey("actee.id", ondelete="CASCADE"), primary_key=True),
    )
    op.create_index("ix_assignment_actee_id", "assignment", ["actee_id"])

    op.create_table(
        "audit",
        sa.Column("id", sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column("actor_id", sa.String(255), nullable=True),
        sa.Column("action", sa.String(100), nullable=False),
        sa.Column("acted_actor_id", sa.String(255), nullable=True),
        sa.Column("details", JSONB(), nullable=False, server_default="{}"),
        sa.Column("logged_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_audit_action_logged_at", "audit", ["action", "logged_at"])

    op.execute("INSERT INTO actee (id, species, parent) VALUES ('*', '*', NULL)")

    role_table = sa.table(
        "role",
        sa.column("id", sa.Integer()),
        sa.column("system", sa.String()),
        sa.column("name", sa.String()),
    )
    role_verb_table = sa.table(
        "role_verb",
        sa.column("role_id", sa.Integer()),
        sa.column("verb", sa.String()),
        sa.column("position", sa.Integer()),
    )
    op.bulk_insert(
        role_table,
        [{"id": rid, "system": system, "name": name} for rid, system, name, _ in ROLES],
    )
    op.bulk_insert(
        role_verb_table,
        [
            {"role_id": rid, "verb": verb, "position": i}
            for rid, _, _, verbs in ROLES
            for i, verb in enumerate(verbs)
        ],
    )


def downgrade() -> None:
    op.drop_table("audit")
    op.drop_table("assignment")
    op.drop_table("form")
    op.drop_table("project")
    op.drop_table("role_verb")
    op.drop_table("role")
    op.drop_table("actee")
    op.drop_table("actor")
