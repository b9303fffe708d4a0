"""Repository ports."""

from rolekeeper.application.ports.repositories.actor_repository import ActorRepository
from rolekeeper.application.ports.repositories.assignment_repository import (
    AssignmentRepository,
)
from rolekeeper.application.ports.repositories.audit_repository import AuditRepository
from rolekeeper.application.ports.repositories.form_repository import FormRepository
from rolekeeper.application.ports.repositories.project_repository import (
    ProjectRepository,
)
from rolekeeper.application.ports.repositories.role_repository import RoleRepository

__all__ = [
    "ActorRepository",
    "AssignmentRepository",
    "AuditRepository",
    "FormRepository",
    "ProjectRepository",
    "RoleRepository",
]
