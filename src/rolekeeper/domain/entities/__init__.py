"""Domain entities."""

from rolekeeper.domain.entities.actee import ROOT, ROOT_ACTEE_ID, Actee, Form, Project, RootActee
from rolekeeper.domain.entities.actor import Actor
from rolekeeper.domain.entities.assignment import Assignment
from rolekeeper.domain.entities.audit_record import AuditRecord
from rolekeeper.domain.entities.role import Role

__all__ = [
    "ROOT",
    "ROOT_ACTEE_ID",
    "Actee",
    "Actor",
    "Assignment",
    "AuditRecord",
    "Form",
    "Project",
    "Role",
    "RootActee",
]
