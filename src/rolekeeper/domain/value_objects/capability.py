"""Capability verbs checked by the policy engine."""

from enum import StrEnum


class Capability(StrEnum):
    """Verbs a role can grant on an actee."""

    ASSIGNMENT_LIST = "assignment.list"
    ASSIGNMENT_CREATE = "assignment.create"
    ASSIGNMENT_DELETE = "assignment.delete"
    AUDIT_READ = "audit.read"
    PROJECT_READ = "project.read"
    PROJECT_UPDATE = "project.update"
    FORM_READ = "form.read"
    FORM_UPDATE = "form.update"
    SUBMISSION_CREATE = "submission.create"
    SUBMISSION_READ = "submission.read"


DELEGATE_PREFIX = "assignment.delegate."


def delegate_verb(role_system: str) -> str:
    """Verb that allows granting one specific role without holding its verbs."""
    return f"{DELEGATE_PREFIX}{role_system}"
