"""JSON representations of domain entities."""

from typing import Any

from rolekeeper.domain.entities import Actor, Assignment, AuditRecord, Role


def actor_media(actor: Actor) -> dict[str, Any]:
    return {
        "id": actor.id,
        "type": actor.type,
        "displayName": actor.display_name,
        "createdAt": actor.created_at.isoformat(),
    }


def assignment_media(assignment: Assignment) -> dict[str, Any]:
    if assignment.actor is not None:
        return {"actor": actor_media(assignment.actor), "roleId": assignment.role_id}
    return {"actorId": assignment.actor_id, "roleId": assignment.role_id}


def role_media(role: Role) -> dict[str, Any]:
    return {
        "id": role.id,
        "name": role.name,
        "system": role.system,
        "verbs": list(role.verbs),
    }


def audit_media(record: AuditRecord) -> dict[str, Any]:
    return {
        "id": record.id,
        "actorId": record.actor_id,
        "action": record.action,
        "actedActorId": record.acted_actor_id,
        "details": record.details,
        "loggedAt": record.logged_at.isoformat() if record.logged_at else None,
    }
