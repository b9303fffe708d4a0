"""Assignment entity - actor holds role on actee."""

from dataclasses import dataclass

from rolekeeper.domain.entities.actor import Actor


@dataclass
class Assignment:
    """(actor_id, role_id, actee_id) is the natural key.

    ``actor`` is only populated by extended listings.
    """

    actor_id: str
    role_id: int
    actee_id: str
    actor: Actor | None = None
