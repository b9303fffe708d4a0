"""Audit record entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class AuditRecord:
    """Append-only record of one grant or revoke attempt."""

    id: int | None
    actor_id: str | None
    action: str
    acted_actor_id: str | None
    details: dict[str, Any] = field(default_factory=dict)
    logged_at: datetime | None = None
