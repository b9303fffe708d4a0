"""Actor entity - an authenticated principal that can hold roles."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Actor:
    """Actor - a user or system identity."""

    id: str
    type: str
    display_name: str
    created_at: datetime
    deleted_at: datetime | None = None
