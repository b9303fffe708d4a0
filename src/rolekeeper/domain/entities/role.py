"""Role entity for RBAC."""

from dataclasses import dataclass, field


@dataclass
class Role:
    """Role - a fixed, seeded bundle of capability verbs."""

    id: int
    system: str
    name: str
    verbs: tuple[str, ...] = field(default_factory=tuple)
