"""Role reference - a path segment naming a role by system name or id."""

import re
from dataclasses import dataclass

from rolekeeper.domain.exceptions import NotFound

# Any lowercase letter means the reference is a system name ("app-user").
_SYSTEM_NAME_PATTERN = re.compile(r"[a-z]")
_NUMERIC_PATTERN = re.compile(r"[0-9]+")


def is_system_name(reference: str) -> bool:
    """Single dispatch rule: does this reference name a role symbolically?"""
    return _SYSTEM_NAME_PATTERN.search(reference) is not None


@dataclass(frozen=True)
class RoleReference:
    """Parsed role reference - exactly one of system_name / role_id is set."""

    system_name: str | None = None
    role_id: int | None = None

    @classmethod
    def parse(cls, reference: str) -> "RoleReference":
        """Parse a raw reference. Malformed numeric references fail as NotFound."""
        if is_system_name(reference):
            return cls(system_name=reference)
        if not _NUMERIC_PATTERN.fullmatch(reference):
            raise NotFound("Role", reference)
        return cls(role_id=int(reference))
