"""Domain value objects."""

from rolekeeper.domain.value_objects.actee_species import ActeeSpecies
from rolekeeper.domain.value_objects.capability import Capability, delegate_verb
from rolekeeper.domain.value_objects.role_reference import RoleReference, is_system_name

__all__ = [
    "ActeeSpecies",
    "Capability",
    "RoleReference",
    "delegate_verb",
    "is_system_name",
]
