"""Actee species - the kind of securable resource."""

from enum import StrEnum


class ActeeSpecies(StrEnum):
    """Resource types that can be the object of an assignment."""

    ROOT = "*"
    PROJECT = "project"
    FORM = "form"
