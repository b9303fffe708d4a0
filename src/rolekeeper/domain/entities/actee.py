"""Securable resources ("actees") sharing one addressable identity."""

from dataclasses import dataclass
from datetime import datetime

from rolekeeper.domain.value_objects import ActeeSpecies

ROOT_ACTEE_ID = "*"


@dataclass(frozen=True)
class RootActee:
    """The global root. Static singleton; no lookup required."""

    actee_id: str = ROOT_ACTEE_ID
    species: ActeeSpecies = ActeeSpecies.ROOT

    @property
    def project_id(self) -> None:
        return None

    @property
    def scope_actee_ids(self) -> tuple[str, ...]:
        return (self.actee_id,)


ROOT = RootActee()


@dataclass
class Project:
    """Project - groups forms; a project role implies the same role on its forms."""

    id: int
    actee_id: str
    name: str
    created_at: datetime
    deleted_at: datetime | None = None
    species: ActeeSpecies = ActeeSpecies.PROJECT

    @property
    def project_id(self) -> int:
        return self.id

    @property
    def scope_actee_ids(self) -> tuple[str, ...]:
        return (self.actee_id, ROOT_ACTEE_ID)


@dataclass
class Form:
    """Form within a project, addressed by (project_id, xml_form_id)."""

    id: int
    project_id: int
    xml_form_id: str
    actee_id: str
    project_actee_id: str
    name: str | None
    created_at: datetime
    deleted_at: datetime | None = None
    species: ActeeSpecies = ActeeSpecies.FORM

    @property
    def scope_actee_ids(self) -> tuple[str, ...]:
        return (self.actee_id, self.project_actee_id, ROOT_ACTEE_ID)


Actee = RootActee | Project | Form
