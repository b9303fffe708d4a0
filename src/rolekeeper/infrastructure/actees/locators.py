"""Actee locators - one per securable resource type."""

from rolekeeper.application.ports import UnitOfWork
from rolekeeper.domain.entities import ROOT, Form, Project, RootActee
from rolekeeper.domain.exceptions import NotFound, ValidationError


def parse_project_id(raw: str) -> int:
    """Project ids in paths are plain ASCII digits; anything else is rejected."""
    if not (raw.isascii() and raw.isdigit()):
        raise ValidationError(f"Invalid project ID: {raw!r}")
    return int(raw)


def _project_id_param(params: dict[str, str]) -> int:
    return parse_project_id(params.get("project_id", ""))


class RootLocator:
    """The root actee always exists."""

    async def locate(self, uow: UnitOfWork, params: dict[str, str]) -> RootActee:
        return ROOT


class ProjectLocator:
    """Locate a project by ``project_id``."""

    async def locate(self, uow: UnitOfWork, params: dict[str, str]) -> Project:
        project_id = _project_id_param(params)
        project = await uow.projects.get_by_id(project_id)
        if not project or project.deleted_at is not None:
            raise NotFound("Project", project_id)
        return project


class FormLocator:
    """Locate a form by ``project_id`` and ``xml_form_id``."""

    async def locate(self, uow: UnitOfWork, params: dict[str, str]) -> Form:
        project_id = _project_id_param(params)
        xml_form_id = params.get("xml_form_id", "")
        form = await uow.forms.get_by_project_and_xml_form_id(project_id, xml_form_id)
        if not form or form.deleted_at is not None:
            raise NotFound("Form", f"{project_id}/{xml_form_id}")
        return form
