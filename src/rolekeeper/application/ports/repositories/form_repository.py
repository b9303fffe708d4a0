"""Form repository port."""

from typing import Protocol

from rolekeeper.domain.entities import Form


class FormRepository(Protocol):
    """Port for form lookup."""

    async def get_by_project_and_xml_form_id(
        self, project_id: int, xml_form_id: str
    ) -> Form | None: ...
