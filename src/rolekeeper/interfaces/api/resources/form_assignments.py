"""Read-only project-wide form assignments API."""

import falcon.asgi

from rolekeeper.application.use_cases.assignment.list_form_assignments import (
    ListFormAssignmentsUseCase,
)
from rolekeeper.infrastructure.actees.locators import parse_project_id
from rolekeeper.interfaces.api.errors import require_actor
from rolekeeper.interfaces.api.resources.representations import actor_media


class FormAssignmentsResource:
    """GET /v1/projects/{project_id}/assignments/forms[/{role_ref}]."""

    def __init__(self, list_form_assignments: ListFormAssignmentsUseCase) -> None:
        self._list = list_form_assignments

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, project_id: str
    ) -> None:
        """All forms, grouped by role id."""
        actor_id = require_actor(req)
        summary = await self._list.execute(actor_id, parse_project_id(project_id))
        resp.media = {
            xml_form_id: {
                str(role_id): [actor_media(a) for a in actors]
                for role_id, actors in roles.items()
            }
            for xml_form_id, roles in summary.items()
        }
        resp.status = falcon.HTTP_200

    async def on_get_role(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        project_id: str,
        role_ref: str,
    ) -> None:
        """All forms, filtered to one role."""
        actor_id = require_actor(req)
        summary = await self._list.execute_for_role(
            actor_id, parse_project_id(project_id), role_ref
        )
        resp.media = {
            xml_form_id: [actor_media(a) for a in actors]
            for xml_form_id, actors in summary.items()
        }
        resp.status = falcon.HTTP_200
