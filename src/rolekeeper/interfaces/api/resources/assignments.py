"""Generic assignments API resources.

Every actee type exposes the same four operations; the routes differ only
in their base path and the locator used to find the actee.
"""

import falcon.asgi

from rolekeeper.application.dto.query_options import QueryOptions
from rolekeeper.application.ports import ActeeLocator
from rolekeeper.application.use_cases.assignment.grant_role import GrantRoleUseCase
from rolekeeper.application.use_cases.assignment.list_assignments import (
    ListAssignmentsUseCase,
)
from rolekeeper.application.use_cases.assignment.list_assignments_by_role import (
    ListAssignmentsByRoleUseCase,
)
from rolekeeper.application.use_cases.assignment.revoke_role import RevokeRoleUseCase
from rolekeeper.interfaces.api.errors import require_actor
from rolekeeper.interfaces.api.resources.representations import (
    actor_media,
    assignment_media,
)


def _is_extended(req: falcon.asgi.Request) -> bool:
    return bool(
        req.get_param_as_bool("extended")
        or req.get_header("X-Extended-Metadata") == "true"
    )


class AssignmentsResource:
    """GET {base}/assignments - list assignments on an actee."""

    def __init__(self, locator: ActeeLocator, list_assignments: ListAssignmentsUseCase) -> None:
        self._locator = locator
        self._list = list_assignments

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, **params: str
    ) -> None:
        actor_id = require_actor(req)
        limit = req.get_param_as_int("limit", min_value=1)
        offset = req.get_param_as_int("offset", min_value=0) or 0
        options = QueryOptions(extended=_is_extended(req), limit=limit, offset=offset)

        assignments = await self._list.execute(actor_id, self._locator, params, options)
        resp.media = [assignment_media(a) for a in assignments]
        resp.status = falcon.HTTP_200


class RoleAssignmentsResource:
    """GET {base}/assignments/{role_ref} - actors holding a role on an actee."""

    def __init__(
        self, locator: ActeeLocator, list_by_role: ListAssignmentsByRoleUseCase
    ) -> None:
        self._locator = locator
        self._list_by_role = list_by_role

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        role_ref: str,
        **params: str,
    ) -> None:
        actor_id = require_actor(req)
        actors = await self._list_by_role.execute(actor_id, self._locator, params, role_ref)
        resp.media = [actor_media(a) for a in actors]
        resp.status = falcon.HTTP_200


class ActorRoleAssignmentResource:
    """POST/DELETE {base}/assignments/{role_ref}/{actor_id} - grant or revoke."""

    def __init__(
        self,
        locator: ActeeLocator,
        grant_role: GrantRoleUseCase,
        revoke_role: RevokeRoleUseCase,
    ) -> None:
        self._locator = locator
        self._grant = grant_role
        self._revoke = revoke_role

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        role_ref: str,
        actor_id: str,
        **params: str,
    ) -> None:
        current = require_actor(req)
        await self._grant.execute(current, self._locator, params, role_ref, actor_id)
        resp.media = {"success": True}
        resp.status = falcon.HTTP_200

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        role_ref: str,
        actor_id: str,
        **params: str,
    ) -> None:
        current = require_actor(req)
        await self._revoke.execute(current, self._locator, params, role_ref, actor_id)
        resp.media = {"success": True}
        resp.status = falcon.HTTP_200


def add_assignment_routes(
    app: falcon.asgi.App,
    base: str,
    locator: ActeeLocator,
    list_assignments: ListAssignmentsUseCase,
    list_by_role: ListAssignmentsByRoleUseCase,
    grant_role: GrantRoleUseCase,
    revoke_role: RevokeRoleUseCase,
) -> None:
    """Mount the assignment resources under ``base`` for one actee type."""
    app.add_route(
        f"{base}/assignments", AssignmentsResource(locator, list_assignments)
    )
    app.add_route(
        f"{base}/assignments/{{role_ref}}",
        RoleAssignmentsResource(locator, list_by_role),
    )
    app.add_route(
        f"{base}/assignments/{{role_ref}}/{{actor_id}}",
        ActorRoleAssignmentResource(locator, grant_role, revoke_role),
    )
