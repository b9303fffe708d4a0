"""Roles catalog API resources."""

import falcon.asgi

from rolekeeper.application.use_cases.role.list_roles import GetRoleUseCase, ListRolesUseCase
from rolekeeper.interfaces.api.resources.representations import role_media


class RolesResource:
    """GET /v1/roles and /v1/roles/{role_ref}."""

    def __init__(self, list_roles: ListRolesUseCase, get_role: GetRoleUseCase) -> None:
        self._list = list_roles
        self._get = get_role

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        roles = await self._list.execute()
        resp.media = [role_media(r) for r in roles]
        resp.status = falcon.HTTP_200

    async def on_get_one(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_ref: str
    ) -> None:
        role = await self._get.execute(role_ref)
        resp.media = role_media(role)
        resp.status = falcon.HTTP_200
