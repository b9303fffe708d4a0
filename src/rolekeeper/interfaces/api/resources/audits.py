"""Audit log API resource."""

import falcon.asgi

from rolekeeper.application.use_cases.audit.list_audits import ListAuditsUseCase
from rolekeeper.interfaces.api.errors import require_actor
from rolekeeper.interfaces.api.resources.representations import audit_media


class AuditsResource:
    """GET /v1/audits - newest first, optional ?action= filter."""

    def __init__(self, list_audits: ListAuditsUseCase) -> None:
        self._list = list_audits

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        actor_id = require_actor(req)
        limit = req.get_param_as_int("limit", min_value=1, max_value=1000) or 100
        offset = req.get_param_as_int("offset", min_value=0) or 0
        records = await self._list.execute(
            actor_id, action=req.get_param("action"), limit=limit, offset=offset
        )
        resp.media = [audit_media(r) for r in records]
        resp.status = falcon.HTTP_200
