"""Health check endpoints."""

import logging

import falcon.asgi
import psycopg

logger = logging.getLogger(__name__)


class HealthResource:
    """Liveness, and readiness backed by a role catalog read."""

    def __init__(self, unit_of_work_factory: type | None = None) -> None:
        self._uow_factory = unit_of_work_factory

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - database reachable and roles seeded."""
        if self._uow_factory is not None:
            try:
                async with self._uow_factory() as uow:
                    roles = await uow.roles.list_all()
            except psycopg.Error as e:
                logger.warning("Readiness check failed: %s", e)
                resp.media = {"status": "unavailable"}
                resp.status = falcon.HTTP_503
                return
            if not roles:
                resp.media = {"status": "unseeded"}
                resp.status = falcon.HTTP_503
                return
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200
