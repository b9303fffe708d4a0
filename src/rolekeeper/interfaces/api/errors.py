"""Maps domain exceptions to HTTP responses."""

import logging

import falcon
import falcon.asgi

from rolekeeper.domain.exceptions import (
    AuditFailure,
    NotFound,
    PermissionDenied,
    ValidationError,
)

logger = logging.getLogger(__name__)


def require_actor(req: falcon.asgi.Request) -> str:
    """Return the calling actor id or fail with 401."""
    user = getattr(req.context, "user", None)
    if not user:
        raise falcon.HTTPUnauthorized(title="Unauthorized")
    return user.actor_id


def _error(status: str):
    async def handler(req, resp, ex, params):
        resp.status = status
        resp.media = {"error": str(ex)}

    return handler


async def _audit_failure(req, resp, ex, params):
    logger.error("Aborted %s %s: %s", req.method, req.path, ex)
    resp.status = falcon.HTTP_500
    resp.media = {"error": "Operation could not be recorded"}


async def _timeout(req, resp, ex, params):
    logger.warning("Timed out: %s %s", req.method, req.path)
    resp.status = falcon.HTTP_504
    resp.media = {"error": "Operation timed out"}


async def _unexpected(req, resp, ex, params):
    logger.exception("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def register_error_handlers(app: falcon.asgi.App) -> None:
    """Install handlers; Falcon picks the most specific one per exception."""
    app.add_error_handler(Exception, _unexpected)
    app.add_error_handler(NotFound, _error(falcon.HTTP_404))
    app.add_error_handler(PermissionDenied, _error(falcon.HTTP_403))
    app.add_error_handler(ValidationError, _error(falcon.HTTP_400))
    app.add_error_handler(AuditFailure, _audit_failure)
    app.add_error_handler(TimeoutError, _timeout)
