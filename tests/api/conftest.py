"""Fixtures for API tests."""

import pytest

from rolekeeper.config import Settings
from rolekeeper.infrastructure.permission.authorizer import RoleKeeperAuthorizer
from rolekeeper.interfaces.api.middleware.auth import RequestActor
from rolekeeper.main import build_app


class AuthBypassMiddleware:
    """Middleware that takes the calling actor from X-Actor for testing."""

    async def process_request(self, req, resp):
        actor_id = req.get_header("X-Actor")
        req.context.user = RequestActor(actor_id=actor_id) if actor_id else None


@pytest.fixture
def app(uow_factory):
    """Falcon ASGI app over the fake database with the real authorizer."""
    settings = Settings(request_timeout_seconds=5)
    return build_app(
        uow_factory,
        RoleKeeperAuthorizer(uow_factory),
        settings,
        middleware=[AuthBypassMiddleware()],
    )


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    from falcon.testing import TestClient
    return TestClient(app)


def as_actor(actor_id: str) -> dict[str, str]:
    return {"X-Actor": actor_id}
