"""Auth middleware - establishes the calling actor from a bearer token or as anonymous."""

from dataclasses import dataclass

import falcon.asgi

ANONYMOUS_ACTOR_ID = "anonymous"


@dataclass
class RequestActor:
    """Actor from request context."""

    actor_id: str
    email: str | None = None
    username: str | None = None


class AuthMiddleware:
    """Middleware that validates the bearer token and sets req.context.user."""

    def __init__(self, keycloak_provider=None) -> None:
        self._keycloak = keycloak_provider

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Extract actor from Authorization header. Invalid tokens leave user unset."""
        auth = req.get_header("Authorization")
        if auth and auth.startswith("Bearer "):
            token = auth[7:]
            if self._keycloak:
                actor = await self._keycloak.decode_token(token)
                if actor:
                    req.context.user = RequestActor(
                        actor_id=actor.actor_id,
                        email=actor.email,
                        username=actor.username,
                    )
                    return
            req.context.user = None
        else:
            req.context.user = RequestActor(actor_id=ANONYMOUS_ACTOR_ID)
