"""Application entry point and composition root."""

import falcon.asgi

from rolekeeper import __version__
from rolekeeper.application.use_cases.assignment.grant_role import GrantRoleUseCase
from rolekeeper.application.use_cases.assignment.list_assignments import (
    ListAssignmentsUseCase,
)
from rolekeeper.application.use_cases.assignment.list_assignments_by_role import (
    ListAssignmentsByRoleUseCase,
)
from rolekeeper.application.use_cases.assignment.list_form_assignments import (
    ListFormAssignmentsUseCase,
)
from rolekeeper.application.use_cases.assignment.revoke_role import RevokeRoleUseCase
from rolekeeper.application.use_cases.audit.list_audits import ListAuditsUseCase
from rolekeeper.application.use_cases.role.list_roles import GetRoleUseCase, ListRolesUseCase
from rolekeeper.config import Settings, get_settings
from rolekeeper.infrastructure.actees.locators import FormLocator, ProjectLocator, RootLocator
from rolekeeper.infrastructure.auth.keycloak_provider import KeycloakProvider
from rolekeeper.infrastructure.permission.authorizer import RoleKeeperAuthorizer
from rolekeeper.infrastructure.persistence.postgres.connection import create_pool
from rolekeeper.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from rolekeeper.interfaces.api.errors import register_error_handlers
from rolekeeper.interfaces.api.middleware.auth import AuthMiddleware
from rolekeeper.interfaces.api.middleware.cors import CORSMiddleware
from rolekeeper.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from rolekeeper.interfaces.api.resources.assignments import add_assignment_routes
from rolekeeper.interfaces.api.resources.audits import AuditsResource
from rolekeeper.interfaces.api.resources.form_assignments import FormAssignmentsResource
from rolekeeper.interfaces.api.resources.health import HealthResource
from rolekeeper.interfaces.api.resources.roles import RolesResource
from rolekeeper.logging_config import configure_logging

# Base path and locator for every actee type that accepts assignments.
ACTEE_ROUTES = (
    ("/v1", RootLocator()),
    ("/v1/projects/{project_id}", ProjectLocator()),
    ("/v1/projects/{project_id}/forms/{xml_form_id}", FormLocator()),
)


def main() -> None:
    """CLI entry point."""
    print(f"RoleKeeper v{__version__}")


def build_app(
    uow_factory,
    authorizer,
    settings: Settings,
    middleware: list | None = None,
) -> falcon.asgi.App:
    """Wire use cases and resources onto a Falcon app."""
    timeout = settings.request_timeout_seconds

    list_assignments = ListAssignmentsUseCase(uow_factory, authorizer, timeout)
    list_by_role = ListAssignmentsByRoleUseCase(uow_factory, authorizer, timeout)
    grant_role = GrantRoleUseCase(uow_factory, authorizer, timeout)
    revoke_role = RevokeRoleUseCase(uow_factory, authorizer, timeout)
    list_form_assignments = ListFormAssignmentsUseCase(uow_factory, authorizer, timeout)

    app = falcon.asgi.App(middleware=middleware or [])
    register_error_handlers(app)

    health_resource = HealthResource(uow_factory)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")

    roles_resource = RolesResource(ListRolesUseCase(uow_factory), GetRoleUseCase(uow_factory))
    app.add_route("/v1/roles", roles_resource)
    app.add_route("/v1/roles/{role_ref}", roles_resource, suffix="one")
    app.add_route("/v1/audits", AuditsResource(ListAuditsUseCase(uow_factory, authorizer)))

    form_assignments_resource = FormAssignmentsResource(list_form_assignments)
    app.add_route(
        "/v1/projects/{project_id}/assignments/forms", form_assignments_resource
    )
    app.add_route(
        "/v1/projects/{project_id}/assignments/forms/{role_ref}",
        form_assignments_resource,
        suffix="role",
    )

    for base, locator in ACTEE_ROUTES:
        add_assignment_routes(
            app, base, locator, list_assignments, list_by_role, grant_role, revoke_role
        )
    return app


def create_rolekeeper_app() -> falcon.asgi.App:
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings.log_level)

    pool = create_pool(
        settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
    )
    uow_factory = create_uow_factory(pool)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )

    cors_origins = [
        o.strip() for o in settings.cors_origins.split(",") if o.strip()
    ]
    return build_app(
        uow_factory,
        RoleKeeperAuthorizer(uow_factory),
        settings,
        middleware=[
            CORSMiddleware(cors_origins),
            PoolLifespanMiddleware(pool),
            AuthMiddleware(keycloak),
        ],
    )


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "rolekeeper.main:create_rolekeeper_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
        log_level=settings.log_level.lower(),
    )
