"""Domain exceptions."""


class RoleKeeperError(Exception):
    """Base exception for RoleKeeper."""

    pass


class PermissionDenied(RoleKeeperError):
    """Actor does not have permission for the requested action."""

    pass


class NotFound(RoleKeeperError):
    """Requested entity was not found."""

    def __init__(self, kind: str, reference: object = None) -> None:
        self.kind = kind
        self.reference = reference
        if reference is None:
            super().__init__(f"{kind} not found")
        else:
            super().__init__(f"{kind} not found: {reference}")


class ValidationError(RoleKeeperError):
    """Validation failed for input data."""

    pass


class AuditFailure(RoleKeeperError):
    """Audit record could not be written; the surrounding mutation is aborted."""

    pass
