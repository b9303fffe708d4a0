"""RoleKeeper - role assignment and authorization service."""

__version__ = "0.1.0"
