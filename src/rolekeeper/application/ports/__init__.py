"""Application ports - interfaces for external adapters."""

from rolekeeper.application.ports.actee_locator import ActeeLocator
from rolekeeper.application.ports.authorizer import Authorizer
from rolekeeper.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "ActeeLocator",
    "Authorizer",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
