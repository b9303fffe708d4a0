"""Application services shared by use cases."""

from rolekeeper.application.services.resolution import Resolver, gather_or_fail

__all__ = ["Resolver", "gather_or_fail"]
