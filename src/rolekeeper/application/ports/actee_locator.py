"""Actee locator port - one per securable resource type."""

from typing import Protocol

from rolekeeper.application.ports.unit_of_work import UnitOfWork
from rolekeeper.domain.entities import Actee


class ActeeLocator(Protocol):
    """Locate an actee from path parameters, raising NotFound if it does not exist."""

    async def locate(self, uow: UnitOfWork, params: dict[str, str]) -> Actee: ...
