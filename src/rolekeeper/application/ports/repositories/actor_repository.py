"""Actor repository port."""

from typing import Protocol

from rolekeeper.domain.entities import Actor


class ActorRepository(Protocol):
    """Port for actor lookup."""

    async def get_by_id(self, actor_id: str) -> Actor | None: ...
