"""Query options for assignment listings."""

from dataclasses import dataclass


@dataclass(frozen=True)
class QueryOptions:
    """Listing extent and paging.

    ``extended`` joins actor rows into each assignment; minimal listings
    carry ids only.
    """

    extended: bool = False
    limit: int | None = None
    offset: int = 0


MINIMAL = QueryOptions()
EXTENDED = QueryOptions(extended=True)
