"""Port: upstream interest search."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..domain.interest import InterestRecord


@runtime_checkable
class InterestSearchPort(Protocol):
    """Single-call search against the external targeting API."""

    @property
    def configured(self) -> bool:
        """True when the credentials needed for a search are present."""
        ...

    async def search(self, query: str, limit: int) -> list[InterestRecord]: ...
