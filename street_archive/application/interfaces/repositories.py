"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from street_archive.application.dtos.search import SearchPage


class IStreetRepository(Protocol):
    """Protocol for the street record store (search backend)."""

    async def search(self, expression: dict[str, Any]) -> SearchPage:
        """Run a query expression; return capped, mapped hits and the total."""

    async def mark_deleted(self, record_id: str) -> None:
        """Set the tombstone flag on a record, visible to the next search."""

    async def ping(self) -> bool:
        """Return True if the backend is reachable."""
