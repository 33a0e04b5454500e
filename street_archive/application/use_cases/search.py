"""Street search use case. Validates input, translates, delegates to IStreetRepository."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from street_archive.application.dtos.search import SearchResult
from street_archive.application.services.input_validator import (
    normalize_search_mode,
    validate_search_query,
)
from street_archive.application.services.query_translator import build_search_query
from street_archive.shared.telemetry.tracing import add_span_attributes

if TYPE_CHECKING:
    from street_archive.application.interfaces.repositories import IStreetRepository

logger = logging.getLogger(__name__)


class StreetSearchService:
    """Search street records in free, exact, or full mode (deleted records excluded)."""

    def __init__(self, street_repo: "IStreetRepository") -> None:
        self.street_repo = street_repo

    async def search(self, q: object, mode: object = None) -> SearchResult:
        """Search with a raw query and raw mode.

        Unknown or missing modes fall back to free; the result carries the
        mode that was actually applied.

        Raises:
            ValidationException: If q is missing, blank, or too long.
            SearchBackendException: If the backend call fails.
        """
        query = validate_search_query(q)
        effective_mode = normalize_search_mode(mode)
        if mode is not None and mode != effective_mode.value:
            logger.debug("Unknown search mode %r, using %s", mode, effective_mode.value)

        expression = build_search_query(query, effective_mode)
        page = await self.street_repo.search(expression)

        add_span_attributes(
            **{"search.mode": effective_mode.value, "search.total": page.total}
        )
        logger.info(
            "Search mode=%s returned %d of %d hits",
            effective_mode.value,
            len(page.hits),
            page.total,
        )
        return SearchResult(hits=page.hits, total=page.total, mode=effective_mode)
