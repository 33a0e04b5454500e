"""Street record repository backed by Elasticsearch.

Runs translated query expressions (capped at MAX_SEARCH_RESULTS), maps raw
hits to StreetRecord, and applies the soft-delete update. Client errors are
converted to domain/infrastructure exceptions here; nothing is retried.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from elasticsearch import ApiError, AsyncElasticsearch, NotFoundError, TransportError

from street_archive.application.dtos.search import SearchPage, StreetRecord
from street_archive.core import constants
from street_archive.domain.exceptions import RecordNotFoundException
from street_archive.domain.street_fields import DELETED_FIELD, RESULT_FIELDS
from street_archive.infrastructure.exceptions import SearchBackendException
from street_archive.shared.telemetry.tracing import traced

logger = logging.getLogger(__name__)


def normalize_total(raw: Any) -> int:
    """Return the match count from hits.total as a non-negative int.

    Elasticsearch 7+ reports {"value": n, "relation": "eq"}; older versions
    and some proxies report a bare integer. Anything else counts as 0.
    """
    if isinstance(raw, bool):
        return 0
    if isinstance(raw, int):
        return max(raw, 0)
    if isinstance(raw, Mapping):
        return normalize_total(raw.get("value"))
    return 0


def _field_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def map_hit(hit: Mapping[str, Any]) -> StreetRecord:
    """Map one raw hit to a StreetRecord holding only RESULT_FIELDS."""
    source = hit.get("_source") or {}
    return StreetRecord(
        id=str(hit["_id"]),
        fields={name: _field_value(source.get(name)) for name in RESULT_FIELDS},
    )


def _body(response: Any) -> Mapping[str, Any]:
    """Plain dict of a client response (ObjectApiResponse exposes .body)."""
    return getattr(response, "body", response) or {}


class StreetSearchRepository:
    """Search and soft delete on the street index (IStreetRepository)."""

    def __init__(self, client: AsyncElasticsearch, index: str) -> None:
        self.client = client
        self.index = index

    @traced("street_repository.search")
    async def search(self, expression: dict[str, Any]) -> SearchPage:
        """Run expression against the index; return at most MAX_SEARCH_RESULTS hits.

        Raises:
            SearchBackendException: On any transport or API error.
        """
        try:
            response = await self.client.search(
                index=self.index,
                query=expression,
                size=constants.MAX_SEARCH_RESULTS,
                source_includes=list(RESULT_FIELDS),
            )
        except (ApiError, TransportError) as e:
            logger.error("Search on index %s failed: %s", self.index, e)
            raise SearchBackendException(
                constants.SEARCH_FAILED, operation="search", original_error=e
            ) from e

        hits_section = _body(response).get("hits") or {}
        raw_hits = hits_section.get("hits") or []
        hits = [map_hit(hit) for hit in raw_hits[: constants.MAX_SEARCH_RESULTS]]
        return SearchPage(hits=hits, total=normalize_total(hits_section.get("total")))

    @traced("street_repository.mark_deleted")
    async def mark_deleted(self, record_id: str) -> None:
        """Set deleted=true and refresh so the next search no longer sees the record.

        Raises:
            RecordNotFoundException: If the backend reports 404 for the id.
            SearchBackendException: On any other transport or API error.
        """
        try:
            await self.client.update(
                index=self.index,
                id=record_id,
                doc={DELETED_FIELD: True},
                refresh=True,
            )
        except NotFoundError as e:
            raise RecordNotFoundException(record_id, constants.RECORD_NOT_FOUND) from e
        except (ApiError, TransportError) as e:
            logger.error("Soft delete of %s on index %s failed: %s", record_id, self.index, e)
            raise SearchBackendException(
                constants.DELETE_FAILED, operation="delete", original_error=e
            ) from e

    async def ping(self) -> bool:
        """Return True if the cluster answers; never raises for transport errors."""
        try:
            return bool(await self.client.ping())
        except (ApiError, TransportError) as e:
            logger.warning("Search backend ping failed: %s", e)
            return False
