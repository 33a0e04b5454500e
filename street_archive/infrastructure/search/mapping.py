"""Index mapping for street records and an idempotent index creator."""

from __future__ import annotations

import logging
from typing import Any

from elasticsearch import AsyncElasticsearch

from street_archive.domain.street_fields import (
    DELETED_FIELD,
    KEYWORD_FIELDS,
    SEARCHABLE_FIELDS,
)

logger = logging.getLogger(__name__)


def build_index_mappings() -> dict[str, Any]:
    """Return the mappings body: text fields with .keyword sub-fields,
    code as a plain keyword, and the boolean tombstone."""
    properties: dict[str, Any] = {}
    for name in SEARCHABLE_FIELDS:
        if name in KEYWORD_FIELDS:
            properties[name] = {"type": "keyword"}
        else:
            properties[name] = {
                "type": "text",
                "fields": {"keyword": {"type": "keyword"}},
            }
    properties[DELETED_FIELD] = {"type": "boolean", "index": True}
    return {"properties": properties}


async def ensure_index(
    client: AsyncElasticsearch, index: str, *, recreate: bool = False
) -> bool:
    """Create the index with the street mapping if missing.

    Args:
        client: Connected search client.
        index: Index name.
        recreate: Drop an existing index first.

    Returns:
        True if the index was created, False if it already existed.
    """
    exists = bool(await client.indices.exists(index=index))
    if exists and recreate:
        await client.indices.delete(index=index)
        logger.info("Deleted existing index %s", index)
        exists = False
    if exists:
        return False
    await client.indices.create(index=index, mappings=build_index_mappings())
    logger.info("Created index %s", index)
    return True
