"""Bulk loading of street records from the archive CSV export.

The CSV header row holds the Hebrew field names. Every loaded record gets
deleted=false; unknown columns are dropped.
"""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

from elasticsearch import AsyncElasticsearch
from elasticsearch.helpers import async_bulk

from street_archive.domain.street_fields import DELETED_FIELD, SEARCHABLE_FIELDS

logger = logging.getLogger(__name__)


def record_from_row(row: dict[str, Any]) -> dict[str, Any]:
    """Keep the searchable columns (trimmed, missing as '') and add the tombstone flag."""
    record: dict[str, Any] = {}
    for name in SEARCHABLE_FIELDS:
        value = row.get(name)
        record[name] = value.strip() if isinstance(value, str) else ""
    record[DELETED_FIELD] = False
    return record


def read_csv_records(path: str | Path) -> list[dict[str, Any]]:
    """Read the archive CSV (UTF-8, optional BOM) into index-ready records."""
    with open(path, encoding="utf-8-sig", newline="") as f:
        return [
            record_from_row(row)
            for row in csv.DictReader(f)
            if any((value or "").strip() for value in row.values() if isinstance(value, str))
        ]


def bulk_actions(index: str, records: Iterable[dict[str, Any]]) -> Iterator[dict[str, Any]]:
    """Index actions for async_bulk; ids are assigned by the backend."""
    for record in records:
        yield {"_index": index, "_source": record}


async def load_records(
    client: AsyncElasticsearch, index: str, records: list[dict[str, Any]]
) -> tuple[int, list[Any]]:
    """Bulk index records and refresh the index.

    Returns:
        (number indexed, list of per-document errors).
    """
    indexed, errors = await async_bulk(
        client, bulk_actions(index, records), refresh=True, raise_on_error=False
    )
    if errors:
        logger.error("%d record(s) failed to index into %s", len(errors), index)
    logger.info("Indexed %d record(s) into %s", indexed, index)
    return indexed, errors
