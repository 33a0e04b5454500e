"""Elasticsearch adapters: client factory, index mapping, CSV loader, street repository."""

from street_archive.infrastructure.search.client import SearchClientFactory
from street_archive.infrastructure.search.loader import (
    load_records,
    read_csv_records,
    record_from_row,
)
from street_archive.infrastructure.search.mapping import build_index_mappings, ensure_index
from street_archive.infrastructure.search.street_repository import (
    StreetSearchRepository,
    map_hit,
    normalize_total,
)

__all__ = [
    "SearchClientFactory",
    "StreetSearchRepository",
    "build_index_mappings",
    "ensure_index",
    "load_records",
    "map_hit",
    "normalize_total",
    "read_csv_records",
    "record_from_row",
]
