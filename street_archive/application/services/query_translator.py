"""Translation of (query, mode) into an Elasticsearch query expression.

Pure functions: no I/O and no client dependency. Every expression is a
bool query whose must_not excludes tombstoned records; the query text is
only ever placed as a match value, so it cannot alter that structure.
"""

from collections.abc import Callable
from typing import Any

from street_archive.domain.enums import SearchMode
from street_archive.domain.street_fields import (
    DELETED_FIELD,
    SEARCHABLE_FIELDS,
    StreetField,
)

QueryExpression = dict[str, Any]


def _free_clause(query: str) -> QueryExpression:
    """Tokenized match on the main name only."""
    return {"match": {StreetField.MAIN_NAME.value: query}}


def _exact_clause(query: str) -> QueryExpression:
    """Any token in any searchable field."""
    return {
        "multi_match": {
            "query": query,
            "fields": list(SEARCHABLE_FIELDS),
            "operator": "or",
            "type": "best_fields",
        }
    }


def _full_clause(query: str) -> QueryExpression:
    """Whole query as an ordered, adjacent phrase in any searchable field."""
    return {
        "multi_match": {
            "query": query,
            "fields": list(SEARCHABLE_FIELDS),
            "type": "phrase",
        }
    }


_MODE_CLAUSES: dict[SearchMode, Callable[[str], QueryExpression]] = {
    SearchMode.FREE: _free_clause,
    SearchMode.EXACT: _exact_clause,
    SearchMode.FULL: _full_clause,
}


def deleted_exclusion() -> QueryExpression:
    """Clause matching tombstoned records (used under must_not)."""
    return {"term": {DELETED_FIELD: True}}


def build_search_query(query: str, mode: SearchMode) -> QueryExpression:
    """Build the backend query for a validated query and an effective mode.

    Args:
        query: Sanitized query text (may be empty after sanitization).
        mode: Effective search mode (already normalized).

    Returns:
        {"bool": {"must": [<mode clause>], "must_not": [<deleted term>]}}
    """
    clause = _MODE_CLAUSES[SearchMode.from_raw(mode)](query)
    return {
        "bool": {
            "must": [clause],
            "must_not": [deleted_exclusion()],
        }
    }
