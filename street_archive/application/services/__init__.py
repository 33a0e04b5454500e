"""Application services: input validation and query translation."""

from street_archive.application.services.input_validator import (
    normalize_search_mode,
    validate_record_id,
    validate_search_query,
)
from street_archive.application.services.query_translator import (
    QueryExpression,
    build_search_query,
    deleted_exclusion,
)

__all__ = [
    "QueryExpression",
    "build_search_query",
    "deleted_exclusion",
    "normalize_search_mode",
    "validate_record_id",
    "validate_search_query",
]
