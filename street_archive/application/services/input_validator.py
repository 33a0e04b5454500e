"""Validation of raw caller input before it reaches query translation.

Each function takes the raw wire value (possibly None or a non-string) and
either returns the normalized value or raises ValidationException.
"""

from street_archive.core import constants
from street_archive.domain.enums import SearchMode
from street_archive.domain.exceptions import ValidationException
from street_archive.shared.utils.sanitization import InputSanitizer


def validate_search_query(value: object) -> str:
    """Validate and sanitize a search query.

    The length limit counts code points (an emoji is one character) of the
    trimmed text before sanitization, so a 200-character query full of
    brackets is accepted and comes back shorter (possibly empty).

    Args:
        value: Raw query from the caller.

    Returns:
        Trimmed query with denylisted characters removed.

    Raises:
        ValidationException: If missing or '' (required), not a string,
            whitespace-only (empty), or too long.
    """
    if not value or not isinstance(value, str):
        raise ValidationException(constants.SEARCH_QUERY_REQUIRED, field="q")
    trimmed = value.strip()
    if not trimmed:
        raise ValidationException(constants.SEARCH_QUERY_EMPTY, field="q")
    if len(trimmed) > constants.MAX_QUERY_LENGTH:
        raise ValidationException(constants.SEARCH_QUERY_TOO_LONG, field="q")
    return InputSanitizer.strip_denylisted(trimmed)


def validate_record_id(value: object) -> str:
    """Validate a record identifier and return it trimmed.

    Raises:
        ValidationException: If missing, not a string, blank, longer than
            MAX_RECORD_ID_LENGTH, or not made of [A-Za-z0-9_-].
    """
    if not value or not isinstance(value, str):
        raise ValidationException(constants.RECORD_ID_REQUIRED, field="id")
    trimmed = value.strip()
    if not trimmed:
        raise ValidationException(constants.RECORD_ID_EMPTY, field="id")
    if len(trimmed) > constants.MAX_RECORD_ID_LENGTH:
        raise ValidationException(constants.RECORD_ID_TOO_LONG, field="id")
    if not InputSanitizer.is_safe_identifier(trimmed):
        raise ValidationException(constants.RECORD_ID_INVALID_FORMAT, field="id")
    return trimmed


def normalize_search_mode(value: object) -> SearchMode:
    """Return the effective search mode; unknown values become the default."""
    return SearchMode.from_raw(value)
