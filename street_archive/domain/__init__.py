"""Domain layer: search modes, record fields, and domain exceptions."""

from street_archive.domain.enums import SearchMode
from street_archive.domain.exceptions import (
    RecordNotFoundException,
    StreetArchiveException,
    ValidationException,
)
from street_archive.domain.street_fields import (
    DELETED_FIELD,
    RESULT_FIELDS,
    SEARCHABLE_FIELDS,
    StreetField,
)

__all__ = [
    "DELETED_FIELD",
    "RESULT_FIELDS",
    "SEARCHABLE_FIELDS",
    "RecordNotFoundException",
    "SearchMode",
    "StreetArchiveException",
    "StreetField",
    "ValidationException",
]
