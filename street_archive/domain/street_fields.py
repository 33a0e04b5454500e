"""Street record field registry.

Backend field names are the Hebrew column headers of the archive. The
order of SEARCHABLE_FIELDS and RESULT_FIELDS is fixed and is the order
used in multi-field queries and in mapped results.
"""

from enum import Enum


class StreetField(str, Enum):
    """Fields of a street record as stored in the index."""

    MAIN_NAME = "שם ראשי"
    TITLE = "תואר"
    SECONDARY_NAME = "שם מישני"
    GROUP = "קבוצה"
    ADDITIONAL_GROUP = "קבוצה נוספת"
    TYPE = "סוג"
    CODE = "קוד"
    NEIGHBORHOOD = "שכונה"
    DELETED = "deleted"


# Tombstone flag; only this field is ever written by the service.
DELETED_FIELD: str = StreetField.DELETED.value

SEARCHABLE_FIELDS: tuple[str, ...] = (
    StreetField.MAIN_NAME.value,
    StreetField.TITLE.value,
    StreetField.SECONDARY_NAME.value,
    StreetField.GROUP.value,
    StreetField.ADDITIONAL_GROUP.value,
    StreetField.TYPE.value,
    StreetField.CODE.value,
    StreetField.NEIGHBORHOOD.value,
)

# Group fields are searchable but never returned.
RESULT_FIELDS: tuple[str, ...] = (
    StreetField.MAIN_NAME.value,
    StreetField.TITLE.value,
    StreetField.SECONDARY_NAME.value,
    StreetField.TYPE.value,
    StreetField.CODE.value,
    StreetField.NEIGHBORHOOD.value,
)

# Indexed as a single keyword (no text analysis); all other fields are text
# with a .keyword sub-field.
KEYWORD_FIELDS: frozenset[str] = frozenset({StreetField.CODE.value})
