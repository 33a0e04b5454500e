"""Domain enumerations for the street archive.

Enums represent fixed sets of domain values (e.g. search mode).
"""

from enum import Enum


class SearchMode(str, Enum):
    """Matching strategy requested by the caller.

    FREE matches the main name only; EXACT matches any token in any
    searchable field; FULL matches the whole phrase in any searchable field.
    """

    FREE = "free"
    EXACT = "exact"
    FULL = "full"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid mode values as strings."""
        return [mode.value for mode in cls]

    @classmethod
    def default(cls) -> "SearchMode":
        """Return the mode used when none (or an unknown one) is given."""
        return cls.FREE

    @classmethod
    def from_raw(cls, value: object) -> "SearchMode":
        """Normalize a raw wire value into a mode. Never raises.

        Matching is exact and case-sensitive: 'FULL' or 'bogus' both fall
        back to the default, as do None and non-string values.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value in cls.values():
            return cls(value)
        return cls.default()
