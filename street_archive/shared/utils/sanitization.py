"""Input sanitization for search text and record identifiers."""

import re
from typing import ClassVar


class InputSanitizer:
    """
    Character-level checks applied to user input before it reaches the
    search backend.

    Query text is always sent as a value inside a structured query, never
    as query-string syntax; stripping the denylist is a second layer.
    """

    # Angle brackets, braces, square brackets, backslash.
    QUERY_DENYLIST: ClassVar[re.Pattern[str]] = re.compile(r"[<>{}\[\]\\]")
    IDENTIFIER_PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[a-zA-Z0-9_-]+$")

    @classmethod
    def strip_denylisted(cls, value: str) -> str:
        """Remove denylisted characters. Never raises; may return ''.

        Args:
            value: Query text (already trimmed).

        Returns:
            The text without any denylisted character.
        """
        if not value:
            return value
        return cls.QUERY_DENYLIST.sub("", value)

    @classmethod
    def is_safe_identifier(cls, value: str) -> bool:
        """Return True if value is non-empty and only [A-Za-z0-9_-]."""
        # fullmatch: '$' alone would accept a trailing newline.
        return bool(value) and cls.IDENTIFIER_PATTERN.fullmatch(value) is not None
