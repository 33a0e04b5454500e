"""Domain exceptions for the street archive.

Defines domain-level exceptions for invalid input and missing records.
These exceptions are independent of infrastructure concerns. The
presentation layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class StreetArchiveException(Exception):
    """Base exception for all street archive errors.

    All custom exceptions inherit from this class so handlers can map
    them to responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description (safe to show callers).
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, record_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body: error message, code, and details when present."""
        body: dict[str, Any] = {"error": self.message, "code": self.error_code}
        if self.details:
            body["details"] = self.details
        return body


class ValidationException(StreetArchiveException):
    """Raised when a query, record identifier, or other input is malformed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional input name that failed validation (e.g. 'q', 'id').
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class RecordNotFoundException(StreetArchiveException):
    """Raised when a record targeted by soft delete does not exist."""

    def __init__(self, record_id: str, message: str = "Document not found") -> None:
        super().__init__(message, "RESOURCE_NOT_FOUND", {"record_id": record_id})
