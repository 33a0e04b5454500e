"""Infrastructure exceptions for search-backend operations.

Backend errors extend StreetArchiveException so presentation can map them
to HTTP responses consistently.
"""

from street_archive.domain.exceptions import StreetArchiveException


class SearchBackendException(StreetArchiveException):
    """Transport or backend failure during search, delete, or health checks.

    original_error keeps the client exception for logs; it is never part
    of message, details, or to_dict().
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        original_error: BaseException | None = None,
    ) -> None:
        details = {"operation": operation} if operation else {}
        super().__init__(message, "SEARCH_BACKEND_ERROR", details)
        self.original_error = original_error
