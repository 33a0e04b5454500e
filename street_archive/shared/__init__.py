"""Shared utilities: request context, telemetry, and input sanitization.

Used by domain, application, and infrastructure. No business logic.
"""

from street_archive.shared.context import (
    RequestContext,
    bind_request_context,
    get_request_context,
    get_request_id,
    reset_request_context,
)

__all__ = [
    "RequestContext",
    "bind_request_context",
    "get_request_context",
    "get_request_id",
    "reset_request_context",
]
