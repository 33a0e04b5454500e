"""Request context management using contextvars.

Holds the request and correlation IDs of the request being served so log
records and backend calls can be tied back to it. Set by the request
context middleware; readable anywhere in the same async task.
"""

from contextvars import ContextVar, Token
from dataclasses import dataclass

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)
_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


@dataclass(frozen=True)
class RequestContext:
    """Immutable snapshot of the current request identifiers."""

    request_id: str | None
    correlation_id: str | None


def bind_request_context(
    request_id: str, correlation_id: str | None = None
) -> tuple[Token, Token]:
    """Bind IDs for the current task. Returns tokens for reset_request_context()."""
    return (
        _request_id.set(request_id),
        _correlation_id.set(correlation_id or request_id),
    )


def reset_request_context(tokens: tuple[Token, Token]) -> None:
    """Restore the context that was active before bind_request_context()."""
    request_token, correlation_token = tokens
    _request_id.reset(request_token)
    _correlation_id.reset(correlation_token)


def get_request_id() -> str | None:
    """Return the current request ID, or None outside a request."""
    return _request_id.get()


def get_request_context() -> RequestContext:
    return RequestContext(
        request_id=_request_id.get(),
        correlation_id=_correlation_id.get(),
    )
