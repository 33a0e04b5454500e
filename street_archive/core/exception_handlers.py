"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain, backend and
framework exceptions to JSON responses of the form {"error", "code"}.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from street_archive.core.config import get_settings
from street_archive.domain.exceptions import StreetArchiveException
from street_archive.infrastructure.exceptions import SearchBackendException

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status when applicable
_ERROR_CODE_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "RESOURCE_NOT_FOUND": 404,
    "SEARCH_BACKEND_ERROR": 500,
}


def _street_archive_exception_handler(
    request: Request, exc: StreetArchiveException
) -> JSONResponse:
    """Return JSON from StreetArchiveException.to_dict() with appropriate status code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    if isinstance(exc, SearchBackendException):
        logger.error(
            "Search backend error: %s (%s)",
            exc.message,
            exc.original_error or "no cause",
            exc_info=exc.original_error,
        )
    return JSONResponse(status_code=status, content=exc.to_dict())


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 with validation error details (malformed request shape)."""
    return JSONResponse(
        status_code=422,
        content={
            "error": "Request validation failed",
            "code": "REQUEST_VALIDATION_ERROR",
            "details": {"errors": jsonable_encoder(exc.errors())},
        },
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (unknown routes, 405 ...)."""
    if exc.status_code == 404 and exc.detail == "Not Found":
        message = f"Route {request.method} {request.url.path} not found"
    else:
        message = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message, "code": "HTTP_ERROR"},
        headers=getattr(exc, "headers", None),
    )


def _rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Return 429 in the common error shape; adds X-RateLimit-* headers when enabled."""
    response = JSONResponse(
        status_code=429,
        content={"error": f"Rate limit exceeded: {exc.detail}", "code": "RATE_LIMITED"},
    )
    view_rate_limit = getattr(request.state, "view_rate_limit", None)
    if view_rate_limit is not None:
        response = request.app.state.limiter._inject_headers(response, view_rate_limit)
    return response


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    detail: Any = str(exc) if settings.debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"error": detail, "code": "INTERNAL_ERROR"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: StreetArchiveException (and
    subclasses), RequestValidationError, RateLimitExceeded (slowapi),
    StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(StreetArchiveException, _street_archive_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
