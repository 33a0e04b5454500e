"""Access log middleware: one line per HTTP request (method, path, status, duration).

Query strings are not logged; they carry user search text.
Uses raw ASGI (no BaseHTTPMiddleware).
"""

import logging
import time
from typing import Callable

logger = logging.getLogger("street_archive.access")


def AccessLogMiddleware(app: Callable) -> Callable:
    """Log each HTTP request after the response starts. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        started = time.perf_counter()
        status_holder: dict[str, int] = {"status": 500}

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                status_holder["status"] = message["status"]
            await send(message)

        try:
            await app(scope, receive, send_wrapper)
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                "%s %s -> %d (%.1f ms)",
                scope.get("method", ""),
                scope.get("path", ""),
                status_holder["status"],
                elapsed_ms,
            )

    return asgi_app
