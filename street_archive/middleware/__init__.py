"""HTTP middleware: request/correlation ID context and access log.

Applied in main app; order matters (last added = outermost).
Import and use from street_archive.main.
"""

from street_archive.middleware.access_log import AccessLogMiddleware
from street_archive.middleware.request_context import RequestContextMiddleware

__all__ = [
    "AccessLogMiddleware",
    "RequestContextMiddleware",
]
