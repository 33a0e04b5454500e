"""HTTP API layer."""

from street_archive.api.router import api_router, health_router

__all__ = ["api_router", "health_router"]
