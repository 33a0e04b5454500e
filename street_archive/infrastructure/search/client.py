"""Search client factory: creates the shared AsyncElasticsearch from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from urllib.parse import urlparse

from elasticsearch import AsyncElasticsearch

if TYPE_CHECKING:
    from street_archive.core.config import Settings


class SearchClientFactory:
    """Factory for the process-wide search client (one per app lifespan)."""

    @staticmethod
    def client_options(settings: "Settings") -> dict[str, Any]:
        """Keyword arguments for AsyncElasticsearch built from settings.

        TLS options are only passed for https URLs; the client rejects
        them for plain http nodes.
        """
        options: dict[str, Any] = {
            "hosts": [settings.elasticsearch_url],
            "request_timeout": settings.elasticsearch_request_timeout,
        }
        if settings.elasticsearch_api_key is not None:
            options["api_key"] = settings.elasticsearch_api_key.get_secret_value()
        elif settings.elasticsearch_username and settings.elasticsearch_password:
            options["basic_auth"] = (
                settings.elasticsearch_username,
                settings.elasticsearch_password.get_secret_value(),
            )
        if urlparse(settings.elasticsearch_url).scheme == "https":
            options["verify_certs"] = settings.elasticsearch_verify_certs
            if settings.elasticsearch_ca_certs:
                options["ca_certs"] = settings.elasticsearch_ca_certs
        return options

    @classmethod
    def create_search_client(cls, settings: "Settings | None" = None) -> AsyncElasticsearch:
        """Create the async client. No connection is opened until the first call.

        Args:
            settings: Application settings; if None, uses get_settings().
        """
        from street_archive.core.config import get_settings

        s = settings or get_settings()
        return AsyncElasticsearch(**cls.client_options(s))
