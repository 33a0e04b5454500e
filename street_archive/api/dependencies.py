"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the shared search client, the street
repository, and the application use cases. Routes depend only on these
dependencies, not on infrastructure directly. Tests override
get_search_client to swap the backend.
"""

from __future__ import annotations

from typing import Annotated

from elasticsearch import AsyncElasticsearch
from fastapi import Depends, Request

from street_archive.application.use_cases.search import StreetSearchService
from street_archive.application.use_cases.soft_delete import SoftDeleteService
from street_archive.core import constants
from street_archive.core.config import Settings, get_settings
from street_archive.infrastructure.exceptions import SearchBackendException
from street_archive.infrastructure.search.street_repository import StreetSearchRepository


def get_search_client(request: Request) -> AsyncElasticsearch:
    """Return the client created in the lifespan (app.state.search_client).

    Raises:
        SearchBackendException: If the app was started without a client.
    """
    client = getattr(request.app.state, "search_client", None)
    if client is None:
        raise SearchBackendException(
            constants.SEARCH_BACKEND_UNAVAILABLE, operation="connect"
        )
    return client


def get_street_repo(
    client: Annotated[AsyncElasticsearch, Depends(get_search_client)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> StreetSearchRepository:
    """Street repository bound to the configured index."""
    return StreetSearchRepository(client, settings.elasticsearch_index)


def get_search_service(
    street_repo: Annotated[StreetSearchRepository, Depends(get_street_repo)],
) -> StreetSearchService:
    """Search use case (free / exact / full)."""
    return StreetSearchService(street_repo)


def get_soft_delete_service(
    street_repo: Annotated[StreetSearchRepository, Depends(get_street_repo)],
) -> SoftDeleteService:
    """Soft delete use case."""
    return SoftDeleteService(street_repo)
