"""Application lifespan: startup and shutdown.

Single place for startup/shutdown logic. Used by main.py; no business
logic here, only wiring of infrastructure (logging, search client,
telemetry shutdown).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from street_archive.core.config import get_settings
from street_archive.infrastructure.search.client import SearchClientFactory
from street_archive.shared.telemetry.logging import setup_logging
from street_archive.shared.telemetry.telemetry import get_telemetry, set_telemetry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: logging, search client. Telemetry is configured in
    create_app() since instrumentation adds middleware.
    Shutdown order: search client close, telemetry shutdown.
    """
    settings = get_settings()
    setup_logging()

    # ---- Startup ----
    # One client per process; repositories receive it through dependencies.
    app.state.search_client = SearchClientFactory.create_search_client(settings)
    logger.info(
        "Search client configured: %s (index %s)",
        settings.elasticsearch_url,
        settings.elasticsearch_index,
    )

    yield

    # ---- Shutdown ----
    if getattr(app.state, "search_client", None) is not None:
        await app.state.search_client.close()
        app.state.search_client = None
        logger.info("Search client closed")

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)
