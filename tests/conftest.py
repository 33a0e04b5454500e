"""Pytest configuration and fixtures for street-archive.

HTTP tests run against street_archive.main:app over ASGI with the search
client dependency overridden by an in-memory FakeElasticsearch (see
fakes.py). Telemetry and rate limiting are switched off before the app is
imported so create_app() picks the test settings up.
"""

import os

os.environ.setdefault("TELEMETRY_ENABLED", "false")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from street_archive.core.config import get_settings  # noqa: E402

get_settings.cache_clear()

from fakes import SAMPLE_RECORDS, FakeElasticsearch  # noqa: E402
from street_archive.api.dependencies import get_search_client  # noqa: E402
from street_archive.main import app  # noqa: E402


@pytest.fixture
def fake_es() -> FakeElasticsearch:
    """Fresh in-memory index holding SAMPLE_RECORDS."""
    return FakeElasticsearch(SAMPLE_RECORDS)


@pytest.fixture
async def client(fake_es: FakeElasticsearch) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI) backed by fake_es."""
    app.dependency_overrides[get_search_client] = lambda: fake_es
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.pop(get_search_client, None)


@pytest.fixture
def es_test_url() -> str:
    """Live Elasticsearch URL for requires_es tests; skips when unset."""
    url = os.environ.get("ELASTICSEARCH_TEST_URL")
    if not url:
        pytest.skip("Elasticsearch not configured: set ELASTICSEARCH_TEST_URL")
    return url
