"""Rate limiting on search and delete: 429 in the common error shape."""

from collections.abc import Iterator

import pytest
from httpx import AsyncClient

from street_archive.core.limiter import limiter


@pytest.fixture
def rate_limited() -> Iterator[None]:
    """Enable the shared limiter with empty counters; restore after the test."""
    previous = limiter.enabled
    limiter.enabled = True
    limiter.reset()
    yield
    limiter.reset()
    limiter.enabled = previous


async def test_delete_over_limit_returns_429(client: AsyncClient, rate_limited: None) -> None:
    for _ in range(30):
        response = await client.post("/api/delete/street-801")
        assert response.status_code == 200

    response = await client.post("/api/delete/street-801")
    assert response.status_code == 429
    body = response.json()
    assert set(body) == {"error", "code"}
    assert body["code"] == "RATE_LIMITED"
    assert body["error"] == "Rate limit exceeded: 30 per 1 minute"


async def test_search_over_limit_returns_429(client: AsyncClient, rate_limited: None) -> None:
    for _ in range(120):
        response = await client.get("/api/search", params={"q": "ויצמן"})
        assert response.status_code == 200

    response = await client.get("/api/search", params={"q": "ויצמן"})
    assert response.status_code == 429
    assert response.json()["code"] == "RATE_LIMITED"
    assert response.headers.get("X-Request-ID")


async def test_limits_are_counted_per_endpoint(client: AsyncClient, rate_limited: None) -> None:
    for _ in range(30):
        await client.post("/api/delete/street-814")

    assert (await client.post("/api/delete/street-814")).status_code == 429
    response = await client.get("/api/search", params={"q": "ויצמן"})
    assert response.status_code == 200
