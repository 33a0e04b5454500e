"""App wiring: request IDs, CORS, error shape for unknown routes."""

from httpx import AsyncClient


async def test_request_id_generated_and_echoed(client: AsyncClient) -> None:
    response = await client.get("/api/search", params={"q": "ויצמן"})
    request_id = response.headers.get("X-Request-ID")
    assert request_id
    assert response.headers.get("X-Correlation-ID") == request_id


async def test_client_request_id_is_forwarded(client: AsyncClient) -> None:
    response = await client.get(
        "/api/search",
        params={"q": "ויצמן"},
        headers={"X-Request-ID": "req-abc_1", "X-Correlation-ID": "corr-9"},
    )
    assert response.headers["X-Request-ID"] == "req-abc_1"
    assert response.headers["X-Correlation-ID"] == "corr-9"


async def test_unsafe_request_id_is_replaced(client: AsyncClient) -> None:
    response = await client.get(
        "/api/search", params={"q": "ויצמן"}, headers={"X-Request-ID": "bad id <x>"}
    )
    assert response.headers["X-Request-ID"] != "bad id <x>"


async def test_cors_preflight_allows_configured_origin(client: AsyncClient) -> None:
    response = await client.options(
        "/api/search",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "GET",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"


async def test_cors_rejects_unknown_origin(client: AsyncClient) -> None:
    response = await client.get(
        "/api/search", params={"q": "ויצמן"}, headers={"Origin": "https://evil.example"}
    )
    assert "access-control-allow-origin" not in response.headers


async def test_unknown_route_uses_error_shape(client: AsyncClient) -> None:
    response = await client.get("/api/nope")
    assert response.status_code == 404
    assert response.json() == {"error": "Route GET /api/nope not found", "code": "HTTP_ERROR"}


async def test_wrong_method_on_delete(client: AsyncClient) -> None:
    response = await client.get("/api/delete/street-801")
    assert response.status_code == 405
    assert response.json()["code"] == "HTTP_ERROR"
