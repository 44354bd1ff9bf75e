"""Smoke tests for health and app wiring."""

from httpx import AsyncClient


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /health returns 200, status OK and a UTC timestamp."""
    response = await client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "OK"
    assert data["timestamp"].endswith("Z")


async def test_health_needs_no_token(client: AsyncClient) -> None:
    response = await client.get("/health", headers={"Authorization": "Bearer garbage"})
    assert response.status_code == 200


async def test_response_carries_request_id_and_security_headers(client: AsyncClient) -> None:
    response = await client.get("/health", headers={"X-Request-ID": "req-123"})
    assert response.headers["x-request-id"] == "req-123"
    assert response.headers["x-content-type-options"] == "nosniff"
    assert response.headers["x-frame-options"] == "DENY"


async def test_unsafe_request_id_is_replaced(client: AsyncClient) -> None:
    """Client request IDs with unsafe characters are swapped for a generated one."""
    response = await client.get("/health", headers={"X-Request-ID": "bad id with spaces!"})
    assert response.headers["x-request-id"] != "bad id with spaces!"
    assert len(response.headers["x-request-id"]) == 36


async def test_unknown_route_uses_error_shape(client: AsyncClient) -> None:
    response = await client.get("/api/does-not-exist")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


async def test_oversized_body_rejected(client: AsyncClient) -> None:
    from lawdesk.core.config import get_settings

    too_big = "x" * (get_settings().max_request_size + 1)
    response = await client.post(
        "/api/auth/signin",
        content=too_big,
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 413
    assert "error" in response.json()
