"""Smoke tests for health and app wiring."""

from unittest.mock import MagicMock

from fastapi import FastAPI
from httpx import AsyncClient


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/v1/health returns 200 and status ok."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json().get("status") == "ok"


async def test_ready_returns_503_without_platform(app: FastAPI, client: AsyncClient) -> None:
    """Readiness fails while no Firebase platform handle exists."""
    app.state.platform = None
    response = await client.get("/api/v1/health/ready")
    assert response.status_code == 503
    assert response.json()["status"] == "not_ready"


async def test_ready_returns_ok_with_platform(app: FastAPI, client: AsyncClient) -> None:
    """Readiness succeeds once the platform handle is set."""
    app.state.platform = MagicMock()
    response = await client.get("/api/v1/health/ready")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


async def test_unknown_route_uses_error_envelope(client: AsyncClient) -> None:
    """404s are returned in the {"error": {...}} envelope."""
    response = await client.get("/api/v1/nope")
    assert response.status_code == 404
    assert "error" in response.json()
