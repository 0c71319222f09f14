"""Tests for the health check endpoints."""

import pytest
from httpx import ASGITransport, AsyncClient

from assetdash.config import Settings
from assetdash.infrastructure.dependencies import build_container
from assetdash.main import app, create_app
from store_fakes import FakeRemoteApi


@pytest.mark.asyncio
async def test_health_check_returns_200():
    """Health endpoint should return 200 with status, version, and environment."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/v1/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "version" in data
    assert "environment" in data


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("remote", "expected"),
    [
        (None, {"configured": False, "connected": False}),
        (FakeRemoteApi(), {"configured": True, "connected": True}),
        (FakeRemoteApi(fail=True), {"configured": True, "connected": False}),
    ],
)
async def test_remote_status(remote, expected):
    settings = Settings(load_seed_data=False, storage_backend="none")
    test_app = create_app(build_container(settings, remote=remote))

    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/v1/health/remote")

    assert response.status_code == 200
    data = response.json()
    assert data["configured"] is expected["configured"]
    assert data["connected"] is expected["connected"]
