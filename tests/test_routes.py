"""Integration tests for API routes."""

import base64

import pytest
from config import Config, GeneratorConfig, LoggingConfig, ServerConfig
from api.app import create_app
from httpx import AsyncClient, ASGITransport
from sortid.generator import Generator


def _auth_header(username="admin", password="admin123"):
    """Create basic auth header."""
    credentials = base64.b64encode(f"{username}:{password}".encode()).decode()
    return {"Authorization": f"Basic {credentials}"}


class TestIdRoutes:
    """Tests for minting and verification endpoints."""

    @pytest.mark.asyncio
    async def test_mint_single(self, client):
        """GET /ids returns one id."""
        response = await client.get("/api/v1/ids")
        assert response.status_code == 200
        identifier = response.json()["id"]
        assert identifier.startswith("t_")

    @pytest.mark.asyncio
    async def test_mint_batch(self, client):
        """GET /ids?count=n returns a sorted distinct batch."""
        response = await client.get("/api/v1/ids", params={"count": 20})
        assert response.status_code == 200
        ids = response.json()["ids"]
        assert len(set(ids)) == 20
        assert ids == sorted(ids)

    @pytest.mark.asyncio
    async def test_mint_batch_invalid_count(self, client):
        """Counts below 2 are rejected."""
        response = await client.get("/api/v1/ids", params={"count": 1})
        assert response.status_code == 422
        assert "greater than 1" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_mint_batch_not_integer(self, client):
        """Non-integer counts fail request validation."""
        response = await client.get("/api/v1/ids", params={"count": "many"})
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_mint_batch_over_limit(self, tmp_path):
        """Counts above server.max_batch are rejected."""
        config = Config(server=ServerConfig(max_batch=5),
                        logging=LoggingConfig(file=str(tmp_path / "sortid.log")))
        transport = ASGITransport(app=create_app(config))
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/api/v1/ids", params={"count": 6})
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_mint_batch_exhausted(self, tmp_path):
        """A capped batch that cannot be filled returns 503."""
        config = Config(generator=GeneratorConfig(length=0, max_attempts=3),
                        logging=LoggingConfig(file=str(tmp_path / "sortid.log")))
        transport = ASGITransport(app=create_app(config))
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/api/v1/ids", params={"count": 10})
        assert response.status_code == 503

    @pytest.mark.asyncio
    async def test_random(self, client):
        """GET /ids/random returns a bare suffix."""
        response = await client.get("/api/v1/ids/random")
        assert response.status_code == 200
        assert len(response.json()["random"]) == 6

    @pytest.mark.asyncio
    async def test_verify_own_id(self, client):
        """Minted ids verify."""
        identifier = (await client.get("/api/v1/ids")).json()["id"]
        response = await client.post("/api/v1/ids/verify", json={"id": identifier})
        assert response.status_code == 200
        assert response.json() == {"id": identifier, "valid": True}

    @pytest.mark.asyncio
    async def test_verify_foreign_id(self, client):
        """Ids with another prefix do not verify."""
        foreign = Generator(prefix="x_").generate()
        response = await client.post("/api/v1/ids/verify", json={"id": foreign})
        assert response.json()["valid"] is False

    @pytest.mark.asyncio
    async def test_verify_missing_body(self, client):
        """Verify requires an id field."""
        response = await client.post("/api/v1/ids/verify", json={})
        assert response.status_code == 422


class TestHealthRoutes:
    """Tests for health endpoints."""

    @pytest.mark.asyncio
    async def test_health_endpoint(self, client):
        """GET /health returns health status."""
        response = await client.get("/api/v1/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "timestamp" in data
        assert {check["name"] for check in data["checks"]} == {"loop", "generator", "log"}

    @pytest.mark.asyncio
    async def test_heartbeat_endpoint(self, client):
        """GET /heartbeat reports issued count."""
        await client.get("/api/v1/ids", params={"count": 3})
        response = await client.get("/api/v1/heartbeat")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["issued"] == 3
        assert "uptime_s" in data


class TestStatsRoutes:
    """Tests for stats endpoint (requires basic auth)."""

    @pytest.mark.asyncio
    async def test_stats_requires_auth(self, client):
        """GET /stats requires authentication."""
        response = await client.get("/api/v1/stats")
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_stats_wrong_password(self, client):
        """Wrong credentials are refused."""
        response = await client.get("/api/v1/stats", headers=_auth_header(password="nope"))
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_stats_with_auth(self, client, monkeypatch):
        """Credentials come from the environment."""
        monkeypatch.setenv("API_USERNAME", "ops")
        monkeypatch.setenv("API_PASSWORD", "s3cret")
        await client.get("/api/v1/ids")
        response = await client.get("/api/v1/stats", headers=_auth_header("ops", "s3cret"))
        assert response.status_code == 200
        data = response.json()
        assert data["minter"]["issued"] == 1
        assert data["minter"]["generator"]["prefix"] == "t_"
        assert data["audit"]["queued"] == 1
