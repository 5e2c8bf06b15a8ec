"""Integration tests for the HTTP shell: health probes and middleware."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from app.main import app

pytestmark = pytest.mark.asyncio


class TestHealthEndpoints:
    """Test /health and /ready liveness/readiness probes."""

    async def test_health_check(self, client):
        resp = await client.get("/health")
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "healthy"
        assert body["service"] == "user-auth-service"

    async def test_readiness_check(self, client):
        resp = await client.get("/ready")
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "ready"
        assert body["checks"] == {"database": "ok", "redis": "ok"}

    async def test_readiness_degraded_when_redis_down(self, client):
        healthy_redis = app.state.redis
        broken = MagicMock()
        broken.ping = AsyncMock(side_effect=ConnectionError("redis down"))
        app.state.redis = broken
        try:
            resp = await client.get("/ready")
        finally:
            app.state.redis = healthy_redis

        assert resp.status_code == 503
        body = resp.json()
        assert body["status"] == "degraded"
        assert body["checks"]["redis"] == "unavailable"

    async def test_api_ping(self, client):
        resp = await client.get("/api/v1/ping")
        assert resp.status_code == 200
        assert resp.json() == {"ping": "pong"}


class TestMiddleware:
    async def test_request_id_generated(self, client):
        resp = await client.get("/health")
        assert resp.headers["x-request-id"]

    async def test_request_id_echoed(self, client):
        resp = await client.get("/health", headers={"X-Request-ID": "req-123"})
        assert resp.headers["x-request-id"] == "req-123"

    async def test_security_headers_present(self, client):
        resp = await client.get("/health")
        assert resp.headers["x-content-type-options"] == "nosniff"
        assert resp.headers["x-frame-options"] == "DENY"
        assert resp.headers["cache-control"] == "no-store"
