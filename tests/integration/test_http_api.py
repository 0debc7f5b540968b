"""Integration tests for service endpoints and cross-cutting HTTP behaviour."""

import json
from types import SimpleNamespace

import pytest

from banking.main import app

pytestmark = pytest.mark.asyncio


class TestServiceEndpoints:
    async def test_welcome(self, client):
        resp = await client.get("/")
        assert resp.status_code == 200
        assert resp.json() == {"message": "Welcome to the Banking System!"}

    async def test_health_check(self, client):
        resp = await client.get("/health")
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "healthy"
        assert body["service"] == "banking-backend"

    async def test_readiness_check(self, client):
        resp = await client.get("/ready")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ready", "checks": {"database": "ok"}}

    async def test_readiness_degraded_when_database_down(self, client):
        app.state.session_factory.return_value.__aenter__.side_effect = ConnectionError("down")

        resp = await client.get("/ready")

        assert resp.status_code == 503
        assert resp.json()["checks"]["database"] == "unavailable"


class TestHTTPBehaviour:
    async def test_security_headers(self, client):
        resp = await client.get("/health")
        assert resp.headers["x-content-type-options"] == "nosniff"
        assert resp.headers["x-frame-options"] == "DENY"
        assert resp.headers["cache-control"] == "no-store"

    async def test_request_id_generated(self, client):
        resp = await client.get("/health")
        assert resp.headers["x-request-id"]

    async def test_request_id_propagated(self, client):
        resp = await client.get("/health", headers={"X-Request-ID": "req-123"})
        assert resp.headers["x-request-id"] == "req-123"

    async def test_unknown_route_uses_error_body(self, client):
        resp = await client.get("/no-such-route")
        assert resp.status_code == 404
        assert resp.json() == {"error": "Not Found"}

    async def test_wrong_method_uses_error_body(self, client):
        resp = await client.get("/login")
        assert resp.status_code == 405
        assert "error" in resp.json()

    async def test_unhandled_error_hides_details(self):
        handler = app.exception_handlers[Exception]
        request = SimpleNamespace(method="GET", url=SimpleNamespace(path="/boom"))

        resp = await handler(request, RuntimeError("connection string leaked"))

        assert resp.status_code == 500
        assert json.loads(resp.body) == {"error": "Internal server error"}
