"""Unit tests for the HTTP application."""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from docs_server.api.main import ENDPOINTS, create_app
from docs_server.models.config.server import ServerConfig


@pytest.fixture
def client():
    app = create_app(ServerConfig(port=3123))
    with TestClient(app) as test_client:
        yield test_client


class TestHealthEndpoints:
    """Test health check responses."""

    @pytest.mark.parametrize("path", ["/", "/health"])
    def test_health(self, client, path):
        response = client.get(path)

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "Claude Code MCP Server Running"
        assert data["endpoints"] == ENDPOINTS
        datetime.fromisoformat(data["timestamp"])


class TestErrorResponses:
    """Test JSON error bodies."""

    def test_unknown_path_returns_json_404(self, client):
        response = client.get("/nope")

        assert response.status_code == 404
        assert response.json() == {"error": "Not found. Use /mcp for MCP protocol."}

    def test_unhandled_exception_returns_500(self):
        """Test the last-resort handler returns a generic error body."""
        app = create_app(ServerConfig())

        @app.get("/boom")
        async def boom():
            raise RuntimeError("kaboom")

        with TestClient(app, raise_server_exceptions=False) as test_client:
            response = test_client.get("/boom")

        assert response.status_code == 500
        assert response.json() == {
            "detail": "Internal server error",
            "type": "internal_error",
        }

    def test_method_not_allowed_keeps_default_handler(self, client):
        response = client.post("/health")
        assert response.status_code == 405


class TestCORS:
    """Test CORS headers."""

    def test_preflight(self, client):
        response = client.options(
            "/mcp",
            headers={
                "Origin": "https://example.com",
                "Access-Control-Request-Method": "GET",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"
        assert "GET" in response.headers["access-control-allow-methods"]

    def test_simple_request_has_origin_header(self, client):
        response = client.get("/health", headers={"Origin": "https://example.com"})
        assert response.headers["access-control-allow-origin"] == "*"


class TestRoutes:
    """Test the MCP transport routes are registered."""

    def test_event_stream_routes(self):
        app = create_app(ServerConfig())
        paths = {getattr(route, "path", None) for route in app.routes}

        assert "/sse" in paths
        assert "/mcp" in paths
