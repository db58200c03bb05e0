"""Tests for app wiring: health, hardening, limits and the exception guard."""
import logging
import re

from fastapi.testclient import TestClient

from hub_mock.config import Settings
from hub_mock.headers import SECURITY_HEADERS
from hub_mock.server import create_app


class TestHealthEndpoint:
    """Test the health check endpoint."""

    def setup_method(self):
        self.client = TestClient(create_app(Settings()))

    def test_health_check(self):
        """Health endpoint should return ok status with a timestamp."""
        response = self.client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{3}", data["timestamp"])


class TestHardening:
    """CORS, security headers and routing errors."""

    def setup_method(self):
        self.client = TestClient(create_app(Settings()))

    def test_security_headers_present(self):
        response = self.client.get("/health")
        for name, value in SECURITY_HEADERS.items():
            assert response.headers[name] == value
        assert "x-powered-by" not in response.headers

    def test_cors_preflight(self):
        response = self.client.options(
            "/api/v1/customers/import",
            headers={
                "Origin": "http://ems.example",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "content-type",
            },
        )
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"
        for name, value in SECURITY_HEADERS.items():
            assert response.headers[name] == value

    def test_cors_simple_request(self):
        response = self.client.get("/api/v1/coas/search", headers={"Origin": "http://ems.example"})
        assert response.headers["access-control-allow-origin"] == "*"

    def test_unknown_path_is_json_404(self):
        response = self.client.get("/api/v1/unknown")
        assert response.status_code == 404
        data = response.json()
        assert data["status"] == "Failure"
        assert data["errorMessage"] == "GET /api/v1/unknown"
        assert response.headers["X-Frame-Options"] == "SAMEORIGIN"

    def test_wrong_method_is_json_405(self):
        response = self.client.get("/api/v1/trades/import")
        assert response.status_code == 405
        assert response.json()["status"] == "Failure"


class TestBodyLimit:
    """Request bodies above the configured limit are refused."""

    def setup_method(self):
        self.client = TestClient(create_app(Settings(body_limit=64)))

    def test_small_body_accepted(self):
        response = self.client.post("/api/v1/trades/import", json={"trades": [1, 2]})
        assert response.status_code == 200
        assert response.json()["receivedCount"] == 2

    def test_large_body_rejected(self):
        response = self.client.post("/api/v1/trades/import", json={"trades": list(range(100))})
        assert response.status_code == 413
        assert response.json()["status"] == "Failure"
        assert response.headers["X-Content-Type-Options"] == "nosniff"


class TestExceptionGuard:
    """Unexpected exceptions become a Failure envelope with HTTP 200."""

    def setup_method(self):
        app = create_app(Settings())

        async def boom(request):
            raise RuntimeError("kaboom")

        app.add_route("/boom", boom, methods=["GET"])
        self.client = TestClient(app)

    def test_exception_is_converted(self):
        response = self.client.get("/boom")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "Failure"
        assert data["message"] == "Unexpected error in mock server"
        assert data["errorMessage"] == "RuntimeError: kaboom"


class TestAccessLog:
    """Combined-format access log outside production."""

    def test_logs_requests_in_development(self, caplog):
        client = TestClient(create_app(Settings(env="development")))
        with caplog.at_level(logging.INFO, logger="hub_mock.access"):
            client.get("/api/v1/coas/search?mode=empty", headers={"User-Agent": "pytest-agent"})
        lines = [r.getMessage() for r in caplog.records if r.name == "hub_mock.access"]
        assert len(lines) == 1
        assert '"GET /api/v1/coas/search?mode=empty HTTP/1.1" 200' in lines[0]
        assert lines[0].endswith('"-" "pytest-agent"')

    def test_silent_in_production(self, caplog):
        client = TestClient(create_app(Settings(env="production")))
        with caplog.at_level(logging.INFO, logger="hub_mock.access"):
            client.get("/health")
        assert not [r for r in caplog.records if r.name == "hub_mock.access"]
