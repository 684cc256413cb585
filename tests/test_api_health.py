"""Tests for the freecalc health endpoint and request ID middleware."""

from __future__ import annotations

from datetime import datetime

from fastapi.testclient import TestClient

from freecalc import __version__


class TestHealthEndpoint:
    """Tests for GET /health."""

    def test_health_returns_200(self, client: TestClient) -> None:
        """Health responds ok with the package version."""
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["version"] == __version__ == "1.0.0"

    def test_health_time_is_iso8601(self, client: TestClient) -> None:
        """time parses as an aware ISO-8601 timestamp."""
        data = client.get("/health").json()
        parsed = datetime.fromisoformat(data["time"])
        assert parsed.tzinfo is not None


class TestRequestIdMiddleware:
    """Tests for X-Request-Id handling."""

    def test_generated_when_absent(self, client: TestClient) -> None:
        """A uuid4 is generated when the client sends none."""
        response = client.get("/health")

        request_id = response.headers["X-Request-Id"]
        assert len(request_id) == 36
        assert request_id.count("-") == 4

    def test_incoming_id_is_echoed(self, client: TestClient) -> None:
        """A client-supplied id is reused, stripped."""
        response = client.get("/health", headers={"X-Request-Id": "  trace-123  "})
        assert response.headers["X-Request-Id"] == "trace-123"

    def test_blank_incoming_id_is_replaced(self, client: TestClient) -> None:
        """A blank header gets a fresh id."""
        response = client.get("/health", headers={"X-Request-Id": "   "})
        assert len(response.headers["X-Request-Id"]) == 36

    def test_ids_differ_per_request(self, client: TestClient) -> None:
        """Each request gets its own id."""
        first = client.get("/health").headers["X-Request-Id"]
        second = client.get("/health").headers["X-Request-Id"]
        assert first != second
