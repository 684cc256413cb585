"""Tests for the freecalc API error envelope.

Tests cover:
A) Routing 404/405 use the envelope with request_id correlation
B) Invalid JSON bodies are sanitized validation errors
C) Unhandled exceptions become a generic 500 without internals
D) Status-to-code mapping
E) CustomCalculatorError mapping to FORMULA_REJECTED / INVALID_REQUEST
"""

from __future__ import annotations

import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from freecalc.api.error_model import HTTP_STATUS_TO_CODE, get_error_code_for_status
from freecalc.api.errors import FreecalcHttpError
from freecalc.api.main import create_app
from freecalc.calc.registry import CalculatorRegistry
from freecalc.config import SandboxConfig
from freecalc.sandbox import RejectionReason
from freecalc.services.custom_calculator import CustomCalculatorError


def assert_envelope(data: dict[str, object]) -> None:
    assert set(data) == {"code", "message", "details", "request_id"}


class TestRoutingErrors:
    """Tests for errors raised by routing."""

    def test_unknown_path(self, client: TestClient) -> None:
        """Unknown paths get NOT_FOUND."""
        response = client.get("/v1/nothing-here")

        assert response.status_code == 404
        data = response.json()
        assert_envelope(data)
        assert data["code"] == "NOT_FOUND"

    def test_method_not_allowed(self, client: TestClient) -> None:
        """Wrong methods get METHOD_NOT_ALLOWED."""
        response = client.delete("/health")

        assert response.status_code == 405
        assert response.json()["code"] == "METHOD_NOT_ALLOWED"

    def test_request_id_is_echoed_in_body(self, client: TestClient) -> None:
        """The envelope carries the same id as the header."""
        response = client.get("/v1/nothing-here", headers={"X-Request-Id": "req-42"})

        assert response.headers["X-Request-Id"] == "req-42"
        assert response.json()["request_id"] == "req-42"


class TestValidationErrors:
    """Tests for request validation failures."""

    def test_invalid_json(self, client: TestClient) -> None:
        """Malformed JSON is a validation failure, not a 500."""
        response = client.post(
            "/v1/custom-calculators/execute",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 422
        data = response.json()
        assert_envelope(data)
        assert data["code"] == "REQUEST_VALIDATION_FAILED"

    def test_raw_values_not_echoed(self, client: TestClient) -> None:
        """Validation details name fields but never the submitted value."""
        secret = "SECRET-VALUE-123"
        response = client.post(
            "/v1/calculators/tip-calculator/calculate",
            json={"inputs": {}, "note": secret},
        )

        assert response.status_code == 422
        assert secret not in response.text
        for error in response.json()["details"]["errors"]:
            assert set(error) == {"field", "message"}


class TestUnhandledErrors:
    """Tests for the catch-all handler."""

    def _app_with_failing_route(self) -> FastAPI:
        CalculatorRegistry.reset_instance()
        app = create_app(registry=CalculatorRegistry(), sandbox_config=SandboxConfig())

        @app.get("/boom")
        def boom() -> None:
            raise RuntimeError("database password is hunter2")

        @app.get("/teapot")
        def teapot() -> None:
            raise FreecalcHttpError(418, "TEAPOT", "I am a teapot", {"spout": "short"})

        @app.get("/rejected")
        def rejected() -> None:
            raise CustomCalculatorError(
                "Invalid numeric input for rate: x", RejectionReason.INVALID_INPUT, "rate"
            )

        @app.get("/incomplete")
        def incomplete() -> None:
            raise CustomCalculatorError("Formula and inputs are required")

        return app

    def test_generic_500(self) -> None:
        """Unhandled exceptions return a generic message."""
        client = TestClient(self._app_with_failing_route(), raise_server_exceptions=False)
        response = client.get("/boom")

        assert response.status_code == 500
        data = response.json()
        assert data["code"] == "INTERNAL_ERROR"
        assert data["message"] == "An internal error occurred"
        assert "hunter2" not in response.text
        assert "Traceback" not in response.text

    def test_application_error(self) -> None:
        """FreecalcHttpError keeps its status, code and details."""
        client = TestClient(self._app_with_failing_route())
        response = client.get("/teapot")

        assert response.status_code == 418
        data = response.json()
        assert data["code"] == "TEAPOT"
        assert data["details"] == {"spout": "short"}
        assert data["request_id"] == response.headers["X-Request-Id"]


class TestStatusCodes:
    """Tests for HTTP status to error code mapping."""

    def test_known_statuses(self) -> None:
        """Mapped statuses use their codes."""
        assert get_error_code_for_status(404) == "NOT_FOUND"
        assert get_error_code_for_status(405) == "METHOD_NOT_ALLOWED"
        assert HTTP_STATUS_TO_CODE[500] == "INTERNAL_ERROR"

    def test_unknown_status(self) -> None:
        """Unmapped statuses get a generic code."""
        assert get_error_code_for_status(418) == "ERROR"


class TestCustomCalculatorErrors:
    """CustomCalculatorError is rendered by the handler layer, wherever raised."""

    def _client(self) -> TestClient:
        return TestClient(TestUnhandledErrors()._app_with_failing_route())

    def test_rejection_becomes_formula_rejected(self, caplog: pytest.LogCaptureFixture) -> None:
        """A reason code selects FORMULA_REJECTED and keeps the field."""
        with caplog.at_level(logging.INFO, logger="freecalc.api.errors"):
            response = self._client().get("/rejected")

        assert response.status_code == 400
        data = response.json()
        assert_envelope(data)
        assert data["code"] == "FORMULA_REJECTED"
        assert data["message"] == "execution failed: Invalid numeric input for rate: x"
        assert data["details"] == {"reason_code": "INVALID_INPUT", "field": "rate"}
        assert any("INVALID_INPUT" in r.getMessage() for r in caplog.records)

    def test_missing_reason_is_invalid_request(self) -> None:
        """Without a reason code the request itself was incomplete."""
        response = self._client().get("/incomplete")

        assert response.status_code == 400
        data = response.json()
        assert data["code"] == "INVALID_REQUEST"
        assert data["message"] == "Formula and inputs are required"
        assert data["details"] is None

    def test_envelope_in_openapi(self, client: TestClient) -> None:
        """The execute route documents its 400 envelope."""
        schema = client.get("/openapi.json").json()
        responses = schema["paths"]["/v1/custom-calculators/execute"]["post"]["responses"]
        assert responses["400"]["content"]["application/json"]["schema"] == {
            "$ref": "#/components/schemas/ErrorResponse"
        }
