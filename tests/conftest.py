"""Pytest configuration and fixtures for freecalc tests.

This module provides common fixtures and configuration for all tests.
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date

import pytest
from fastapi.testclient import TestClient

from freecalc.api.main import create_app
from freecalc.calc.catalogue import register_builtin_calculators
from freecalc.calc.engine import CalcEngine
from freecalc.calc.handlers import date_time
from freecalc.calc.registry import CalculatorRegistry
from freecalc.config import ENV_FORMULA_MAX_DEPTH, ENV_FORMULA_MAX_LENGTH, SandboxConfig
from freecalc.sandbox import FormulaSandbox

FIXED_TODAY = date(2026, 10, 19)


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test from default sandbox limits and a fresh shared registry."""
    monkeypatch.delenv(ENV_FORMULA_MAX_LENGTH, raising=False)
    monkeypatch.delenv(ENV_FORMULA_MAX_DEPTH, raising=False)
    CalculatorRegistry.reset_instance()
    yield
    CalculatorRegistry.reset_instance()


@pytest.fixture
def registry() -> CalculatorRegistry:
    """Create a fresh registry seeded with the built-in catalogue."""
    CalculatorRegistry.reset_instance()
    reg = CalculatorRegistry()
    register_builtin_calculators(reg)
    return reg


@pytest.fixture
def engine(registry: CalculatorRegistry) -> CalcEngine:
    """Create a calc engine with the test registry."""
    return CalcEngine(registry=registry)


@pytest.fixture
def sandbox() -> FormulaSandbox:
    """Create a sandbox with default limits."""
    return FormulaSandbox(SandboxConfig())


@pytest.fixture
def client(registry: CalculatorRegistry) -> TestClient:
    """Create a test client for the freecalc API."""
    app = create_app(registry=registry, sandbox_config=SandboxConfig())
    return TestClient(app)


@pytest.fixture
def fixed_today(monkeypatch: pytest.MonkeyPatch) -> date:
    """Pin the date-time family's notion of today to Monday 2026-10-19."""
    monkeypatch.setattr(date_time, "today", lambda: FIXED_TODAY)
    return FIXED_TODAY
