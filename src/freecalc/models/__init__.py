"""Pydantic models exposed by the HTTP API."""

from freecalc.models.calculator import (
    CalculateRequest,
    CalculateResponse,
    CalculatorDefinitionModel,
    CalculatorListResponse,
)
from freecalc.models.custom_calculator import ValidateCalculatorResponse, ValidationIssue

__all__ = [
    "CalculateRequest",
    "CalculateResponse",
    "CalculatorDefinitionModel",
    "CalculatorListResponse",
    "ValidateCalculatorResponse",
    "ValidationIssue",
]
