"""API models for generated (formula-driven) calculators."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from freecalc.validators import ValidationResult


class ValidationIssue(BaseModel):
    """A single validation error or warning."""

    code: str
    message: str
    path: str


class ValidateCalculatorResponse(BaseModel):
    """Outcome of validating a generated calculator document.

    ``slug`` and ``category`` are only filled in for documents that pass.
    """

    model_config = ConfigDict(populate_by_name=True)

    passed: bool = Field(..., alias="pass")
    errors: list[ValidationIssue] = Field(default_factory=list)
    warnings: list[ValidationIssue] = Field(default_factory=list)
    slug: str | None = None
    category: str | None = None

    @classmethod
    def from_result(
        cls,
        result: ValidationResult,
        slug: str | None = None,
        category: str | None = None,
    ) -> ValidateCalculatorResponse:
        return cls(
            passed=result.passed,
            errors=[
                ValidationIssue(code=e.code, message=e.message, path=e.path) for e in result.errors
            ],
            warnings=[
                ValidationIssue(code=w.code, message=w.message, path=w.path) for w in result.warnings
            ],
            slug=slug,
            category=category,
        )

