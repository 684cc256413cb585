"""Fail-closed validators for documents entering the calculation engine."""

from freecalc.validators.generated_calculator import (
    CalculatorCategory,
    derive_slug,
    formula_spec,
    infer_category,
    validate_generated_calculator,
)
from freecalc.validators.schema_validator import (
    SchemaValidator,
    ValidationError,
    ValidationResult,
)

__all__ = [
    "CalculatorCategory",
    "SchemaValidator",
    "ValidationError",
    "ValidationResult",
    "derive_slug",
    "formula_spec",
    "infer_category",
    "validate_generated_calculator",
]
