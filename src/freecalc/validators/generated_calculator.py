"""Validation of calculator documents produced for a user's description.

A document must match ``generated_calculator.schema.json``; its formula must
then compile in the sandbox and reference only declared fields or constants.
Documents that pass can be stored under :func:`derive_slug` and
:func:`infer_category`.
"""

from __future__ import annotations

import re
import secrets
import string
from collections import Counter
from enum import StrEnum
from typing import Any, Final

from freecalc.sandbox import FormulaRejectedError, FormulaSandbox, FormulaSpec
from freecalc.sandbox.evaluator import CONSTANTS
from freecalc.validators.schema_validator import (
    SchemaValidator,
    ValidationError,
    ValidationResult,
)

SCHEMA_NAME: Final[str] = "generated_calculator"
SLUG_SUFFIX_LENGTH: Final[int] = 6

_SLUG_SEPARATORS = re.compile(r"[^a-z0-9]+")
_SLUG_ALPHABET = string.digits + string.ascii_lowercase


class CalculatorCategory(StrEnum):
    """Category a generated calculator is filed under."""

    HEALTH = "Health"
    FINANCE = "Finance"
    MATH = "Math"
    OTHER = "Other"


# Checked in order; the first match wins.
_CATEGORY_KEYWORDS: Final[tuple[tuple[CalculatorCategory, re.Pattern[str]], ...]] = (
    (CalculatorCategory.HEALTH, re.compile(r"bmi|calories|health|fitness|weight|heart")),
    (
        CalculatorCategory.FINANCE,
        re.compile(r"loan|mortgage|interest|payment|investment|finance|tax|salary"),
    ),
    (CalculatorCategory.MATH, re.compile(r"calculate|math|formula|equation|algebra|geometry")),
)


def derive_slug(name: str, suffix: str | None = None) -> str:
    """Build a unique slug: "Paint Coverage!" -> "paint-coverage-k3x9qa".

    Args:
        name: Calculator name.
        suffix: Uniqueness suffix. Defaults to random base-36 characters.
    """
    base = _SLUG_SEPARATORS.sub("-", name.lower()).strip("-")
    if suffix is None:
        suffix = "".join(secrets.choice(_SLUG_ALPHABET) for _ in range(SLUG_SUFFIX_LENGTH))
    return f"{base}-{suffix}" if base else suffix


def infer_category(name: str, description: str) -> CalculatorCategory:
    """Guess a category from keywords in the description and name."""
    text = f"{description} {name}".lower()
    for category, keywords in _CATEGORY_KEYWORDS:
        if keywords.search(text):
            return category
    return CalculatorCategory.OTHER


def formula_spec(document: dict[str, Any]) -> FormulaSpec:
    """Extract the sandbox view of a validated document."""
    return FormulaSpec(
        formula_text=document["formula"],
        field_ids=frozenset(f["id"] for f in document["fields"]),
        result_label=document.get("resultLabel") or None,
        result_unit=document.get("resultUnit") or None,
    )


def _check_formula(document: dict[str, Any], sandbox: FormulaSandbox) -> ValidationResult:
    errors: list[ValidationError] = []
    warnings: list[ValidationError] = []

    duplicates = sorted(
        field_id for field_id, n in Counter(f["id"] for f in document["fields"]).items() if n > 1
    )
    for field_id in duplicates:
        errors.append(
            ValidationError(
                code="DUPLICATE_FIELD_ID",
                message=f"Field id '{field_id}' is declared more than once",
                path="$.fields",
            )
        )

    spec = formula_spec(document)
    try:
        compiled = sandbox.compile(spec.formula_text)
    except FormulaRejectedError as e:
        errors.append(ValidationError(code=str(e.reason_code), message=e.message, path="$.formula"))
        return ValidationResult.fail(errors)

    for name in sorted(compiled.names - spec.field_ids - CONSTANTS.keys()):
        errors.append(
            ValidationError(
                code="UNKNOWN_IDENTIFIER",
                message=f"Formula references undeclared field '{name}'",
                path="$.formula",
            )
        )

    text_fields = {f["id"] for f in document["fields"] if f["type"] == "text"}
    for index, declared in enumerate(document["fields"]):
        field_id = declared["id"]
        if field_id in text_fields and field_id in compiled.names:
            warnings.append(
                ValidationError(
                    code="TEXT_FIELD_IN_FORMULA",
                    message=f"Text field '{field_id}' must hold a number when executed",
                    path=f"$.fields[{index}]",
                )
            )
        elif field_id not in compiled.names:
            warnings.append(
                ValidationError(
                    code="UNUSED_FIELD",
                    message=f"Field '{field_id}' is not used by the formula",
                    path=f"$.fields[{index}]",
                )
            )

    if errors:
        return ValidationResult(passed=False, errors=errors, warnings=warnings)
    return ValidationResult.success(warnings)


def validate_generated_calculator(
    document: Any,
    sandbox: FormulaSandbox | None = None,
    schema_validator: SchemaValidator | None = None,
) -> ValidationResult:
    """Validate a generated calculator document.

    Args:
        document: Parsed JSON document.
        sandbox: Sandbox used to compile the formula. Defaults to one
            configured from the environment.
        schema_validator: Validator holding the bundled schemas.

    Returns:
        ValidationResult. Fails closed: a document that cannot be checked
        does not pass.
    """
    schema_validator = schema_validator if schema_validator is not None else SchemaValidator()
    result = schema_validator.validate(SCHEMA_NAME, document)
    if not result.passed:
        return result

    sandbox = sandbox if sandbox is not None else FormulaSandbox()
    return _check_formula(document, sandbox)
