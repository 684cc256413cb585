"""JSON Schema validator with fail-closed behavior.

Schemas ship inside the package (``freecalc/schemas``). Any problem loading a
schema or the document being checked results in rejection.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import jsonschema
from jsonschema import Draft202012Validator

SCHEMA_DIR = Path(__file__).resolve().parent.parent / "schemas"


@dataclass(frozen=True)
class ValidationError:
    """A single validation error."""

    code: str
    message: str
    path: str


@dataclass
class ValidationResult:
    """Result of validation - fail-closed by default."""

    passed: bool
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationError] = field(default_factory=list)

    @classmethod
    def fail(cls, errors: list[ValidationError]) -> ValidationResult:
        """Create a failed result."""
        return cls(passed=False, errors=errors)

    @classmethod
    def success(cls, warnings: list[ValidationError] | None = None) -> ValidationResult:
        """Create a successful result."""
        return cls(passed=True, warnings=warnings or [])

    @classmethod
    def fail_closed(cls, reason: str) -> ValidationResult:
        """Fail closed with a single error - used when validation cannot proceed."""
        return cls(
            passed=False,
            errors=[ValidationError(code="FAIL_CLOSED", message=reason, path="$")],
        )

    def to_dict(self) -> dict[str, Any]:
        """Deterministic dict for JSON output."""
        return {
            "errors": [{"code": e.code, "message": e.message, "path": e.path} for e in self.errors],
            "pass": self.passed,
            "warnings": [
                {"code": w.code, "message": w.message, "path": w.path} for w in self.warnings
            ],
        }


def _json_path(parts: Any) -> str:
    return "$" + "".join(f".{p}" if isinstance(p, str) else f"[{p}]" for p in parts)


class SchemaValidator:
    """Validates JSON data against JSON schemas with fail-closed behavior.

    - Unknown properties are rejected (additionalProperties: false in schemas)
    - Missing required fields cause failure
    - Type mismatches cause failure
    - Any schema loading error causes validation to fail closed
    """

    def __init__(self, schema_dir: Path | str | None = None) -> None:
        """Initialize validator with schema directory.

        Args:
            schema_dir: Directory containing ``*.schema.json`` files.
                Defaults to the schemas bundled with the package.
        """
        self._schema_dir = SCHEMA_DIR if schema_dir is None else Path(schema_dir)
        self._validators: dict[str, Draft202012Validator] = {}

    def _load_schema(self, schema_name: str) -> dict[str, Any] | None:
        """Load a schema by name. Returns None on any error (fail closed)."""
        schema_file = self._schema_dir / f"{schema_name}.schema.json"
        try:
            with schema_file.open("r", encoding="utf-8") as f:
                schema = json.load(f)
        except (json.JSONDecodeError, OSError):
            return None
        return schema if isinstance(schema, dict) else None

    def _get_validator(self, schema_name: str) -> Draft202012Validator | None:
        """Get a validator for a schema. Returns None on error (fail closed)."""
        if schema_name in self._validators:
            return self._validators[schema_name]

        schema = self._load_schema(schema_name)
        if schema is None:
            return None

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError:
            return None

        validator = Draft202012Validator(schema)
        self._validators[schema_name] = validator
        return validator

    def validate(self, schema_name: str, data: Any) -> ValidationResult:
        """Validate data against a named schema.

        Args:
            schema_name: Name of schema (without .schema.json extension)
            data: JSON data to validate

        Returns:
            ValidationResult with pass/fail and any errors.
            FAILS CLOSED on any error loading schema or validating.
        """
        if data is None:
            return ValidationResult.fail_closed("Data is None - cannot validate")

        validator = self._get_validator(schema_name)
        if validator is None:
            return ValidationResult.fail_closed(
                f"Cannot load or parse schema '{schema_name}' - validation fails closed"
            )

        errors: list[ValidationError] = []
        try:
            for error in validator.iter_errors(data):
                errors.append(
                    ValidationError(
                        code=str(error.validator),
                        message=error.message,
                        path=_json_path(error.absolute_path),
                    )
                )
        except Exception as e:
            # Any unexpected error during validation - fail closed
            return ValidationResult.fail_closed(f"Unexpected validation error: {e}")

        if errors:
            errors.sort(key=lambda e: (e.path, e.code, e.message))
            return ValidationResult.fail(errors)

        return ValidationResult.success()

    def list_available_schemas(self) -> list[str]:
        """List all available schema names in the schema directory."""
        if not self._schema_dir.exists():
            return []

        return sorted(
            p.name.removesuffix(".schema.json") for p in self._schema_dir.glob("*.schema.json")
        )
