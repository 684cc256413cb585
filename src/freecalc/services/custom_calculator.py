"""Custom-calculator execution: sandboxed formula plus label/unit formatting.

Every sandbox rejection surfaces as a single error category,
:class:`CustomCalculatorError`, carrying the sandbox reason code.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from freecalc.calc.formatting import format_number
from freecalc.sandbox import FormulaRejectedError, FormulaSandbox, RejectionReason

MISSING_FORMULA_OR_INPUTS = "Formula and inputs are required"


class CustomCalculatorRequest(BaseModel):
    """Execution request for a generated calculator.

    Field values are kept as supplied (string or JSON number); the sandbox
    decides whether each is a finite number.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    formula: str | None = None
    inputs: dict[str, Any] | None = None
    result_label: str | None = None
    result_unit: str | None = None


class CustomCalculatorResult(BaseModel):
    """Formatted result plus the underlying number."""

    model_config = ConfigDict(frozen=True)

    result: str
    value: float
    label: str | None = None
    unit: str | None = None


class CustomCalculatorError(Exception):
    """Raised when a custom calculator cannot be executed.

    Attributes:
        reason: Human-readable cause (the sandbox rejection message).
        reason_code: Machine-readable code; ``None`` for a missing formula
            or inputs.
        field: Offending input field, when known.
    """

    def __init__(
        self,
        reason: str,
        reason_code: RejectionReason | None = None,
        field: str | None = None,
    ) -> None:
        self.reason = reason
        self.reason_code = reason_code
        self.field = field
        super().__init__(f"execution failed: {reason}")


def format_result(value: float, label: str | None, unit: str | None) -> str:
    """Render ``"<label>: <number>[ <unit>]"``, or the bare number without a label."""
    rendered = format_number(value)
    if not label:
        return rendered
    if unit:
        return f"{label}: {rendered} {unit}"
    return f"{label}: {rendered}"


def execute_custom_calculator(
    request: CustomCalculatorRequest,
    sandbox: FormulaSandbox | None = None,
) -> CustomCalculatorResult:
    """Evaluate a generated calculator's formula against user inputs.

    Args:
        request: Formula, inputs and optional result label/unit.
        sandbox: Sandbox to evaluate with. Defaults to one configured from
            the environment.

    Returns:
        CustomCalculatorResult with the formatted string and finite value.

    Raises:
        CustomCalculatorError: If the formula or inputs are missing, or the
            sandbox rejects the formula or any input.
    """
    if not request.formula or not isinstance(request.inputs, Mapping):
        raise CustomCalculatorError(MISSING_FORMULA_OR_INPUTS)

    sandbox = sandbox if sandbox is not None else FormulaSandbox()
    try:
        value = sandbox.evaluate(request.formula, request.inputs)
    except FormulaRejectedError as e:
        raise CustomCalculatorError(e.message, reason_code=e.reason_code, field=e.field) from e

    return CustomCalculatorResult(
        result=format_result(value, request.result_label, request.result_unit),
        value=value,
        label=request.result_label,
        unit=request.result_unit,
    )
