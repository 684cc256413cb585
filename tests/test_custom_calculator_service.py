"""Tests for custom-calculator execution.

Tests cover:
1. Result formatting with and without label and unit
2. Missing formula or inputs
3. Sandbox rejections surfacing as CustomCalculatorError with reason code and field
4. camelCase request aliases
"""

from __future__ import annotations

import pytest

from freecalc.sandbox import FormulaSandbox, RejectionReason
from freecalc.services.custom_calculator import (
    MISSING_FORMULA_OR_INPUTS,
    CustomCalculatorError,
    CustomCalculatorRequest,
    execute_custom_calculator,
    format_result,
)


class TestFormatResult:
    """Tests for format_result()."""

    def test_label_and_unit(self) -> None:
        """Label, number and unit."""
        assert format_result(15.0, "Average", "pts") == "Average: 15 pts"

    def test_label_only(self) -> None:
        """No trailing unit."""
        assert format_result(2.5, "Ratio", None) == "Ratio: 2.5"

    def test_bare_number(self) -> None:
        """Without a label only the number is shown, even with a unit."""
        assert format_result(3.0, None, "kg") == "3"
        assert format_result(3.0, "", None) == "3"


class TestExecute:
    """Tests for execute_custom_calculator()."""

    def test_success(self, sandbox: FormulaSandbox) -> None:
        """The average of 10 and 20 is 15 points."""
        request = CustomCalculatorRequest(
            formula="(a + b) / 2",
            inputs={"a": "10", "b": "20"},
            result_label="Average",
            result_unit="pts",
        )
        result = execute_custom_calculator(request, sandbox)

        assert result.result == "Average: 15 pts"
        assert result.value == 15
        assert result.label == "Average"
        assert result.unit == "pts"

    def test_camel_case_aliases(self, sandbox: FormulaSandbox) -> None:
        """Requests validate from their wire form."""
        request = CustomCalculatorRequest.model_validate(
            {"formula": "a * 2", "inputs": {"a": 4}, "resultLabel": "Double"}
        )
        assert execute_custom_calculator(request, sandbox).result == "Double: 8"

    def test_default_sandbox(self) -> None:
        """A sandbox is created when none is given."""
        request = CustomCalculatorRequest(formula="1 + 1", inputs={})
        assert execute_custom_calculator(request).value == 2

    @pytest.mark.parametrize(
        "request_data",
        [
            {"inputs": {"a": "1"}},
            {"formula": "", "inputs": {"a": "1"}},
            {"formula": "a + 1"},
        ],
    )
    def test_missing_formula_or_inputs(
        self, sandbox: FormulaSandbox, request_data: dict[str, object]
    ) -> None:
        """Both a formula and an inputs mapping are required."""
        request = CustomCalculatorRequest.model_validate(request_data)
        with pytest.raises(CustomCalculatorError) as exc_info:
            execute_custom_calculator(request, sandbox)

        assert exc_info.value.reason == MISSING_FORMULA_OR_INPUTS
        assert exc_info.value.reason_code is None
        assert str(exc_info.value) == f"execution failed: {MISSING_FORMULA_OR_INPUTS}"

    def test_invalid_input(self, sandbox: FormulaSandbox) -> None:
        """The offending field is reported."""
        request = CustomCalculatorRequest(formula="a + b", inputs={"a": "abc", "b": "1"})
        with pytest.raises(CustomCalculatorError) as exc_info:
            execute_custom_calculator(request, sandbox)

        error = exc_info.value
        assert error.reason_code == RejectionReason.INVALID_INPUT
        assert error.field == "a"
        assert str(error) == "execution failed: Invalid numeric input for a: abc"

    @pytest.mark.parametrize(
        ("formula", "reason_code"),
        [
            ("x.constructor", RejectionReason.PROHIBITED_PATTERN),
            ("a[0]", RejectionReason.INVALID_CHARACTERS),
            ("1 / 0", RejectionReason.NON_FINITE_RESULT),
            ("a +", RejectionReason.FORMULA_SYNTAX),
        ],
    )
    def test_rejections(
        self, sandbox: FormulaSandbox, formula: str, reason_code: RejectionReason
    ) -> None:
        """Every sandbox rejection becomes one error type."""
        request = CustomCalculatorRequest(formula=formula, inputs={"a": "1"})
        with pytest.raises(CustomCalculatorError) as exc_info:
            execute_custom_calculator(request, sandbox)

        assert exc_info.value.reason_code == reason_code
        assert exc_info.value.field is None
