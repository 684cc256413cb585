"""Tests for the arithmetic and percentage handler families.

Tests cover:
1. Expression calculators: whitelist, sandbox grammar, non-finite results
2. Fractions, ratios, rounding and modulo
3. Everyday one-liners (pet ages, odds)
4. Percentage of a value
"""

from __future__ import annotations

import pytest

from freecalc.calc.handlers.arithmetic import handle_arithmetic
from freecalc.calc.handlers.base import CALCULATION_COMPLETE
from freecalc.calc.handlers.percentage import handle_percentage


class TestExpressionCalculator:
    """Tests for basic-calculator and scientific-calculator."""

    def test_precedence(self) -> None:
        """Multiplication binds tighter than addition."""
        result = handle_arithmetic("basic-calculator", {"expression": "2+3*4"})
        assert result == "2+3*4 = 14"

    def test_parentheses_and_decimals(self) -> None:
        """Parenthesized decimals evaluate to the shortest rendering."""
        result = handle_arithmetic("scientific-calculator", {"expression": "(1.5 + 2.5) / 8"})
        assert result == "(1.5 + 2.5) / 8 = 0.5"

    def test_empty_expression_prompts(self) -> None:
        """Missing expression asks for one."""
        assert handle_arithmetic("basic-calculator", {}) == "Please enter an expression to calculate"

    def test_letters_are_rejected(self) -> None:
        """Only digits, operators, dots, parentheses and spaces are allowed."""
        result = handle_arithmetic("basic-calculator", {"expression": "2+abc"})
        assert result == (
            "Invalid characters in expression. Use only numbers and operators (+, -, *, /, ())"
        )

    def test_unbalanced_parentheses(self) -> None:
        """A syntax error is reported without raising."""
        result = handle_arithmetic("basic-calculator", {"expression": "(1+2"})
        assert result == "Invalid expression. Please check your input."

    def test_division_by_zero(self) -> None:
        """A non-finite result is reported as invalid."""
        assert handle_arithmetic("basic-calculator", {"expression": "1/0"}) == "Invalid expression"


class TestFractionsAndRatios:
    """Tests for ratio, fraction, rounding and modulo calculators."""

    def test_ratio_simplifies(self) -> None:
        """10:4 simplifies to 5:2."""
        assert handle_arithmetic("ratio-calculator", {"a": "10", "b": "4"}) == (
            "Simplified Ratio: 5:2"
        )

    def test_fraction_addition(self) -> None:
        """1/2 + 1/3 = 5/6."""
        inputs = {
            "numerator1": "1",
            "denominator1": "2",
            "numerator2": "1",
            "denominator2": "3",
            "operation": "add",
        }
        assert handle_arithmetic("fraction-calculator", inputs) == "Result: 5/6 = 0.8333"

    def test_fraction_division(self) -> None:
        """(1/2) / (1/4) = 2/1."""
        inputs = {
            "numerator1": "1",
            "denominator1": "2",
            "numerator2": "1",
            "denominator2": "4",
            "operation": "divide",
        }
        assert handle_arithmetic("fraction-calculator", inputs) == "Result: 2/1 = 2.0000"

    def test_rounding(self) -> None:
        """Rounds to the requested decimals."""
        result = handle_arithmetic("rounding-calculator", {"number": "3.14159", "decimals": "2"})
        assert result == "Rounded: 3.14"

    def test_modulo(self) -> None:
        """10 mod 3 is 1."""
        assert handle_arithmetic("modulo-calculator", {"a": "10", "b": "3"}) == "10 mod 3 = 1"

    def test_modulo_by_zero_is_nan(self) -> None:
        """Remainder by zero renders NaN."""
        assert handle_arithmetic("modulo-calculator", {"a": "10", "b": "0"}) == "10 mod 0 = NaN"

    def test_absolute_value(self) -> None:
        """|-4.5| = 4.5."""
        assert handle_arithmetic("absolute-value-calculator", {"number": "-4.5"}) == "|-4.5| = 4.5"


class TestEverydayCalculators:
    """Tests for the one-line everyday calculators."""

    def test_dog_age(self) -> None:
        """A 5-year-old dog is 33 in human years."""
        assert handle_arithmetic("dog-age-calculator", {"dogAge": "5"}) == (
            "Dog Age: 5 years = Human Age: 33 years"
        )

    def test_cat_age(self) -> None:
        """A 1-year-old cat is 15 in human years."""
        assert handle_arithmetic("cat-age-calculator", {"catAge": "1"}) == (
            "Cat Age: 1 years = Human Age: 15 years"
        )

    def test_odds(self) -> None:
        """1:3 odds are a 25% probability."""
        assert handle_arithmetic("odds-calculator", {"odds": "1:3"}) == "Probability: 25.00%"

    def test_malformed_odds_render_nan(self) -> None:
        """Odds without a second part produce NaN, not an error."""
        assert handle_arithmetic("odds-calculator", {"odds": "abc"}) == "Probability: NaN%"

    def test_recipe_scaling(self) -> None:
        """Doubling servings multiplies by 2."""
        inputs = {"originalServings": "4", "desiredServings": "8"}
        assert handle_arithmetic("recipe-converter", inputs) == "Multiply all ingredients by 2.00"

    def test_unknown_id_in_family(self) -> None:
        """Ids the family does not know get the generic completion string."""
        assert handle_arithmetic("not-a-calculator", {}) == CALCULATION_COMPLETE


class TestPercentage:
    """Tests for the percentage family."""

    @pytest.mark.parametrize(
        ("value", "percentage", "expected"),
        [
            ("200", "15", "15% of 200 = 30.00"),
            ("80", "12.5", "12.5% of 80 = 10.00"),
            ("", "", "0% of 0 = 0.00"),
        ],
    )
    def test_percentage_of_value(self, value: str, percentage: str, expected: str) -> None:
        """percentage% of value, two decimals."""
        result = handle_percentage(
            "percentage-calculator", {"value": value, "percentage": percentage}
        )
        assert result == expected
