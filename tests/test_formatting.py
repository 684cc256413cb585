"""Tests for number rendering in result strings."""

from __future__ import annotations

import math

import pytest

from freecalc.calc.formatting import format_number, to_fixed, to_precision


class TestFormatNumber:
    """Tests for format_number()."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (25.0, "25"),
            (2.5, "2.5"),
            (0.1, "0.1"),
            (-3.0, "-3"),
            (0.0, "0"),
            (7, "7"),
            (1e21, "1e+21"),
            (1e-7, "1e-7"),
            (1.5e-7, "1.5e-7"),
            (123456789012.0, "123456789012"),
        ],
    )
    def test_shortest_rendering(self, value: float, expected: str) -> None:
        """Numbers render without trailing '.0' and switch to exponents at the edges."""
        assert format_number(value) == expected

    def test_non_finite(self) -> None:
        """NaN and infinities render as words."""
        assert format_number(math.nan) == "NaN"
        assert format_number(math.inf) == "Infinity"
        assert format_number(-math.inf) == "-Infinity"

    def test_bool_renders_as_integer(self) -> None:
        """Booleans render as 1 and 0."""
        assert format_number(True) == "1"


class TestToFixed:
    """Tests for to_fixed()."""

    @pytest.mark.parametrize(
        ("value", "digits", "expected"),
        [
            (3.14159, 2, "3.14"),
            (2.5, 0, "3"),
            (-2.5, 0, "-3"),
            (1.005, 2, "1.00"),
            (1199.1010503055138, 2, "1199.10"),
            (5, 4, "5.0000"),
            (0.0, 2, "0.00"),
        ],
    )
    def test_fixed_decimals(self, value: float, digits: int, expected: str) -> None:
        """Ties round away from zero on the exact binary value."""
        assert to_fixed(value, digits) == expected

    def test_negative_zero_loses_sign(self) -> None:
        """A value rounding to zero never renders as '-0.00'."""
        assert to_fixed(-0.001, 2) == "0.00"

    def test_non_finite(self) -> None:
        """NaN and infinities render as words."""
        assert to_fixed(math.nan, 2) == "NaN"
        assert to_fixed(math.inf, 2) == "Infinity"

    def test_huge_values_use_exponent(self) -> None:
        """Magnitudes from 1e21 fall back to format_number."""
        assert to_fixed(1e22, 2) == "1e+22"

    def test_digits_are_clamped(self) -> None:
        """Negative digit counts are treated as zero."""
        assert to_fixed(2.4, -3) == "2"


class TestToPrecision:
    """Tests for to_precision()."""

    def test_significant_digits(self) -> None:
        """Values are rounded to the requested significant digits."""
        assert to_precision(123.456, 3) == "123"
        assert to_precision(0.0012345, 2) == "0.0012"

    def test_exponent_when_integer_part_too_long(self) -> None:
        """Exponent notation is used when digits cannot hold the integer part."""
        assert to_precision(123456.0, 2) == "1.2e+5"

    def test_zero(self) -> None:
        """Zero keeps the requested number of digits."""
        assert to_precision(0.0, 3) == "0.00"
