"""Shared types and rendering helpers for handler families."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Final

from freecalc.calc.coercion import coerce, coerce_int
from freecalc.calc.formatting import format_number, to_fixed
from freecalc.calc.registry import UnitSystem

CalculatorInputs = Mapping[str, str]
Handler = Callable[[str, CalculatorInputs, UnitSystem], str]

CALCULATION_COMPLETE: Final[str] = "Calculation complete"
CONVERSION_COMPLETE: Final[str] = "Conversion complete"
GENERATED_SUCCESSFULLY: Final[str] = "Generated successfully"


def money(value: float) -> str:
    """Render a currency amount as "$1234.56"."""
    return f"${to_fixed(value, 2)}"


def num(value: float | int) -> str:
    """Shortest rendering of an input echoed back to the user."""
    return format_number(value)


def text_field(inputs: CalculatorInputs, key: str, default: str) -> str:
    """Return a text field, treating missing and empty values as ``default``."""
    value = inputs.get(key)
    return value if value else default


def number(inputs: CalculatorInputs, key: str, default: float = 0.0) -> float:
    """Coerce a numeric field, falling back to ``default``."""
    return coerce(inputs.get(key), default)


def integer(inputs: CalculatorInputs, key: str, default: int = 0) -> int:
    """Coerce an integer field, falling back to ``default``."""
    return coerce_int(inputs.get(key), default)


KG_PER_POUND: Final[float] = 0.453592
CM_PER_INCH: Final[float] = 2.54


def length_inches(
    inputs: CalculatorInputs, key: str, unit_system: UnitSystem, default: float = 0.0
) -> float:
    """Read a body measurement in inches, converting from cm for metric input."""
    value = number(inputs, key, default)
    if unit_system == UnitSystem.METRIC:
        return value / CM_PER_INCH
    return value


def body_measurements(inputs: CalculatorInputs, unit_system: UnitSystem) -> tuple[float, float]:
    """Return ``(weight_lb, height_in)`` for a health calculator.

    Imperial input supplies ``weight`` in pounds and ``heightFeet`` plus
    ``heightInches``. Metric input supplies ``weight`` in kilograms and
    ``height`` in centimetres; both are converted before any formula runs.
    """
    weight = number(inputs, "weight")
    if unit_system == UnitSystem.METRIC:
        return weight / KG_PER_POUND, number(inputs, "height") / CM_PER_INCH
    return weight, number(inputs, "heightFeet") * 12 + number(inputs, "heightInches")


def weight_text(pounds: float, unit_system: UnitSystem, digits: int = 0) -> str:
    """Render a body weight in the calculator's own units."""
    if unit_system == UnitSystem.METRIC:
        return f"{to_fixed(pounds * KG_PER_POUND, digits)} kg"
    return f"{to_fixed(pounds, digits)} lbs"
