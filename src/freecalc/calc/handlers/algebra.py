"""Algebra family, including coordinate geometry on two points."""

from __future__ import annotations

from freecalc.calc import numeric
from freecalc.calc.formatting import to_fixed
from freecalc.calc.handlers.base import CALCULATION_COMPLETE, CalculatorInputs, num, number
from freecalc.calc.registry import UnitSystem


def _points(inputs: CalculatorInputs) -> tuple[float, float, float, float]:
    return (
        number(inputs, "x1"),
        number(inputs, "y1"),
        number(inputs, "x2"),
        number(inputs, "y2"),
    )


def handle_algebra(
    calculator_id: str,
    inputs: CalculatorInputs,
    unit_system: UnitSystem = UnitSystem.NEUTRAL,
) -> str:
    """Compute an algebra-family calculator.

    Free-form equation calculators ("algebra-calculator", "equation-solver")
    have no symbolic solver and return the generic completion string.
    """
    if calculator_id == "exponent-calculator":
        base = number(inputs, "base")
        exponent = number(inputs, "exponent")
        return f"{num(base)}^{num(exponent)} = {to_fixed(numeric.power(base, exponent), 6)}"

    if calculator_id == "square-root-calculator":
        value = number(inputs, "number")
        return (
            f"√{num(value)} = {to_fixed(numeric.sqrt(value), 6)} | "
            f"∛{num(value)} = {to_fixed(numeric.cbrt(value), 6)}"
        )

    if calculator_id == "quadratic-formula-calculator":
        a = number(inputs, "a")
        b = number(inputs, "b")
        c = number(inputs, "c")
        discriminant = b * b - 4 * a * c
        if discriminant < 0:
            return "No real solutions (discriminant < 0)"
        root = numeric.sqrt(discriminant)
        x1 = numeric.div(-b + root, 2 * a)
        x2 = numeric.div(-b - root, 2 * a)
        return f"x₁ = {to_fixed(x1, 4)} | x₂ = {to_fixed(x2, 4)}"

    if calculator_id == "log-calculator":
        value = number(inputs, "number")
        base = number(inputs, "base", 10)
        result = numeric.div(numeric.log(value), numeric.log(base))
        return f"log₍{num(base)}₎({num(value)}) = {to_fixed(result, 6)}"

    if calculator_id == "antilog-calculator":
        value = number(inputs, "number")
        base = number(inputs, "base", 10)
        return f"antilog₍{num(base)}₎({num(value)}) = {to_fixed(numeric.power(base, value), 6)}"

    if calculator_id == "slope-calculator":
        x1, y1, x2, y2 = _points(inputs)
        return f"Slope: {to_fixed(numeric.div(y2 - y1, x2 - x1), 4)}"

    if calculator_id == "distance-calculator":
        x1, y1, x2, y2 = _points(inputs)
        distance = numeric.sqrt(numeric.power(x2 - x1, 2) + numeric.power(y2 - y1, 2))
        return f"Distance: {to_fixed(distance, 4)}"

    if calculator_id == "midpoint-calculator":
        x1, y1, x2, y2 = _points(inputs)
        return f"Midpoint: ({to_fixed((x1 + x2) / 2, 2)}, {to_fixed((y1 + y2) / 2, 2)})"

    return CALCULATION_COMPLETE
