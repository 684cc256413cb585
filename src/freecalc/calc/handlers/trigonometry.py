"""Trigonometry family: sine, cosine and tangent of an angle in degrees."""

from __future__ import annotations

import math

from freecalc.calc import numeric
from freecalc.calc.formatting import to_fixed
from freecalc.calc.handlers.base import CALCULATION_COMPLETE, CalculatorInputs, num, number
from freecalc.calc.registry import UnitSystem

_FUNCTIONS = {
    "sine-calculator": ("sin", numeric.sin),
    "cosine-calculator": ("cos", numeric.cos),
    "tangent-calculator": ("tan", numeric.tan),
}


def handle_trigonometry(
    calculator_id: str,
    inputs: CalculatorInputs,
    unit_system: UnitSystem = UnitSystem.NEUTRAL,
) -> str:
    """Evaluate a trigonometric function of ``angle`` degrees to 6 decimals."""
    entry = _FUNCTIONS.get(calculator_id)
    if entry is None:
        return CALCULATION_COMPLETE

    name, function = entry
    angle = number(inputs, "angle")
    radians = angle * math.pi / 180
    return f"{name}({num(angle)}°) = {to_fixed(function(radians), 6)}"
