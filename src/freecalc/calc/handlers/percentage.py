"""Percentage family."""

from __future__ import annotations

from freecalc.calc.formatting import to_fixed
from freecalc.calc.handlers.base import CalculatorInputs, num, number
from freecalc.calc.registry import UnitSystem


def handle_percentage(
    calculator_id: str,
    inputs: CalculatorInputs,
    unit_system: UnitSystem = UnitSystem.NEUTRAL,
) -> str:
    """Compute ``percentage`` percent of ``value``."""
    value = number(inputs, "value")
    percentage = number(inputs, "percentage")
    result = value * percentage / 100
    return f"{num(percentage)}% of {num(value)} = {to_fixed(result, 2)}"
