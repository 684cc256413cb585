"""Fallback family for calculators without dedicated arithmetic."""

from __future__ import annotations

from typing import Final

from freecalc.calc.handlers.base import CalculatorInputs
from freecalc.calc.registry import UnitSystem

FALLBACK_RESULT: Final[str] = (
    "Calculation completed. This calculator provides results based on your inputs."
)


def handle_other(
    calculator_id: str,
    inputs: CalculatorInputs,
    unit_system: UnitSystem = UnitSystem.NEUTRAL,
) -> str:
    """Return the generic completion message regardless of input."""
    return FALLBACK_RESULT
