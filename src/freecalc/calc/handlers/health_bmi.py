"""Body-composition family: BMI, ideal weight, body fat and lean mass.

Formulas are imperial (pounds and inches). Metric calculators are converted on
input by :func:`body_measurements` and report weights back in kilograms.
"""

from __future__ import annotations

from typing import Final

from freecalc.calc import numeric
from freecalc.calc.formatting import to_fixed
from freecalc.calc.handlers.base import (
    CALCULATION_COMPLETE,
    CalculatorInputs,
    body_measurements,
    length_inches,
    number,
    text_field,
    weight_text,
)
from freecalc.calc.registry import UnitSystem

BMI_IMPERIAL_FACTOR: Final[int] = 703


def bmi_category(bmi: float) -> str:
    """WHO adult category for a BMI value."""
    if bmi < 18.5:
        return "Underweight"
    if bmi < 25:
        return "Normal"
    if bmi < 30:
        return "Overweight"
    return "Obese"


def navy_body_fat(
    gender: str, waist: float, neck: float, hip: float, height: float
) -> float:
    """U.S. Navy circumference method, all lengths in inches."""
    if gender == "male":
        return 86.010 * numeric.log10(waist - neck) - 70.041 * numeric.log10(height) + 36.76
    return (
        163.205 * numeric.log10(waist + hip - neck)
        - 97.684 * numeric.log10(height)
        - 78.387
    )


def handle_health_bmi(
    calculator_id: str,
    inputs: CalculatorInputs,
    unit_system: UnitSystem = UnitSystem.IMPERIAL,
) -> str:
    """Compute a body-composition calculator.

    Args:
        calculator_id: One of the bmi, ideal-weight, body-fat or
            lean-body-mass calculators.
        inputs: Weight and height fields; see :func:`body_measurements`.
        unit_system: Units of the weight and length inputs.

    Returns:
        Result string.
    """
    weight, height = body_measurements(inputs, unit_system)

    if calculator_id == "bmi-calculator":
        bmi = numeric.div(weight, height * height) * BMI_IMPERIAL_FACTOR
        return f"BMI: {to_fixed(bmi, 1)} ({bmi_category(bmi)})"

    if calculator_id == "ideal-weight-calculator":
        # Devine-style: base weight at 5 ft plus a fixed amount per extra inch
        male = text_field(inputs, "gender", "male") == "male"
        base, per_inch = (106, 6) if male else (100, 5)
        ideal = base + per_inch * max(0.0, height - 60)
        return f"Ideal Weight: {weight_text(ideal, unit_system)}"

    if calculator_id == "body-fat-calculator":
        waist = length_inches(inputs, "waist", unit_system)
        neck = length_inches(inputs, "neck", unit_system)
        hip = length_inches(inputs, "hip", unit_system, number(inputs, "waist"))
        gender = text_field(inputs, "gender", "male")
        body_fat = navy_body_fat(gender, waist, neck, hip, height)
        return f"Body Fat: {to_fixed(body_fat, 1)}%"

    if calculator_id == "lean-body-mass-calculator":
        lean = weight * (1 - number(inputs, "bodyFat") / 100)
        return (
            f"Lean Body Mass: {weight_text(lean, unit_system, 1)} | "
            f"Body Fat: {weight_text(weight - lean, unit_system, 1)}"
        )

    return CALCULATION_COMPLETE
