"""Energy and intake family: BMR, TDEE, macronutrients and water."""

from __future__ import annotations

from typing import Final

from freecalc.calc.formatting import to_fixed
from freecalc.calc.handlers.base import (
    CM_PER_INCH,
    KG_PER_POUND,
    CalculatorInputs,
    body_measurements,
    number,
    text_field,
)
from freecalc.calc.registry import UnitSystem

DEFAULT_ACTIVITY_MULTIPLIER: Final[float] = 1.55
CARB_SHARE: Final[float] = 0.45
CALORIES_PER_GRAM_PROTEIN: Final[int] = 4
CALORIES_PER_GRAM_CARB: Final[int] = 4
CALORIES_PER_GRAM_FAT: Final[int] = 9

PROTEIN_PER_POUND: Final[dict[str, float]] = {
    "sedentary": 0.6,
    "moderate": 0.8,
    "active": 1.0,
    "very-active": 1.2,
}

# maintenance calories per pound of body weight
MAINTENANCE_PER_POUND: Final[dict[str, float]] = {
    "sedentary": 13,
    "moderate": 15,
    "active": 17,
    "very-active": 19,
}

GOAL_ADJUSTMENT: Final[dict[str, float]] = {"lose": -500, "maintain": 0, "gain": 500}

# protein / carbs / fat share of daily calories
MACRO_SPLIT: Final[tuple[float, float, float]] = (0.30, 0.40, 0.30)


def mifflin_st_jeor(weight_kg: float, height_cm: float, age: float, gender: str) -> float:
    """Basal metabolic rate: +5 for men, -161 for everyone else."""
    bmr = 10 * weight_kg + 6.25 * height_cm - 5 * age
    return bmr + 5 if gender == "male" else bmr - 161


def _macros(weight: float, inputs: CalculatorInputs) -> str:
    activity = text_field(inputs, "activityLevel", "moderate")
    goal = text_field(inputs, "goal", "maintain").strip().lower()
    per_pound = MAINTENANCE_PER_POUND.get(activity, MAINTENANCE_PER_POUND["moderate"])
    calories = weight * per_pound + GOAL_ADJUSTMENT.get(goal, 0)

    protein_share, carb_share, fat_share = MACRO_SPLIT
    protein = calories * protein_share / CALORIES_PER_GRAM_PROTEIN
    carbs = calories * carb_share / CALORIES_PER_GRAM_CARB
    fat = calories * fat_share / CALORIES_PER_GRAM_FAT
    return (
        f"Calories: {to_fixed(calories)} cal/day | Protein: {to_fixed(protein)}g | "
        f"Carbs: {to_fixed(carbs)}g | Fat: {to_fixed(fat)}g"
    )


def handle_health_calories(
    calculator_id: str,
    inputs: CalculatorInputs,
    unit_system: UnitSystem = UnitSystem.IMPERIAL,
) -> str:
    """Compute an energy-intake calculator.

    Unrecognized ids within the family report BMR and TDEE.
    """
    weight, height = body_measurements(inputs, unit_system)
    age = number(inputs, "age")
    gender = text_field(inputs, "gender", "male")
    activity = number(inputs, "activityLevel", DEFAULT_ACTIVITY_MULTIPLIER)

    bmr = mifflin_st_jeor(weight * KG_PER_POUND, height * CM_PER_INCH, age, gender)
    tdee = bmr * activity

    if calculator_id == "bmr-calculator":
        return f"BMR: {to_fixed(bmr)} calories/day"

    if calculator_id == "protein-calculator":
        level = text_field(inputs, "activityLevel", "moderate")
        protein = weight * PROTEIN_PER_POUND.get(level, PROTEIN_PER_POUND["moderate"])
        return (
            f"Daily Protein: {to_fixed(protein)}g "
            f"({to_fixed(protein * CALORIES_PER_GRAM_PROTEIN)} calories)"
        )

    if calculator_id == "carb-calculator":
        carb_calories = tdee * CARB_SHARE
        return (
            f"Daily Carbs: {to_fixed(carb_calories / CALORIES_PER_GRAM_CARB)}g "
            f"({to_fixed(carb_calories)} calories)"
        )

    if calculator_id == "water-intake-calculator":
        ounces = weight * 0.67
        return f"Daily Water: {to_fixed(ounces)} oz ({to_fixed(ounces / 8, 1)} cups)"

    if calculator_id == "macro-calculator":
        return _macros(weight, inputs)

    return f"BMR: {to_fixed(bmr)} cal/day | TDEE: {to_fixed(tdee)} cal/day"
