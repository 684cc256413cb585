"""Fitness family: pace, heart-rate zones, VO2 max, one-rep max and BAC."""

from __future__ import annotations

from freecalc.calc import numeric
from freecalc.calc.formatting import to_fixed
from freecalc.calc.handlers.base import (
    CALCULATION_COMPLETE,
    KG_PER_POUND,
    CalculatorInputs,
    num,
    number,
    text_field,
)
from freecalc.calc.registry import UnitSystem

LEGAL_BAC_LIMIT = 0.08

# Widmark body-water ratio
_WIDMARK_RATIO = {"male": 0.68, "female": 0.55}


def heart_rate_zones(age: float) -> tuple[float, list[float]]:
    """Maximum heart rate (220 - age) and the 50/60/70/80/90% zone bounds."""
    max_hr = 220 - age
    zones = [numeric.round_half_up(max_hr * share) for share in (0.5, 0.6, 0.7, 0.8, 0.9)]
    return max_hr, zones


def handle_health_fitness(
    calculator_id: str,
    inputs: CalculatorInputs,
    unit_system: UnitSystem = UnitSystem.IMPERIAL,
) -> str:
    """Compute a fitness calculator."""
    metric = unit_system == UnitSystem.METRIC

    if calculator_id in ("pace-calculator", "running-calculator"):
        distance = number(inputs, "distance")
        time = number(inputs, "time")
        pace = numeric.div(time, distance)
        speed = numeric.div(60, pace)
        if metric:
            return f"Pace: {to_fixed(pace, 2)} min/km | Speed: {to_fixed(speed, 2)} km/h"
        return f"Pace: {to_fixed(pace, 2)} min/mile | Speed: {to_fixed(speed, 2)} mph"

    if calculator_id == "heart-rate-calculator":
        max_hr, (z1, z2, z3, z4, z5) = heart_rate_zones(number(inputs, "age"))
        return (
            f"Max HR: {num(max_hr)} bpm | Zones: {num(z1)}-{num(z2)} (warm-up), "
            f"{num(z2)}-{num(z3)} (fat burn), {num(z3)}-{num(z4)} (cardio), "
            f"{num(z4)}-{num(z5)} (peak)"
        )

    if calculator_id == "vo2-max-calculator":
        vo2max = numeric.div(number(inputs, "distance"), number(inputs, "time")) * 3.5
        return f"VO2 Max: {to_fixed(vo2max, 1)} ml/kg/min"

    if calculator_id == "one-rep-max-calculator":
        # Epley formula
        one_rm = number(inputs, "weight") * (1 + number(inputs, "reps", 1) / 30)
        return f"One Rep Max: {to_fixed(one_rm)} {'kg' if metric else 'lbs'}"

    if calculator_id == "bac-calculator":
        weight = number(inputs, "weight")
        if metric:
            weight /= KG_PER_POUND
        drinks = number(inputs, "drinks")
        hours = number(inputs, "hours", 1)
        gender = "male" if text_field(inputs, "gender", "male") == "male" else "female"
        ratio = _WIDMARK_RATIO[gender]
        bac = numeric.div(drinks * 0.6 * 5.14, weight * ratio) - 0.015 * hours
        warning = " (Over legal limit!)" if bac > LEGAL_BAC_LIMIT else ""
        return f"BAC: {to_fixed(bac if bac > 0 else 0.0, 3)}%{warning}"

    return CALCULATION_COMPLETE
