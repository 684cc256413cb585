"""Grade family: GPA, test scores, weighted averages and final-exam targets."""

from __future__ import annotations

from typing import Final

from freecalc.calc import numeric
from freecalc.calc.formatting import to_fixed
from freecalc.calc.handlers.base import CALCULATION_COMPLETE, CalculatorInputs, num, number
from freecalc.calc.handlers.statistics import parse_values
from freecalc.calc.registry import UnitSystem

GRADE_POINTS: Final[dict[str, float]] = {
    "A+": 4.0,
    "A": 4.0,
    "A-": 3.7,
    "B+": 3.3,
    "B": 3.0,
    "B-": 2.7,
    "C+": 2.3,
    "C": 2.0,
    "C-": 1.7,
    "D+": 1.3,
    "D": 1.0,
    "D-": 0.7,
    "F": 0.0,
}

LETTER_THRESHOLDS: Final[tuple[tuple[float, str], ...]] = (
    (90, "A"),
    (80, "B"),
    (70, "C"),
    (60, "D"),
)


def letter_grade(percent: float) -> str:
    for threshold, letter in LETTER_THRESHOLDS:
        if percent >= threshold:
            return letter
    return "F"


def grade_point_average(raw: str | None) -> float:
    """Average grade points of a comma-separated list of letter grades.

    Unrecognized entries (including blanks) count as 0.0 points.
    """
    grades = [token.strip().upper() for token in (raw or "").split(",")]
    total = 0.0
    for grade in grades:
        total += GRADE_POINTS.get(grade, 0.0)
    return total / len(grades)


def _weighted_average(inputs: CalculatorInputs) -> str:
    scores = parse_values(inputs.get("scores"))
    if not scores:
        return "Please enter scores separated by commas"

    weights = parse_values(inputs.get("weights")) or [1.0] * len(scores)
    if len(weights) != len(scores):
        return "Please enter one weight per score"

    weighted = 0.0
    total_weight = 0.0
    for score, weight in zip(scores, weights):
        weighted += score * weight
        total_weight += weight
    average = numeric.div(weighted, total_weight)
    return f"Weighted Grade: {to_fixed(average, 2)}% ({letter_grade(average)})"


def handle_grade(
    calculator_id: str,
    inputs: CalculatorInputs,
    unit_system: UnitSystem = UnitSystem.NEUTRAL,
) -> str:
    """Compute a grade calculator."""
    if calculator_id == "gpa-calculator":
        return f"GPA: {to_fixed(grade_point_average(inputs.get('grades')), 2)}"

    if calculator_id == "test-grade-calculator":
        correct = number(inputs, "correct")
        total = number(inputs, "total", 1)
        percent = numeric.div(correct, total) * 100
        return (
            f"Score: {to_fixed(percent, 1)}% ({letter_grade(percent)}) | "
            f"{num(correct)}/{num(total)} correct"
        )

    if calculator_id == "final-grade-calculator":
        current = number(inputs, "current")
        final_weight = number(inputs, "finalWeight", 20)
        target = number(inputs, "targetGrade", 90)
        needed = numeric.div((target - current * (100 - final_weight) / 100) * 100, final_weight)
        return f"Score Needed on Final: {to_fixed(needed, 1)}%"

    if calculator_id in ("grade-calculator", "weighted-grade-calculator"):
        return _weighted_average(inputs)

    return CALCULATION_COMPLETE
