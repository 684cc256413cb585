"""Statistics family: descriptive statistics over a comma-separated list."""

from __future__ import annotations

import math

from freecalc.calc import numeric
from freecalc.calc.coercion import coerce
from freecalc.calc.formatting import to_fixed
from freecalc.calc.handlers.base import CalculatorInputs
from freecalc.calc.registry import UnitSystem


def parse_values(raw: str | None) -> list[float]:
    """Split a comma-separated list, dropping tokens that are not numbers.

    Examples:
        >>> parse_values("10, 20, abc, 30")
        [10.0, 20.0, 30.0]
    """
    values: list[float] = []
    for token in (raw or "").split(","):
        value = coerce(token.strip(), numeric.NAN)
        if not math.isnan(value):
            values.append(value)
    return values


def mean(values: list[float]) -> float:
    """Arithmetic mean, summed left to right."""
    total = 0.0
    for value in values:
        total += value
    return total / len(values)


def median(values: list[float]) -> float:
    """Median via the sorted midpoint (average of the two middles when even)."""
    ordered = sorted(values)
    middle = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return (ordered[middle - 1] + ordered[middle]) / 2
    return ordered[middle]


def population_variance(values: list[float]) -> float:
    """Variance dividing by N, not N - 1."""
    center = mean(values)
    total = 0.0
    for value in values:
        total += numeric.power(value - center, 2)
    return total / len(values)


def handle_statistics(
    calculator_id: str,
    inputs: CalculatorInputs,
    unit_system: UnitSystem = UnitSystem.NEUTRAL,
) -> str:
    """Compute mean and median, or mean, standard deviation and variance.

    Args:
        calculator_id: "standard-deviation-calculator" selects the spread
            summary; every other id gets mean and median.
        inputs: Must carry ``values`` as a comma-separated list.
        unit_system: Unused.

    Returns:
        Result string, or a prompt when no numeric values were supplied.
    """
    values = parse_values(inputs.get("values"))
    if not values:
        return "Please enter values separated by commas"

    average = mean(values)
    if calculator_id == "standard-deviation-calculator":
        variance = population_variance(values)
        std_dev = numeric.sqrt(variance)
        return (
            f"Mean: {to_fixed(average, 2)} | Std Dev: {to_fixed(std_dev, 4)} | "
            f"Variance: {to_fixed(variance, 4)}"
        )

    return f"Mean: {to_fixed(average, 2)} | Median: {to_fixed(median(values), 2)}"
