"""Random family: random integers, dice and coin flips.

Outputs come from the operating system's CSPRNG and are not reproducible.
"""

from __future__ import annotations

import secrets
from typing import Final

from freecalc.calc.handlers.base import CALCULATION_COMPLETE, CalculatorInputs, integer
from freecalc.calc.registry import UnitSystem

MAX_GENERATED_ITEMS: Final[int] = 1000

_random = secrets.SystemRandom()


def clamp_count(value: int) -> int:
    """Clamp a requested count or length to 1..MAX_GENERATED_ITEMS."""
    return max(1, min(MAX_GENERATED_ITEMS, value))


def handle_random(
    calculator_id: str,
    inputs: CalculatorInputs,
    unit_system: UnitSystem = UnitSystem.NEUTRAL,
) -> str:
    """Draw random numbers, dice rolls or coin flips."""
    if calculator_id == "random-number-generator":
        low = integer(inputs, "min", 1)
        high = integer(inputs, "max", 100)
        if low > high:
            low, high = high, low
        return f"Random Number: {_random.randint(low, high)}"

    if calculator_id == "dice-roller":
        sides = integer(inputs, "sides", 6)
        if sides < 1:
            return "Dice must have at least 1 side"
        rolls = [_random.randint(1, sides) for _ in range(clamp_count(integer(inputs, "count", 1)))]
        return f"Rolls: {', '.join(str(roll) for roll in rolls)} | Sum: {sum(rolls)}"

    if calculator_id == "coin-flip":
        flips = clamp_count(integer(inputs, "flips", 1))
        results = [_random.choice(("Heads", "Tails")) for _ in range(flips)]
        heads = results.count("Heads")
        return f"Results: {', '.join(results)} | Heads: {heads} | Tails: {flips - heads}"

    return CALCULATION_COMPLETE
