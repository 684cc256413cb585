"""Number theory family: factorials, combinatorics, primes and divisors.

Factorials and combinatorial counts use exact integer arithmetic built from
iterative products, so C(49, 6) renders as "13983816" rather than a rounded
float. Inputs are bounded to keep each product small.
"""

from __future__ import annotations

import math
from typing import Final

from freecalc.calc import numeric
from freecalc.calc.formatting import to_fixed
from freecalc.calc.handlers.base import (
    CALCULATION_COMPLETE,
    CalculatorInputs,
    integer,
    num,
    number,
)
from freecalc.calc.registry import UnitSystem

MAX_FACTORIAL: Final[int] = 170
MAX_COMBINATORIC_N: Final[int] = 1000
MAX_PRIME_CANDIDATE: Final[int] = 10**12


def factorial(n: int) -> int:
    """n! by iterative product; n is assumed to be within 0..MAX_FACTORIAL."""
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def permutations(n: int, r: int) -> int:
    """P(n, r) = n! / (n - r)! as the falling product n * (n-1) * ... ."""
    result = 1
    for k in range(n - r + 1, n + 1):
        result *= k
    return result


def combinations(n: int, r: int) -> int:
    """C(n, r) by the multiplicative formula; every partial quotient is exact."""
    r = min(r, n - r)
    result = 1
    for i in range(1, r + 1):
        result = result * (n - r + i) // i
    return result


def is_prime(n: int) -> bool:
    """Trial division by 2, 3 and 6k +/- 1 up to sqrt(n)."""
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False

    limit = math.isqrt(n)
    k = 5
    while k <= limit:
        if n % k == 0 or n % (k + 2) == 0:
            return False
        k += 6
    return True


def _choose_arguments(inputs: CalculatorInputs) -> tuple[int, int, str | None]:
    n = integer(inputs, "n")
    r = integer(inputs, "r")
    if r > n:
        return n, r, "r cannot be greater than n"
    if r < 0:
        return n, r, "n and r must be non-negative"
    if n > MAX_COMBINATORIC_N:
        return n, r, f"Number too large (max {MAX_COMBINATORIC_N})"
    return n, r, None


def handle_number_theory(
    calculator_id: str,
    inputs: CalculatorInputs,
    unit_system: UnitSystem = UnitSystem.NEUTRAL,
) -> str:
    """Compute a number-theory calculator."""
    if calculator_id == "factorial-calculator":
        n = integer(inputs, "number")
        if n < 0:
            return "Factorial not defined for negative numbers"
        if n > MAX_FACTORIAL:
            return f"Number too large (max {MAX_FACTORIAL})"
        return f"{n}! = {factorial(n)}"

    if calculator_id == "combination-calculator":
        n, r, problem = _choose_arguments(inputs)
        if problem:
            return problem
        return f"C({n},{r}) = {combinations(n, r)}"

    if calculator_id == "permutation-calculator":
        n, r, problem = _choose_arguments(inputs)
        if problem:
            return problem
        return f"P({n},{r}) = {permutations(n, r)}"

    if calculator_id == "prime-number-calculator":
        n = integer(inputs, "number")
        if n > MAX_PRIME_CANDIDATE:
            return f"Number too large (max {MAX_PRIME_CANDIDATE})"
        return f"{n} is prime" if is_prime(n) else f"{n} is not prime"

    if calculator_id == "lcm-calculator":
        a = integer(inputs, "a")
        b = integer(inputs, "b")
        divisor = math.gcd(a, b)
        lcm = "NaN" if divisor == 0 else str(abs(a * b) // divisor)
        return f"LCM({a}, {b}) = {lcm}"

    if calculator_id == "gcf-calculator":
        a = integer(inputs, "a")
        b = integer(inputs, "b")
        return f"GCF({a}, {b}) = {math.gcd(a, b)}"

    if calculator_id == "divisibility-calculator":
        n = integer(inputs, "number")
        divisor = integer(inputs, "divisor", 1)
        divisible = divisor != 0 and n % divisor == 0
        return f"{n} is {'' if divisible else 'NOT '}divisible by {divisor}"

    if calculator_id == "lottery-calculator":
        balls = integer(inputs, "balls", 49)
        picks = integer(inputs, "picks", 6)
        if picks > balls:
            return "Picks cannot be greater than balls"
        if picks < 0:
            return "Balls and picks must be non-negative"
        if balls > MAX_COMBINATORIC_N:
            return f"Number too large (max {MAX_COMBINATORIC_N})"
        return f"Odds: 1 in {combinations(balls, picks)}"

    if calculator_id == "probability-calculator":
        favorable = number(inputs, "favorable")
        total = number(inputs, "total", 1)
        probability = numeric.div(favorable, total) * 100
        return f"Probability: {to_fixed(probability, 2)}% ({num(favorable)}/{num(total)})"

    return CALCULATION_COMPLETE
