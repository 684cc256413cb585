"""IEEE-754 style arithmetic primitives.

Python raises on division by zero, domain errors and float overflow. Handler
arithmetic instead propagates NaN and +/-inf, so a degenerate input produces a
(possibly "NaN"/"Infinity") result string rather than an exception. The formula
sandbox uses the same primitives and rejects non-finite results at the end.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Final

NAN: Final[float] = math.nan
INF: Final[float] = math.inf

# Euclid on floats terminates, but the bound keeps pathological inputs cheap.
_GCD_MAX_STEPS: Final[int] = 10_000


def div(a: float, b: float) -> float:
    """Divide with IEEE semantics: x/0 is +/-inf, 0/0 is NaN."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return NAN
        sign = math.copysign(1.0, a) * math.copysign(1.0, b)
        return INF if sign > 0 else -INF


def fmod(a: float, b: float) -> float:
    """Truncated remainder (sign of the dividend); NaN when undefined."""
    if b == 0 or math.isinf(a) or math.isnan(a) or math.isnan(b):
        return NAN
    if math.isinf(b):
        return a
    return math.fmod(a, b)


def sqrt(x: float) -> float:
    """Square root; NaN for negative input."""
    if math.isnan(x) or x < 0:
        return NAN
    return math.sqrt(x)


def cbrt(x: float) -> float:
    """Real cube root, defined for negative input."""
    if not math.isfinite(x):
        return x
    return math.copysign(abs(x) ** (1.0 / 3.0), x)


def log(x: float) -> float:
    """Natural logarithm; -inf at 0, NaN below 0."""
    if math.isnan(x) or x < 0:
        return NAN
    if x == 0:
        return -INF
    return math.log(x)


def log10(x: float) -> float:
    """Base-10 logarithm; -inf at 0, NaN below 0."""
    if math.isnan(x) or x < 0:
        return NAN
    if x == 0:
        return -INF
    return math.log10(x)


def power(base: float, exponent: float) -> float:
    """``base ** exponent`` with overflow to inf and NaN for complex results."""
    try:
        result = math.pow(base, exponent)
    except OverflowError:
        if base < 0 and exponent == math.floor(exponent) and exponent % 2 == 1:
            return -INF
        return INF
    except (ValueError, ZeroDivisionError):
        if base == 0 and exponent < 0:
            return INF
        return NAN
    return result


def exp(x: float) -> float:
    """``e ** x`` with overflow to inf."""
    try:
        return math.exp(x)
    except OverflowError:
        return INF


def round_half_up(x: float) -> float:
    """Round to the nearest integer, ties toward +inf; non-finite passes through."""
    if not math.isfinite(x):
        return x
    return float(math.floor(x + 0.5))


def floor(x: float) -> float:
    """Floor that passes NaN and infinities through."""
    if not math.isfinite(x):
        return x
    return float(math.floor(x))


def ceil(x: float) -> float:
    """Ceiling that passes NaN and infinities through."""
    if not math.isfinite(x):
        return x
    return float(math.ceil(x))


def gcd(a: float, b: float) -> float:
    """Greatest common divisor of two reals by Euclid's algorithm.

    Works on non-integers (gcd(0.5, 0.25) == 0.25). Returns NaN when either
    argument is not finite.
    """
    if not (math.isfinite(a) and math.isfinite(b)):
        return NAN

    for _ in range(_GCD_MAX_STEPS):
        if b == 0:
            return abs(a)
        a, b = b, math.fmod(a, b)
    return abs(a)


def lcm(a: float, b: float) -> float:
    """Least common multiple; NaN when both arguments are zero."""
    return div(abs(a * b), gcd(a, b))


def _guarded(function: Callable[[float], float], x: float) -> float:
    try:
        return function(x)
    except (ValueError, OverflowError):
        return NAN


def sin(x: float) -> float:
    """Sine of radians; NaN for infinite input."""
    return _guarded(math.sin, x)


def cos(x: float) -> float:
    """Cosine of radians; NaN for infinite input."""
    return _guarded(math.cos, x)


def tan(x: float) -> float:
    """Tangent of radians; NaN for infinite input."""
    return _guarded(math.tan, x)


def asin(x: float) -> float:
    """Arcsine in radians; NaN outside [-1, 1]."""
    return _guarded(math.asin, x)


def acos(x: float) -> float:
    """Arccosine in radians; NaN outside [-1, 1]."""
    return _guarded(math.acos, x)


def atan(x: float) -> float:
    return math.atan(x)


def log2(x: float) -> float:
    """Base-2 logarithm; -inf at 0, NaN below 0."""
    if math.isnan(x) or x < 0:
        return NAN
    if x == 0:
        return -INF
    return math.log2(x)
