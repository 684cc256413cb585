"""Number rendering for calculator result strings.

Two renderings are used throughout the handler families:

- ``to_fixed``: a fixed number of decimals, ties rounded away from zero on the
  exact binary value (so 1.005 renders "1.00", 2.5 renders "3").
- ``format_number``: the shortest string that round-trips, without a trailing
  ".0" for integral values and with positional notation between 1e-6 and 1e21.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Final

_POSITIONAL_MIN: Final[float] = 1e-6
_POSITIONAL_MAX: Final[float] = 1e21
_WORKING_PRECISION: Final[int] = 200


def _non_finite(value: float) -> str | None:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return None


def format_number(value: float | int) -> str:
    """Render a number as its shortest round-trip string.

    Examples:
        >>> format_number(25.0)
        '25'
        >>> format_number(2.5)
        '2.5'
        >>> format_number(1e-7)
        '1e-7'
    """
    if isinstance(value, bool):
        value = int(value)
    if isinstance(value, int):
        return str(value)

    special = _non_finite(value)
    if special is not None:
        return special
    if value == 0:
        return "0"

    magnitude = abs(value)
    if _POSITIONAL_MIN <= magnitude < _POSITIONAL_MAX:
        if value.is_integer():
            return str(int(value))
        return format(Decimal(repr(value)), "f")

    mantissa, _, exponent = repr(value).partition("e")
    if mantissa.endswith(".0"):
        mantissa = mantissa[:-2]
    exp = int(exponent)
    return f"{mantissa}e{'+' if exp > 0 else '-'}{abs(exp)}"


def to_fixed(value: float | int, digits: int = 0) -> str:
    """Render ``value`` with exactly ``digits`` decimals.

    Args:
        value: Number to render. NaN and infinities render as words.
        digits: Number of decimals, clamped to 0..100.

    Returns:
        Fixed-point string; magnitudes of 1e21 and above fall back to
        :func:`format_number`.
    """
    value = float(value)
    special = _non_finite(value)
    if special is not None:
        return special
    if abs(value) >= _POSITIONAL_MAX:
        return format_number(value)

    digits = max(0, min(100, digits))
    with localcontext() as ctx:
        ctx.prec = _WORKING_PRECISION
        quantum = Decimal(1).scaleb(-digits)
        rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)
    text = format(rounded, "f")
    if rounded.is_zero() and text.startswith("-"):
        text = text[1:]
    return text


def to_precision(value: float, significant: int) -> str:
    """Render ``value`` with ``significant`` significant digits (1..100)."""
    special = _non_finite(value)
    if special is not None:
        return special

    significant = max(1, min(100, significant))
    if value == 0:
        return to_fixed(0.0, significant - 1)

    exponent = math.floor(math.log10(abs(value)))
    if exponent < -6 or exponent >= significant:
        with localcontext() as ctx:
            ctx.prec = _WORKING_PRECISION
            quantum = Decimal(1).scaleb(exponent - significant + 1)
            rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)
        return f"{rounded:.{significant - 1}e}".replace("e+0", "e+").replace("e-0", "e-")
    return to_fixed(value, significant - 1 - exponent)
