"""Total string-to-number coercion for built-in calculators.

Every function in this module is total: malformed, empty or missing input
degrades to a caller-supplied fallback and nothing here ever raises. Parsing
follows browser ``parseFloat``/``parseInt`` rules, so the longest numeric
prefix wins and trailing text is ignored ("12abc" -> 12.0).
"""

from __future__ import annotations

import math
import re
from typing import Final

_FLOAT_PREFIX: Final = re.compile(
    r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)
_INT_PREFIX: Final = re.compile(r"\s*([+-]?\d+)")
_STRICT_FLOAT: Final = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*")

_DIGITS: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"


def coerce(raw: str | None, fallback: float = 0.0) -> float:
    """Parse the leading floating-point literal of ``raw``.

    Args:
        raw: Raw field value; may be None, empty or arbitrary text.
        fallback: Value returned when no numeric prefix exists.

    Returns:
        The parsed number (possibly +/-inf for "Infinity"), or ``fallback``.
    """
    if not raw:
        return fallback

    match = _FLOAT_PREFIX.match(raw)
    if match is None:
        return fallback

    literal = match.group(1)
    if literal.lstrip("+-") == "Infinity":
        return -math.inf if literal.startswith("-") else math.inf

    try:
        return float(literal)
    except (ValueError, OverflowError):
        return fallback


def coerce_int(raw: str | None, fallback: int = 0) -> int:
    """Parse the leading base-10 integer of ``raw`` ("12.7" -> 12)."""
    if not raw:
        return fallback

    match = _INT_PREFIX.match(raw)
    if match is None:
        return fallback
    return int(match.group(1))


def coerce_int_radix(raw: str | None, radix: int) -> int | None:
    """Parse the leading digits of ``raw`` that are valid in ``radix``.

    Args:
        raw: Text such as "ff", "-101" or "0x1A" (no prefix handling).
        radix: Base between 2 and 36.

    Returns:
        Parsed integer, or None when the radix is invalid or no digit matches.
    """
    if not raw or not 2 <= radix <= 36:
        return None

    text = raw.strip().lower()
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]

    valid = _DIGITS[:radix]
    digits = ""
    for char in text:
        if char not in valid:
            break
        digits += char

    if not digits:
        return None
    return sign * int(digits, radix)


def to_radix(value: int, radix: int) -> str:
    """Render an integer in ``radix`` using lowercase digits."""
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    value = abs(value)
    out: list[str] = []
    while value:
        value, rem = divmod(value, radix)
        out.append(_DIGITS[rem])
    return sign + "".join(reversed(out))


def is_finite_number(raw: str) -> bool:
    """Return True if ``raw`` is, in its entirety, a finite decimal number.

    Stricter than :func:`coerce`: trailing text, "Infinity" and empty strings
    are all rejected.
    """
    if not raw or _STRICT_FLOAT.fullmatch(raw) is None:
        return False
    try:
        return math.isfinite(float(raw))
    except (ValueError, OverflowError):
        return False
