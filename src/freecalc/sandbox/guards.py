"""Pre-parse guards: input coercion, lexical whitelist and semantic blacklist.

These run before the parser sees a formula and reject anything outside the
arithmetic character set or resembling host-language object access.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from typing import Final

from freecalc.calc.coercion import is_finite_number
from freecalc.sandbox.errors import (
    FormulaTooComplexError,
    InvalidCharactersError,
    InvalidInputError,
    ProhibitedPatternError,
)

ALLOWED_CHARACTERS: Final = re.compile(r"[a-zA-Z0-9_+\-*/()\s.,<>=?:!&|]+")

PROHIBITED_PATTERNS: Final[tuple[re.Pattern[str], ...]] = (
    re.compile(r"[\[\]]"),
    re.compile(r"['\"`]"),
    re.compile(r"\$"),
    re.compile(r";"),
    *(
        re.compile(re.escape(word), re.IGNORECASE)
        for word in (
            "constructor",
            "prototype",
            "__proto__",
            "global",
            "module",
            "process",
            "require",
            "import",
            "eval",
            "Function",
            "Object",
            "Array",
            "String",
            "exec",
            "compile",
            "builtins",
            "getattr",
            "setattr",
            "lambda",
        )
    ),
)


def coerce_scope(inputs: Mapping[str, object]) -> dict[str, float]:
    """Convert every input to a finite float.

    Strings must be a number in their entirety ("12abc" is rejected); JSON
    numbers are accepted as-is when finite. Booleans are not numbers.

    Raises:
        InvalidInputError: On the first value that is not a finite number.
    """
    scope: dict[str, float] = {}
    for key, value in inputs.items():
        if isinstance(value, bool):
            raise InvalidInputError(key, value)
        if isinstance(value, int | float):
            try:
                number = float(value)
            except OverflowError:
                raise InvalidInputError(key, value) from None
            if not math.isfinite(number):
                raise InvalidInputError(key, value)
        elif isinstance(value, str) and is_finite_number(value):
            number = float(value)
        else:
            raise InvalidInputError(key, value)
        scope[key] = number
    return scope


def check_length(formula: str, max_length: int) -> None:
    """Raises FormulaTooComplexError when the formula is longer than ``max_length``."""
    if len(formula) > max_length:
        raise FormulaTooComplexError(f"{len(formula)} characters exceeds the limit of {max_length}")


def check_characters(formula: str) -> None:
    """Raises InvalidCharactersError unless every character is whitelisted."""
    if ALLOWED_CHARACTERS.fullmatch(formula) is None:
        raise InvalidCharactersError()


def check_patterns(formula: str) -> None:
    """Raises ProhibitedPatternError on the first blacklisted pattern."""
    for pattern in PROHIBITED_PATTERNS:
        if pattern.search(formula):
            raise ProhibitedPatternError(pattern.pattern)
