"""Typed rejections raised by the formula sandbox.

Every rejection derives from :class:`FormulaRejectedError` and carries a
machine-readable ``reason_code``; input rejections also name the ``field``.
"""

from __future__ import annotations

from enum import StrEnum


class RejectionReason(StrEnum):
    """Why the sandbox refused to produce a value."""

    INVALID_INPUT = "INVALID_INPUT"
    INVALID_CHARACTERS = "INVALID_CHARACTERS"
    PROHIBITED_PATTERN = "PROHIBITED_PATTERN"
    FORMULA_SYNTAX = "FORMULA_SYNTAX"
    FORMULA_TOO_COMPLEX = "FORMULA_TOO_COMPLEX"
    EVALUATION_FAILED = "EVALUATION_FAILED"
    NON_FINITE_RESULT = "NON_FINITE_RESULT"


class FormulaRejectedError(Exception):
    """Base class for every sandbox rejection."""

    reason_code: RejectionReason = RejectionReason.EVALUATION_FAILED

    def __init__(self, message: str, field: str | None = None) -> None:
        self.message = message
        self.field = field
        super().__init__(message)


class InvalidInputError(FormulaRejectedError):
    """A scope value is not a finite number."""

    reason_code = RejectionReason.INVALID_INPUT

    def __init__(self, field: str, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid numeric input for {field}: {value}", field=field)


class InvalidCharactersError(FormulaRejectedError):
    """The formula contains characters outside the lexical whitelist."""

    reason_code = RejectionReason.INVALID_CHARACTERS

    def __init__(self) -> None:
        super().__init__("Formula contains invalid characters")


class ProhibitedPatternError(FormulaRejectedError):
    """The formula matches the semantic blacklist."""

    reason_code = RejectionReason.PROHIBITED_PATTERN

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        super().__init__("Formula contains prohibited patterns")


class FormulaSyntaxError(FormulaRejectedError):
    """The formula is not a sentence of the restricted grammar."""

    reason_code = RejectionReason.FORMULA_SYNTAX

    def __init__(self, message: str, position: int | None = None) -> None:
        self.position = position
        if position is not None:
            message = f"{message} (char {position + 1})"
        super().__init__(f"Formula evaluation failed: {message}")


class FormulaTooComplexError(FormulaRejectedError):
    """The formula exceeds the configured length or nesting depth."""

    reason_code = RejectionReason.FORMULA_TOO_COMPLEX

    def __init__(self, detail: str) -> None:
        super().__init__(f"Formula is too complex: {detail}")


class EvaluationError(FormulaRejectedError):
    """Evaluation of a well-formed formula failed (e.g. an unbound name)."""

    reason_code = RejectionReason.EVALUATION_FAILED

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Formula evaluation failed: {detail}")


class NonFiniteResultError(FormulaRejectedError):
    """The formula produced NaN, an infinity or a boolean."""

    reason_code = RejectionReason.NON_FINITE_RESULT

    def __init__(self) -> None:
        super().__init__("Formula must return a finite number")
