"""Formula sandbox: safe evaluation of untrusted arithmetic formulas."""

from freecalc.sandbox.errors import (
    EvaluationError,
    FormulaRejectedError,
    FormulaSyntaxError,
    FormulaTooComplexError,
    InvalidCharactersError,
    InvalidInputError,
    NonFiniteResultError,
    ProhibitedPatternError,
    RejectionReason,
)
from freecalc.sandbox.sandbox import (
    CompiledFormula,
    EvaluationResult,
    FormulaSandbox,
    FormulaSpec,
)

__all__ = [
    "CompiledFormula",
    "EvaluationError",
    "EvaluationResult",
    "FormulaRejectedError",
    "FormulaSandbox",
    "FormulaSpec",
    "FormulaSyntaxError",
    "FormulaTooComplexError",
    "InvalidCharactersError",
    "InvalidInputError",
    "NonFiniteResultError",
    "ProhibitedPatternError",
    "RejectionReason",
]
