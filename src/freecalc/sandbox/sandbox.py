"""Formula sandbox: the trust boundary for untrusted calculator formulas.

A formula passes, in order:

1. input coercion: every scope value must be a finite number;
2. the lexical whitelist (plus the configured length limit);
3. the semantic blacklist;
4. parsing by the restricted grammar and tree evaluation;
5. result validation: the value must be a finite, non-boolean number.

Formulas are never handed to a host-language evaluator.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, field

from freecalc.config import SandboxConfig, load_sandbox_config
from freecalc.sandbox.errors import (
    FormulaRejectedError,
    FormulaTooComplexError,
    NonFiniteResultError,
    RejectionReason,
)
from freecalc.sandbox.evaluator import evaluate
from freecalc.sandbox.guards import check_characters, check_length, check_patterns, coerce_scope
from freecalc.sandbox.parser import Node, parse_formula

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormulaSpec:
    """A formula as supplied by the formula producer.

    Attributes:
        formula_text: Formula source, e.g. "(a + b) / 2".
        field_ids: Field ids the formula may reference.
        result_label: Optional label for the formatted result.
        result_unit: Optional unit appended after the number.
    """

    formula_text: str
    field_ids: frozenset[str] = field(default_factory=frozenset)
    result_label: str | None = None
    result_unit: str | None = None


@dataclass(frozen=True)
class CompiledFormula:
    """A formula that passed every static check; evaluate it any number of times.

    Attributes:
        source: Original formula text.
        tree: Parsed syntax tree.
        names: Variable and constant names the formula references.
    """

    source: str
    tree: Node
    names: frozenset[str]

    def evaluate(self, scope: Mapping[str, float]) -> float:
        """Evaluate against an already-coerced scope.

        Raises:
            FormulaRejectedError: On evaluation failure or a non-finite or
                boolean result.
        """
        try:
            value = evaluate(self.tree, scope)
        except RecursionError:
            raise FormulaTooComplexError("nesting too deep to evaluate") from None

        if isinstance(value, bool) or not math.isfinite(value):
            raise NonFiniteResultError()
        return value


@dataclass(frozen=True)
class EvaluationResult:
    """Outcome of a sandboxed evaluation: a finite value or a rejection."""

    value: float | None = None
    label: str | None = None
    unit: str | None = None
    reason: str | None = None
    reason_code: RejectionReason | None = None
    field: str | None = None

    @property
    def ok(self) -> bool:
        return self.reason_code is None

    @classmethod
    def rejected(cls, error: FormulaRejectedError) -> EvaluationResult:
        return cls(reason=error.message, reason_code=error.reason_code, field=error.field)


class FormulaSandbox:
    """Validates and evaluates untrusted formulas.

    Stateless apart from its limits; one instance can be shared.
    """

    def __init__(self, config: SandboxConfig | None = None) -> None:
        """Initialize the sandbox.

        Args:
            config: Length and depth limits. Defaults to the environment.

        Raises:
            ConfigError: If limits loaded from the environment are invalid.
        """
        self._config = config if config is not None else load_sandbox_config()

    @property
    def config(self) -> SandboxConfig:
        return self._config

    def compile(self, formula: str) -> CompiledFormula:
        """Run the static checks and parse a formula.

        Raises:
            FormulaRejectedError: If any check fails.
        """
        check_length(formula, self._config.max_formula_length)
        check_characters(formula)
        check_patterns(formula)
        parsed = parse_formula(formula, self._config.max_depth)
        return CompiledFormula(source=formula, tree=parsed.tree, names=parsed.names)

    def evaluate(self, formula: str, inputs: Mapping[str, object]) -> float:
        """Coerce inputs, check and evaluate a formula.

        Args:
            formula: Untrusted formula text.
            inputs: Field id -> raw value (string or JSON number).

        Returns:
            The finite numeric result.

        Raises:
            FormulaRejectedError: Subclass naming the first failed stage.
        """
        try:
            scope = coerce_scope(inputs)
            return self.compile(formula).evaluate(scope)
        except FormulaRejectedError as e:
            logger.warning("Formula rejected (%s): %s", e.reason_code, e.message)
            raise

    def run(self, spec: FormulaSpec, inputs: Mapping[str, object]) -> EvaluationResult:
        """Evaluate a producer's formula, reporting rejection as a result."""
        try:
            value = self.evaluate(spec.formula_text, inputs)
        except FormulaRejectedError as e:
            return EvaluationResult.rejected(e)
        return EvaluationResult(value=value, label=spec.result_label, unit=spec.result_unit)
