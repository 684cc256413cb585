"""Calculation engine: registry lookup -> dispatch -> handler.

``perform_calculation`` never raises. Unknown calculators reach the fallback
family; a failure inside a handler is logged and replaced by a fixed error
string.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

from freecalc.calc.dispatcher import resolve_handler
from freecalc.calc.registry import (
    CalculatorRegistry,
    HandlerKind,
    UnitSystem,
    default_registry,
)

logger = logging.getLogger(__name__)

CALCULATION_ERROR: Final[str] = "Error in calculation. Please check your inputs and try again."


@dataclass(frozen=True)
class CalculationOutcome:
    """Result of running a built-in calculator.

    Attributes:
        calculator_id: Requested calculator id.
        handler_kind: Family that produced the result (``other`` for unknown ids).
        result: Human-readable result string.
        ok: False when the handler failed and ``result`` is the error string.
    """

    calculator_id: str
    handler_kind: HandlerKind
    result: str
    ok: bool = True


class CalcEngine:
    """Routes calculator ids to handler families.

    Holds no state beyond the registry it reads; safe to share across threads.
    """

    def __init__(self, registry: CalculatorRegistry | None = None) -> None:
        """Initialize the engine.

        Args:
            registry: Registry to read definitions from. Defaults to the
                shared registry seeded with the built-in catalogue.
        """
        self._registry = registry if registry is not None else default_registry()

    @property
    def registry(self) -> CalculatorRegistry:
        return self._registry

    def calculate(self, calculator_id: str, inputs: Mapping[str, str]) -> CalculationOutcome:
        """Run a calculator and report which family handled it.

        Args:
            calculator_id: Calculator slug; unknown slugs use the fallback.
            inputs: Raw field values keyed by field id.

        Returns:
            CalculationOutcome. Never raises.
        """
        definition = self._registry.get(calculator_id)
        if definition is None:
            kind = HandlerKind.OTHER
            unit_system = UnitSystem.NEUTRAL
        else:
            kind = definition.handler_kind
            unit_system = definition.unit_system

        handler = resolve_handler(kind)
        try:
            result = handler(calculator_id, inputs, unit_system)
        except Exception:
            logger.exception(
                "Calculator %s (%s) failed; returning error result", calculator_id, kind
            )
            return CalculationOutcome(calculator_id, kind, CALCULATION_ERROR, ok=False)

        return CalculationOutcome(calculator_id, kind, result)

    def perform_calculation(self, calculator_id: str, inputs: Mapping[str, str]) -> str:
        """Run a calculator and return only its result string. Never raises."""
        return self.calculate(calculator_id, inputs).result


def perform_calculation(calculator_id: str, inputs: Mapping[str, str]) -> str:
    """Run a built-in calculator against the shared registry.

    Args:
        calculator_id: Calculator slug, e.g. "mortgage-calculator".
        inputs: Raw field values; may be empty, missing or malformed.

    Returns:
        The result string, the fallback message for unknown calculators, or
        the fixed error string if the handler failed. Never raises.
    """
    return CalcEngine().perform_calculation(calculator_id, inputs)
