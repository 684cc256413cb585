"""Calculator registry: calculator id -> handler kind, fields and unit system.

The registry stands in for the external definition store. Definitions are
immutable once registered; absence of a definition is not an error.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import StrEnum


class HandlerKind(StrEnum):
    """Closed set of handler families a calculator can be routed to."""

    ARITHMETIC = "arithmetic"
    PERCENTAGE = "percentage"
    GEOMETRY = "geometry"
    TRIGONOMETRY = "trigonometry"
    ALGEBRA = "algebra"
    STATISTICS = "statistics"
    NUMBER_THEORY = "number-theory"
    CONVERSION = "conversion"
    LOAN = "loan"
    INVESTMENT = "investment"
    SALARY = "salary"
    TAX_DISCOUNT = "tax-discount"
    HEALTH_BMI = "health-bmi"
    HEALTH_CALORIES = "health-calories"
    HEALTH_FITNESS = "health-fitness"
    DATE_TIME = "date-time"
    GRADE = "grade"
    CONSTRUCTION = "construction"
    TEXT = "text"
    RANDOM = "random"
    GENERATOR = "generator"
    OTHER = "other"


class UnitSystem(StrEnum):
    """Unit system a calculator's inputs are expressed in."""

    IMPERIAL = "imperial"
    METRIC = "metric"
    NEUTRAL = "neutral"


HEALTH_KINDS = frozenset(
    {HandlerKind.HEALTH_BMI, HandlerKind.HEALTH_CALORIES, HandlerKind.HEALTH_FITNESS}
)


@dataclass(frozen=True)
class CalculatorDefinition:
    """Definition of a built-in calculator.

    Attributes:
        slug: Stable calculator identifier (e.g. "mortgage-calculator").
        handler_kind: Family that computes this calculator.
        required_fields: Ordered field ids the presentation layer collects.
        unit_system: Units the inputs are expressed in.
    """

    slug: str
    handler_kind: HandlerKind
    required_fields: tuple[str, ...] = field(default_factory=tuple)
    unit_system: UnitSystem = UnitSystem.NEUTRAL

    @classmethod
    def create(
        cls,
        slug: str,
        handler_kind: HandlerKind,
        fields: Iterable[str],
        imperial: bool = False,
        unit_system: UnitSystem | None = None,
    ) -> CalculatorDefinition:
        """Build a definition, defaulting health calculators to imperial units."""
        if unit_system is None:
            if imperial or handler_kind in HEALTH_KINDS:
                unit_system = UnitSystem.IMPERIAL
            else:
                unit_system = UnitSystem.NEUTRAL
        return cls(
            slug=slug,
            handler_kind=handler_kind,
            required_fields=tuple(fields),
            unit_system=unit_system,
        )


class CalculatorRegistry:
    """Registry of calculator definitions keyed by slug.

    A process-wide default instance is shared; tests build their own via
    ``reset_instance`` or by populating a fresh registry.
    """

    _instance: CalculatorRegistry | None = None
    _definitions: dict[str, CalculatorDefinition]

    def __new__(cls) -> CalculatorRegistry:
        """Singleton pattern for the default registry."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._definitions = {}
        return cls._instance

    def register(self, definition: CalculatorDefinition) -> None:
        """Register a calculator definition.

        Raises:
            ValueError: If the slug is already registered.
        """
        if definition.slug in self._definitions:
            raise ValueError(f"Calculator '{definition.slug}' already registered")
        self._definitions[definition.slug] = definition

    def get(self, slug: str) -> CalculatorDefinition | None:
        """Get the definition for a slug, or None if unknown."""
        return self._definitions.get(slug)

    def get_or_raise(self, slug: str) -> CalculatorDefinition:
        """Get the definition for a slug.

        Raises:
            KeyError: If no calculator is registered under this slug.
        """
        definition = self.get(slug)
        if definition is None:
            raise KeyError(f"No calculator registered for slug: {slug}")
        return definition

    def list_registered(self) -> list[CalculatorDefinition]:
        """List all definitions in registration order."""
        return list(self._definitions.values())

    def __contains__(self, slug: object) -> bool:
        return slug in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def clear(self) -> None:
        """Clear all registered definitions. For testing only."""
        self._definitions.clear()

    @classmethod
    def reset_instance(cls) -> None:
        """Reset the singleton instance. For testing only."""
        cls._instance = None


def default_registry() -> CalculatorRegistry:
    """Return the shared registry, seeded with the built-in catalogue."""
    from freecalc.calc.catalogue import register_builtin_calculators

    registry = CalculatorRegistry()
    if not len(registry):
        register_builtin_calculators(registry)
    return registry


def lookup(calculator_id: str) -> CalculatorDefinition | None:
    """Look up a calculator in the default registry; None if absent."""
    return default_registry().get(calculator_id)
