"""Handler dispatch: HandlerKind -> handler family.

The table is the single extension point for new families: add a member to
``HandlerKind`` and an entry here. Lookups are total; a kind without an entry
resolves to the fallback family.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from freecalc.calc.handlers import (
    Handler,
    handle_algebra,
    handle_arithmetic,
    handle_construction,
    handle_conversion,
    handle_date_time,
    handle_generator,
    handle_geometry,
    handle_grade,
    handle_health_bmi,
    handle_health_calories,
    handle_health_fitness,
    handle_investment,
    handle_loan,
    handle_number_theory,
    handle_other,
    handle_percentage,
    handle_random,
    handle_salary,
    handle_statistics,
    handle_tax_discount,
    handle_text,
    handle_trigonometry,
)
from freecalc.calc.registry import HandlerKind

FALLBACK_HANDLER: Handler = handle_other

HANDLER_DISPATCH: Mapping[HandlerKind, Handler] = MappingProxyType(
    {
        HandlerKind.ARITHMETIC: handle_arithmetic,
        HandlerKind.PERCENTAGE: handle_percentage,
        HandlerKind.GEOMETRY: handle_geometry,
        HandlerKind.TRIGONOMETRY: handle_trigonometry,
        HandlerKind.ALGEBRA: handle_algebra,
        HandlerKind.STATISTICS: handle_statistics,
        HandlerKind.NUMBER_THEORY: handle_number_theory,
        HandlerKind.CONVERSION: handle_conversion,
        HandlerKind.LOAN: handle_loan,
        HandlerKind.INVESTMENT: handle_investment,
        HandlerKind.SALARY: handle_salary,
        HandlerKind.TAX_DISCOUNT: handle_tax_discount,
        HandlerKind.HEALTH_BMI: handle_health_bmi,
        HandlerKind.HEALTH_CALORIES: handle_health_calories,
        HandlerKind.HEALTH_FITNESS: handle_health_fitness,
        HandlerKind.DATE_TIME: handle_date_time,
        HandlerKind.GRADE: handle_grade,
        HandlerKind.CONSTRUCTION: handle_construction,
        HandlerKind.TEXT: handle_text,
        HandlerKind.RANDOM: handle_random,
        HandlerKind.GENERATOR: handle_generator,
        HandlerKind.OTHER: handle_other,
    }
)


def resolve_handler(kind: HandlerKind | str | None) -> Handler:
    """Return the handler for a kind, or the fallback for anything unmapped.

    Args:
        kind: A HandlerKind, its string value, or None.

    Returns:
        A handler; never raises.
    """
    if kind is None:
        return FALLBACK_HANDLER
    try:
        kind = HandlerKind(kind)
    except ValueError:
        return FALLBACK_HANDLER
    return HANDLER_DISPATCH.get(kind, FALLBACK_HANDLER)
