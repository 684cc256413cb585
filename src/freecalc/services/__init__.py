"""Services built on the calculation engine and formula sandbox."""

from freecalc.services.custom_calculator import (
    CustomCalculatorError,
    CustomCalculatorRequest,
    CustomCalculatorResult,
    execute_custom_calculator,
)

__all__ = [
    "CustomCalculatorError",
    "CustomCalculatorRequest",
    "CustomCalculatorResult",
    "execute_custom_calculator",
]
