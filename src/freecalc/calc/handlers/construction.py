"""Construction family: areas, fill volumes, paint, tile, roofing and fencing.

Room and lot dimensions are in feet, fill depth and tile sizes in inches.
"""

from __future__ import annotations

import math
from typing import Final

from freecalc.calc import numeric
from freecalc.calc.formatting import to_fixed
from freecalc.calc.handlers.base import CALCULATION_COMPLETE, CalculatorInputs, num, number
from freecalc.calc.registry import UnitSystem

SQFT_PER_GALLON: Final[int] = 350
WASTE_FACTOR: Final[float] = 0.10
CUBIC_FEET_PER_YARD: Final[int] = 27
SQ_INCHES_PER_SQ_FOOT: Final[int] = 144
SQFT_PER_ROOFING_SQUARE: Final[int] = 100
FENCE_PANEL_FEET: Final[int] = 8

_FILL_CALCULATORS = frozenset(
    {"concrete-calculator", "gravel-calculator", "mulch-calculator", "soil-calculator"}
)


def _ceil(value: float) -> str:
    return num(numeric.ceil(value))


def _floor_area(inputs: CalculatorInputs) -> float:
    length = number(inputs, "length") if inputs.get("length") else number(inputs, "roomLength")
    width = number(inputs, "width") if inputs.get("width") else number(inputs, "roomWidth")
    return length * width


def handle_construction(
    calculator_id: str,
    inputs: CalculatorInputs,
    unit_system: UnitSystem = UnitSystem.IMPERIAL,
) -> str:
    """Compute a construction calculator."""
    if calculator_id == "square-footage-calculator":
        area = number(inputs, "length") * number(inputs, "width")
        return f"Square Footage: {to_fixed(area, 2)} sq ft"

    if calculator_id == "paint-calculator":
        coats = number(inputs, "coats", 1)
        gallons = number(inputs, "sqft") * coats / SQFT_PER_GALLON
        return f"Paint Needed: {_ceil(gallons)} gallon(s) for {num(coats)} coat(s)"

    if calculator_id in _FILL_CALCULATORS:
        # depth is in inches
        cubic_feet = number(inputs, "length") * number(inputs, "width") * number(inputs, "depth") / 12
        return (
            f"Volume: {to_fixed(cubic_feet, 2)} cu ft | "
            f"{to_fixed(cubic_feet / CUBIC_FEET_PER_YARD, 2)} cu yd"
        )

    if calculator_id in ("flooring-calculator", "tile-calculator"):
        area = _floor_area(inputs)
        with_waste = area + area * WASTE_FACTOR
        result = f"Area: {to_fixed(area, 2)} sq ft | With 10% waste: {to_fixed(with_waste, 2)} sq ft"
        tile_area = number(inputs, "tileLength") * number(inputs, "tileWidth")
        if calculator_id == "tile-calculator" and tile_area > 0:
            tiles = with_waste * SQ_INCHES_PER_SQ_FOOT / tile_area
            result += f" | Tiles Needed: {_ceil(tiles)}"
        return result

    if calculator_id == "roof-calculator":
        footprint = number(inputs, "length") * number(inputs, "width")
        # pitch is rise in inches per 12 inches of run
        slope_factor = math.hypot(1.0, number(inputs, "pitch") / 12)
        area = footprint * slope_factor
        return (
            f"Roof Area: {to_fixed(area, 2)} sq ft | "
            f"Roofing Squares: {to_fixed(area / SQFT_PER_ROOFING_SQUARE, 2)}"
        )

    if calculator_id == "fence-calculator":
        perimeter = number(inputs, "perimeter")
        height = number(inputs, "height", 6)
        panels = numeric.ceil(perimeter / FENCE_PANEL_FEET)
        return (
            f"Panels: {num(panels)} | Posts: {num(panels + 1)} | "
            f"Fence Area: {to_fixed(perimeter * height, 2)} sq ft"
        )

    return CALCULATION_COMPLETE
