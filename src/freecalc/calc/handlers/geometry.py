"""Geometry family: plane figures, solids and screen dimensions."""

from __future__ import annotations

import math
from collections.abc import Callable

from freecalc.calc import numeric
from freecalc.calc.coercion import coerce
from freecalc.calc.formatting import to_fixed
from freecalc.calc.handlers.base import CALCULATION_COMPLETE, CalculatorInputs, number, text_field
from freecalc.calc.handlers.statistics import parse_values
from freecalc.calc.registry import UnitSystem

# 231 cubic inches per US gallon
CUBIC_INCHES_PER_GALLON = 231

_AREAS: dict[str, Callable[[float, float], float]] = {
    "rectangle": lambda a, b: a * b,
    "square": lambda a, _: a * a,
    "circle": lambda r, _: math.pi * r * r,
    "triangle": lambda base, height: 0.5 * base * height,
    "parallelogram": lambda base, height: base * height,
    "ellipse": lambda a, b: math.pi * a * b,
}

_VOLUMES: dict[str, Callable[[float, float, float], float]] = {
    "box": lambda a, b, c: a * b * c,
    "cube": lambda a, _b, _c: a * a * a,
    "cylinder": lambda r, h, _: math.pi * r * r * h,
    "sphere": lambda r, _b, _c: 4 / 3 * math.pi * r * r * r,
    "cone": lambda r, h, _: math.pi * r * r * h / 3,
    "pyramid": lambda a, b, h: a * b * h / 3,
}


def _area(inputs: CalculatorInputs) -> str:
    shape = text_field(inputs, "shape", "rectangle").strip().lower()
    formula = _AREAS.get(shape)
    if formula is None:
        return f"Unknown shape: {shape}. Use one of: {', '.join(_AREAS)}"
    area = formula(number(inputs, "dimension1"), number(inputs, "dimension2"))
    return f"Area: {to_fixed(area, 2)} square units"


def _volume(inputs: CalculatorInputs) -> str:
    shape = text_field(inputs, "shape", "box").strip().lower()
    formula = _VOLUMES.get(shape)
    if formula is None:
        return f"Unknown shape: {shape}. Use one of: {', '.join(_VOLUMES)}"
    volume = formula(
        number(inputs, "dimension1"),
        number(inputs, "dimension2"),
        number(inputs, "dimension3"),
    )
    return f"Volume: {to_fixed(volume, 2)} cubic units"


def _perimeter(inputs: CalculatorInputs) -> str:
    shape = text_field(inputs, "shape", "polygon").strip().lower()
    sides = parse_values(inputs.get("sides"))
    if not sides:
        return "Please enter side lengths separated by commas"

    if shape == "circle":
        return f"Circumference: {to_fixed(2 * math.pi * sides[0], 2)}"
    if shape == "square":
        perimeter = 4 * sides[0]
    elif shape == "rectangle":
        width = sides[1] if len(sides) > 1 else sides[0]
        perimeter = 2 * (sides[0] + width)
    else:
        perimeter = 0.0
        for side in sides:
            perimeter += side
    return f"Perimeter: {to_fixed(perimeter, 2)}"


def handle_geometry(
    calculator_id: str,
    inputs: CalculatorInputs,
    unit_system: UnitSystem = UnitSystem.NEUTRAL,
) -> str:
    """Compute a geometry-family calculator."""
    if calculator_id == "circle-calculator":
        radius = number(inputs, "radius")
        area = math.pi * radius * radius
        circumference = 2 * math.pi * radius
        return (
            f"Area: {to_fixed(area, 2)} | Circumference: {to_fixed(circumference, 2)} | "
            f"Diameter: {to_fixed(2 * radius, 2)}"
        )

    if calculator_id == "triangle-calculator":
        a = number(inputs, "side1")
        b = number(inputs, "side2")
        c = number(inputs, "side3")
        s = (a + b + c) / 2
        # Heron's formula; an impossible triangle yields NaN
        area = numeric.sqrt(s * (s - a) * (s - b) * (s - c))
        return f"Perimeter: {to_fixed(a + b + c, 2)} | Area: {to_fixed(area, 2)}"

    if calculator_id == "pythagorean-theorem-calculator":
        a = number(inputs, "a")
        b = number(inputs, "b")
        return f"Hypotenuse (c): {to_fixed(numeric.sqrt(a * a + b * b), 4)}"

    if calculator_id == "aquarium-calculator":
        cubic_inches = number(inputs, "length") * number(inputs, "width") * number(inputs, "height")
        return f"Volume: {to_fixed(cubic_inches / CUBIC_INCHES_PER_GALLON, 1)} gallons"

    if calculator_id == "screen-size-calculator":
        diagonal = number(inputs, "diagonal")
        parts = text_field(inputs, "ratio", "16:9").split(":")
        w = coerce(parts[0], numeric.NAN)
        h = coerce(parts[1] if len(parts) > 1 else None, numeric.NAN)
        factor = numeric.div(diagonal, numeric.sqrt(w * w + h * h))
        return f'Dimensions: {to_fixed(w * factor, 1)}" × {to_fixed(h * factor, 1)}"'

    if calculator_id == "area-calculator":
        return _area(inputs)
    if calculator_id == "volume-calculator":
        return _volume(inputs)
    if calculator_id == "perimeter-calculator":
        return _perimeter(inputs)

    return CALCULATION_COMPLETE
