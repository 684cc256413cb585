"""Conversion family: fixed-factor unit conversions and number bases.

Each unit pair is one-directional, from the imperial field the calculator
collects to its metric (and sometimes other imperial) equivalents.
"""

from __future__ import annotations

from typing import Final

from freecalc.calc import numeric
from freecalc.calc.coercion import coerce_int_radix, to_radix
from freecalc.calc.formatting import to_fixed
from freecalc.calc.handlers.base import (
    CONVERSION_COMPLETE,
    CalculatorInputs,
    integer,
    num,
    number,
    text_field,
)
from freecalc.calc.registry import UnitSystem

KM_PER_MILE: Final[float] = 1.60934
METERS_PER_FOOT: Final[float] = 0.3048
KG_PER_POUND: Final[float] = 0.453592
CM_PER_INCH: Final[float] = 2.54
LITERS_PER_GALLON: Final[float] = 3.78541
FEET_PER_SECOND_PER_MPH: Final[float] = 1.46667
SQ_METERS_PER_SQ_FOOT: Final[float] = 0.092903
KPA_PER_PSI: Final[float] = 6.89476
JOULES_PER_BTU: Final[float] = 1055.06
WATTS_PER_HORSEPOWER: Final[float] = 745.7

FRACTION_TOLERANCE: Final[float] = 1.0e-6
MAX_DENOMINATOR: Final[int] = 10_000

_FIXED_BASES: Final[dict[str, int]] = {
    "binary-calculator": 2,
    "hex-calculator": 16,
    "octal-calculator": 8,
}


def decimal_to_fraction(decimal: float) -> tuple[float, int]:
    """Find the smallest denominator (up to 10000) approximating ``decimal``.

    Returns:
        ``(numerator, denominator)``; stops at the first denominator whose
        error is within 1e-6, or at 10000.
    """
    numerator: float = 1
    denominator = 1
    error = abs(decimal - numerator / denominator)
    while error > FRACTION_TOLERANCE and denominator < MAX_DENOMINATOR:
        denominator += 1
        numerator = numeric.round_half_up(decimal * denominator)
        error = abs(decimal - numerator / denominator)
    return numerator, denominator


def _convert_base(raw: str, from_base: int, to_base: int) -> str:
    if not (2 <= from_base <= 36 and 2 <= to_base <= 36):
        return "Base must be between 2 and 36"
    value = coerce_int_radix(raw, from_base)
    if value is None:
        return f"{raw} is not a valid base {from_base} number"
    return f"{raw} (base {from_base}) = {to_radix(value, to_base).upper()} (base {to_base})"


def handle_conversion(
    calculator_id: str,
    inputs: CalculatorInputs,
    unit_system: UnitSystem = UnitSystem.IMPERIAL,
) -> str:
    """Compute a conversion-family calculator."""
    if calculator_id == "decimal-to-fraction":
        decimal = number(inputs, "decimal")
        numerator, denominator = decimal_to_fraction(decimal)
        return f"{num(decimal)} = {num(numerator)}/{denominator}"

    if calculator_id == "fraction-to-decimal":
        numerator = number(inputs, "numerator")
        denominator = number(inputs, "denominator", 1)
        return (
            f"{num(numerator)}/{num(denominator)} = "
            f"{to_fixed(numeric.div(numerator, denominator), 6)}"
        )

    if calculator_id in ("base-converter", "binary-converter"):
        return _convert_base(
            text_field(inputs, "number", "0"),
            integer(inputs, "fromBase", 10),
            integer(inputs, "toBase", 10),
        )

    if calculator_id in _FIXED_BASES:
        radix = _FIXED_BASES[calculator_id]
        raw = text_field(inputs, "number", "0")
        operation = text_field(inputs, "operation", "to-base").strip().lower()
        if operation in ("to-decimal", "todecimal", "decimal"):
            return _convert_base(raw, radix, 10)
        return _convert_base(raw, 10, radix)

    if calculator_id in ("temperature-converter", "celsius-to-fahrenheit"):
        fahrenheit = number(inputs, "fahrenheit", 32)
        celsius = (fahrenheit - 32) * 5 / 9
        kelvin = celsius + 273.15
        return f"{num(fahrenheit)}°F = {to_fixed(celsius, 2)}°C = {to_fixed(kelvin, 2)}K"

    if calculator_id in ("length-converter", "feet-to-meters"):
        feet = number(inputs, "feet")
        return (
            f"{num(feet)} ft = {to_fixed(feet * METERS_PER_FOOT, 2)} m = "
            f"{to_fixed(feet * 12)} in"
        )

    if calculator_id == "miles-to-km":
        miles = number(inputs, "miles")
        return f"{num(miles)} miles = {to_fixed(miles * KM_PER_MILE, 2)} km"

    if calculator_id in ("weight-converter", "kg-to-lbs"):
        pounds = number(inputs, "pounds")
        return (
            f"{num(pounds)} lbs = {to_fixed(pounds * KG_PER_POUND, 2)} kg = "
            f"{to_fixed(pounds * 16)} oz"
        )

    if calculator_id == "cm-to-inches":
        inches = number(inputs, "inches")
        return f"{num(inches)} in = {to_fixed(inches * CM_PER_INCH, 2)} cm"

    if calculator_id in ("volume-converter", "gallons-to-liters"):
        gallons = number(inputs, "gallons")
        return (
            f"{num(gallons)} gal = {to_fixed(gallons * LITERS_PER_GALLON, 2)} L = "
            f"{to_fixed(gallons * 4, 2)} qt"
        )

    if calculator_id == "speed-converter":
        mph = number(inputs, "mph")
        return (
            f"{num(mph)} mph = {to_fixed(mph * KM_PER_MILE, 2)} km/h = "
            f"{to_fixed(mph * FEET_PER_SECOND_PER_MPH, 2)} ft/s"
        )

    if calculator_id == "area-converter":
        sqft = number(inputs, "sqft")
        return f"{num(sqft)} sq ft = {to_fixed(sqft * SQ_METERS_PER_SQ_FOOT, 2)} sq m"

    if calculator_id == "time-converter":
        hours = number(inputs, "hours")
        return f"{num(hours)} hours = {to_fixed(hours * 60)} min = {to_fixed(hours * 3600)} sec"

    if calculator_id == "pressure-converter":
        psi = number(inputs, "psi")
        return f"{num(psi)} PSI = {to_fixed(psi * KPA_PER_PSI, 2)} kPa"

    if calculator_id == "energy-converter":
        btus = number(inputs, "btus")
        return f"{num(btus)} BTU = {to_fixed(btus * JOULES_PER_BTU, 2)} J"

    if calculator_id == "power-converter":
        watts = number(inputs, "watts")
        return f"{num(watts)} W = {to_fixed(watts / WATTS_PER_HORSEPOWER, 3)} HP"

    if calculator_id == "pixels-to-inches":
        pixels = number(inputs, "pixels")
        dpi = number(inputs, "dpi", 96)
        inches = numeric.div(pixels, dpi)
        return f"{num(pixels)} pixels at {num(dpi)} DPI = {to_fixed(inches, 2)} inches"

    return CONVERSION_COMPLETE
