"""Arithmetic family: expressions, fractions, ratios and everyday one-liners."""

from __future__ import annotations

import math
import re
from collections.abc import Callable

from freecalc.calc import numeric
from freecalc.calc.coercion import coerce
from freecalc.calc.formatting import to_fixed, to_precision
from freecalc.calc.handlers.base import (
    CALCULATION_COMPLETE,
    CalculatorInputs,
    integer,
    money,
    num,
    number,
    text_field,
)
from freecalc.calc.registry import UnitSystem
from freecalc.sandbox.errors import FormulaRejectedError
from freecalc.sandbox.evaluator import evaluate
from freecalc.sandbox.parser import parse

_EXPRESSION_CHARS = re.compile(r"[0-9+\-*/().\s]*")

GOLDEN_RATIO = 1.618033988749


def _expression(inputs: CalculatorInputs) -> str:
    expression = inputs.get("expression") or ""
    if not expression:
        return "Please enter an expression to calculate"
    if _EXPRESSION_CHARS.fullmatch(expression) is None:
        return "Invalid characters in expression. Use only numbers and operators (+, -, *, /, ())"

    try:
        result = evaluate(parse(expression), {})
    except FormulaRejectedError:
        return "Invalid expression. Please check your input."

    if isinstance(result, bool) or not math.isfinite(result):
        return "Invalid expression"
    return f"{expression} = {num(result)}"


def _ratio(inputs: CalculatorInputs) -> str:
    a = number(inputs, "a")
    b = number(inputs, "b")
    divisor = numeric.gcd(a, b)
    return (
        f"Simplified Ratio: {to_fixed(numeric.div(a, divisor))}:"
        f"{to_fixed(numeric.div(b, divisor))}"
    )


def _fraction(inputs: CalculatorInputs) -> str:
    num1 = number(inputs, "numerator1")
    den1 = number(inputs, "denominator1", 1)
    num2 = number(inputs, "numerator2")
    den2 = number(inputs, "denominator2", 1)
    op = text_field(inputs, "operation", "add")

    if op == "add":
        result_num, result_den = num1 * den2 + num2 * den1, den1 * den2
    elif op == "subtract":
        result_num, result_den = num1 * den2 - num2 * den1, den1 * den2
    elif op == "multiply":
        result_num, result_den = num1 * num2, den1 * den2
    else:
        result_num, result_den = num1 * den2, den1 * num2

    divisor = numeric.gcd(abs(result_num), abs(result_den))
    return (
        f"Result: {to_fixed(numeric.div(result_num, divisor))}/"
        f"{to_fixed(numeric.div(result_den, divisor))} = "
        f"{to_fixed(numeric.div(result_num, result_den), 4)}"
    )


def _rounding(inputs: CalculatorInputs) -> str:
    value = number(inputs, "number")
    return f"Rounded: {to_fixed(value, integer(inputs, 'decimals', 0))}"


def _absolute_value(inputs: CalculatorInputs) -> str:
    value = number(inputs, "number")
    return f"|{num(value)}| = {num(abs(value))}"


def _modulo(inputs: CalculatorInputs) -> str:
    a = number(inputs, "a")
    b = number(inputs, "b", 1)
    return f"{num(a)} mod {num(b)} = {num(numeric.fmod(a, b))}"


def _mixed_number(inputs: CalculatorInputs) -> str:
    whole = number(inputs, "whole")
    numerator = number(inputs, "numerator")
    denominator = number(inputs, "denominator", 1)
    improper = whole * denominator + numerator
    return (
        f"Mixed: {num(whole)} {num(numerator)}/{num(denominator)} = "
        f"Improper: {num(improper)}/{num(denominator)} = "
        f"{to_fixed(numeric.div(improper, denominator), 4)}"
    )


def _sig_figs(inputs: CalculatorInputs) -> str:
    value = number(inputs, "number")
    sigfigs = integer(inputs, "sigfigs", 3)
    return f"{num(value)} with {sigfigs} sig figs = {to_precision(value, sigfigs)}"


def _fuel_economy(inputs: CalculatorInputs) -> str:
    mpg = numeric.div(number(inputs, "miles"), number(inputs, "gallons", 1))
    return f"Fuel Economy: {to_fixed(mpg, 1)} MPG"


def _dog_age(inputs: CalculatorInputs) -> str:
    age = number(inputs, "dogAge")
    human = age * 10.5 if age <= 2 else 21 + (age - 2) * 4
    return f"Dog Age: {num(age)} years = Human Age: {to_fixed(human)} years"


def _cat_age(inputs: CalculatorInputs) -> str:
    age = number(inputs, "catAge")
    if age == 1:
        human = 15.0
    elif age == 2:
        human = 24.0
    else:
        human = 24 + (age - 2) * 4
    return f"Cat Age: {num(age)} years = Human Age: {to_fixed(human)} years"


def _pet_food(inputs: CalculatorInputs) -> str:
    weight = number(inputs, "weight")
    activity = text_field(inputs, "activity", "moderate")
    multiplier = {"low": 0.8, "high": 1.2}.get(activity, 1.0)
    return f"Daily Food: {to_fixed(weight * 0.02 * multiplier, 1)} cups"


def _party(inputs: CalculatorInputs) -> str:
    return f"Total Cost: {money(number(inputs, 'people') * number(inputs, 'costPerPerson'))}"


def _scale_recipe(original_key: str, desired_key: str) -> Callable[[CalculatorInputs], str]:
    def scale(inputs: CalculatorInputs) -> str:
        ratio = numeric.div(number(inputs, desired_key, 1), number(inputs, original_key, 1))
        return f"Multiply all ingredients by {to_fixed(ratio, 2)}"

    return scale


def _cooking_time(inputs: CalculatorInputs) -> str:
    # 20 minutes per pound
    minutes = number(inputs, "weight") * 20
    return f"Cooking Time: {to_fixed(minutes)} minutes at {num(number(inputs, 'temperature'))}°F"


def _aspect_ratio(inputs: CalculatorInputs) -> str:
    width = number(inputs, "width")
    height = number(inputs, "height")
    divisor = numeric.gcd(width, height)
    return (
        f"Aspect Ratio: {to_fixed(numeric.div(width, divisor))}:"
        f"{to_fixed(numeric.div(height, divisor))}"
    )


def _dpi(inputs: CalculatorInputs) -> str:
    width = number(inputs, "width")
    height = number(inputs, "height")
    diagonal_pixels = numeric.sqrt(width * width + height * height)
    return f"DPI: {to_fixed(numeric.div(diagonal_pixels, number(inputs, 'diagonal', 1)))}"


def _golden_ratio(inputs: CalculatorInputs) -> str:
    value = number(inputs, "value")
    return f"Golden Ratio: {num(value)} × 1.618 = {to_fixed(value * GOLDEN_RATIO, 2)}"


def _btu(inputs: CalculatorInputs) -> str:
    # 20 BTU per square foot
    return f"BTU Needed: {to_fixed(number(inputs, 'sqft') * 20)} BTU/hr"


def _air_conditioner(inputs: CalculatorInputs) -> str:
    # one ton of cooling per 600 square feet
    tons = number(inputs, "sqft") / 600
    return f"AC Size: {to_fixed(tons, 1)} tons ({to_fixed(tons * 12000)} BTU)"


def _electricity(inputs: CalculatorInputs) -> str:
    kwh = number(inputs, "watts") * number(inputs, "hours") / 1000
    cost = kwh * number(inputs, "rate", 0.12)
    return f"Energy: {to_fixed(kwh, 2)} kWh | Cost: {money(cost)}"


def _odds(inputs: CalculatorInputs) -> str:
    parts = text_field(inputs, "odds", "1:1").split(":")
    favorable = coerce(parts[0], numeric.NAN)
    against = coerce(parts[1] if len(parts) > 1 else None, numeric.NAN)
    probability = numeric.div(favorable, favorable + against)
    return f"Probability: {to_fixed(probability * 100, 2)}%"


_CALCULATORS: dict[str, Callable[[CalculatorInputs], str]] = {
    "basic-calculator": _expression,
    "scientific-calculator": _expression,
    "ratio-calculator": _ratio,
    "fraction-calculator": _fraction,
    "rounding-calculator": _rounding,
    "absolute-value-calculator": _absolute_value,
    "modulo-calculator": _modulo,
    "mixed-number-calculator": _mixed_number,
    "sig-fig-calculator": _sig_figs,
    "gas-mileage-calculator": _fuel_economy,
    "fuel-calculator": _fuel_economy,
    "dog-age-calculator": _dog_age,
    "cat-age-calculator": _cat_age,
    "pet-food-calculator": _pet_food,
    "party-calculator": _party,
    "recipe-converter": _scale_recipe("originalServings", "desiredServings"),
    "cooking-time-calculator": _cooking_time,
    "batch-calculator": _scale_recipe("originalBatch", "desiredBatch"),
    "aspect-ratio-calculator": _aspect_ratio,
    "dpi-calculator": _dpi,
    "golden-ratio-calculator": _golden_ratio,
    "btu-calculator": _btu,
    "air-conditioner-calculator": _air_conditioner,
    "electricity-calculator": _electricity,
    "odds-calculator": _odds,
}


def handle_arithmetic(
    calculator_id: str,
    inputs: CalculatorInputs,
    unit_system: UnitSystem = UnitSystem.NEUTRAL,
) -> str:
    """Compute an arithmetic-family calculator."""
    calculator = _CALCULATORS.get(calculator_id)
    if calculator is None:
        return CALCULATION_COMPLETE
    return calculator(inputs)
