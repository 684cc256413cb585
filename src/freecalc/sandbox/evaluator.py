"""Tree-walking evaluator for parsed formulas.

Arithmetic follows IEEE-754: division by zero gives an infinity or NaN and
domain errors give NaN. Deciding whether such a value is acceptable is the
caller's job. Booleans from comparisons and logic count as 1 and 0 in
arithmetic.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Final

from freecalc.calc import numeric
from freecalc.sandbox.errors import EvaluationError
from freecalc.sandbox.parser import (
    Arithmetic,
    Call,
    Comparison,
    Conditional,
    Factorial,
    Logical,
    Name,
    Node,
    Number,
    Power,
    Unary,
)

Value = float | bool

CONSTANTS: Final[dict[str, Value]] = {
    "pi": math.pi,
    "PI": math.pi,
    "e": math.e,
    "E": math.e,
    "true": True,
    "false": False,
}

MAX_FACTORIAL_ARGUMENT: Final[int] = 170
MAX_ROUND_DIGITS: Final[int] = 15


def to_number(value: Value) -> float:
    return float(value)


def is_truthy(value: Value) -> bool:
    """Booleans as-is; numbers are true unless zero or NaN."""
    if isinstance(value, bool):
        return value
    return value != 0 and not math.isnan(value)


def _round(x: float, digits: float = 0) -> float:
    """Round half away from zero, optionally to ``digits`` decimals."""
    if not math.isfinite(x):
        return x
    if not math.isfinite(digits) or digits != int(digits) or not 0 <= digits <= MAX_ROUND_DIGITS:
        raise EvaluationError(
            f"round() digits must be an integer between 0 and {MAX_ROUND_DIGITS}"
        )
    try:
        quantum = Decimal(1).scaleb(-int(digits))
        rounded = Decimal(repr(x)).quantize(quantum, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return x
    return float(rounded)


def _factorial(x: float) -> float:
    if not math.isfinite(x) or x != int(x) or x < 0:
        raise EvaluationError("factorial requires a non-negative integer")
    if x > MAX_FACTORIAL_ARGUMENT:
        raise EvaluationError(
            f"factorial requires an integer between 0 and {MAX_FACTORIAL_ARGUMENT}"
        )
    return float(math.factorial(int(x)))


def _log(x: float, base: float | None = None) -> float:
    if base is None:
        return numeric.log(x)
    return numeric.div(numeric.log(x), numeric.log(base))


def _extreme(pick: Callable[..., float]) -> Callable[..., float]:
    def compute(*values: float) -> float:
        if any(math.isnan(v) for v in values):
            return numeric.NAN
        return pick(values)

    return compute


def _sign(x: float) -> float:
    if math.isnan(x) or x == 0:
        return x
    return math.copysign(1.0, x)


def _trunc(x: float) -> float:
    return x if not math.isfinite(x) else float(math.trunc(x))


FUNCTIONS: Final[dict[str, Callable[..., float]]] = {
    "abs": abs,
    "ceil": numeric.ceil,
    "floor": numeric.floor,
    "round": _round,
    "sqrt": numeric.sqrt,
    "cbrt": numeric.cbrt,
    "pow": numeric.power,
    "exp": numeric.exp,
    "log": _log,
    "log10": numeric.log10,
    "log2": numeric.log2,
    "min": _extreme(min),
    "max": _extreme(max),
    "sin": numeric.sin,
    "cos": numeric.cos,
    "tan": numeric.tan,
    "asin": numeric.asin,
    "acos": numeric.acos,
    "atan": numeric.atan,
    "sign": _sign,
    "trunc": _trunc,
}

_COMPARE: Final[dict[str, Callable[[float, float], bool]]] = {
    "<": lambda a, b: a < b,
    "<=": lambda a, b: a <= b,
    ">": lambda a, b: a > b,
    ">=": lambda a, b: a >= b,
    "==": lambda a, b: a == b,
    "!=": lambda a, b: a != b,
}


def evaluate(node: Node, scope: Mapping[str, float]) -> Value:
    """Evaluate a syntax tree against a variable scope.

    Args:
        node: Root of the parsed formula.
        scope: Variable values; these shadow the named constants.

    Returns:
        A float (possibly NaN or infinite) or a bool.

    Raises:
        EvaluationError: On an unbound name or an invalid function argument.
    """
    if isinstance(node, Number):
        return node.value

    if isinstance(node, Name):
        if node.name in scope:
            return scope[node.name]
        if node.name in CONSTANTS:
            return CONSTANTS[node.name]
        raise EvaluationError(f"Undefined symbol {node.name}")

    if isinstance(node, Arithmetic):
        result = to_number(evaluate(node.first, scope))
        for operator, operand in node.rest:
            value = to_number(evaluate(operand, scope))
            if operator == "+":
                result = result + value
            elif operator == "-":
                result = result - value
            elif operator == "*":
                result = result * value
            else:
                result = numeric.div(result, value)
        return result

    if isinstance(node, Unary):
        operand = evaluate(node.operand, scope)
        if node.operator == "not":
            return not is_truthy(operand)
        return -to_number(operand) if node.operator == "-" else to_number(operand)

    if isinstance(node, Power):
        base = to_number(evaluate(node.base, scope))
        return numeric.power(base, to_number(evaluate(node.exponent, scope)))

    if isinstance(node, Factorial):
        return _factorial(to_number(evaluate(node.operand, scope)))

    if isinstance(node, Comparison):
        left = to_number(evaluate(node.operands[0], scope))
        for operator, operand in zip(node.operators, node.operands[1:]):
            right = to_number(evaluate(operand, scope))
            if not _COMPARE[operator](left, right):
                return False
            left = right
        return True

    if isinstance(node, Logical):
        for operand in node.operands:
            truthy = is_truthy(evaluate(operand, scope))
            if node.operator == "and" and not truthy:
                return False
            if node.operator == "or" and truthy:
                return True
        return node.operator == "and"

    if isinstance(node, Conditional):
        branch = node.if_true if is_truthy(evaluate(node.test, scope)) else node.if_false
        return evaluate(branch, scope)

    if isinstance(node, Call):
        arguments = [to_number(evaluate(argument, scope)) for argument in node.arguments]
        return FUNCTIONS[node.function](*arguments)

    raise EvaluationError(f"Unsupported expression node {type(node).__name__}")
