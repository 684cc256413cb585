"""Tax and discount family: tips, discounts, markups, margins and taxes."""

from __future__ import annotations

from collections.abc import Callable

from freecalc.calc import numeric
from freecalc.calc.formatting import to_fixed
from freecalc.calc.handlers.base import CALCULATION_COMPLETE, CalculatorInputs, money, num, number
from freecalc.calc.registry import UnitSystem


def _tip(inputs: CalculatorInputs) -> str:
    bill = number(inputs, "bill")
    tip = bill * number(inputs, "tip", 15) / 100
    total = bill + tip
    per_person = numeric.div(total, number(inputs, "people", 1))
    return f"Tip: {money(tip)} | Total: {money(total)} | Per Person: {money(per_person)}"


def _discount(inputs: CalculatorInputs) -> str:
    original = number(inputs, "original")
    discount = number(inputs, "discount")
    amount = original * discount / 100
    return (
        f"Discount: {money(amount)} | Final Price: {money(original - amount)} | "
        f"Save: {num(discount)}%"
    )


def _markup(inputs: CalculatorInputs) -> str:
    cost = number(inputs, "cost")
    price = cost * (1 + number(inputs, "markup") / 100)
    return f"Selling Price: {money(price)} | Markup: {money(price - cost)}"


def _margin(inputs: CalculatorInputs) -> str:
    revenue = number(inputs, "revenue")
    profit = revenue - number(inputs, "cost")
    margin = numeric.div(profit, revenue) * 100
    return f"Profit: {money(profit)} | Margin: {to_fixed(margin, 2)}%"


def _sales_tax(rate_field: str) -> Callable[[CalculatorInputs], str]:
    def compute(inputs: CalculatorInputs) -> str:
        price = number(inputs, "price")
        tax = price * number(inputs, rate_field) / 100
        return f"Tax: {money(tax)} | Total: {money(price + tax)}"

    return compute


def _property_tax(inputs: CalculatorInputs) -> str:
    tax = number(inputs, "value") * number(inputs, "rate") / 100
    return f"Annual Property Tax: {money(tax)} | Monthly: {money(tax / 12)}"


def _commission(inputs: CalculatorInputs) -> str:
    sales = number(inputs, "sales")
    rate = number(inputs, "rate")
    return f"Commission: {money(sales * rate / 100)} ({num(rate)}% of {money(sales)})"


def _closing_costs(inputs: CalculatorInputs) -> str:
    price = number(inputs, "price")
    rate = number(inputs, "rate", 3)
    return f"Estimated Closing Costs: {money(price * rate / 100)} ({num(rate)}% of home price)"


_CALCULATORS: dict[str, Callable[[CalculatorInputs], str]] = {
    "tip-calculator": _tip,
    "discount-calculator": _discount,
    "markup-calculator": _markup,
    "margin-calculator": _margin,
    "sales-tax-calculator": _sales_tax("taxRate"),
    "vat-calculator": _sales_tax("vatRate"),
    "property-tax-calculator": _property_tax,
    "commission-calculator": _commission,
    "closing-costs-calculator": _closing_costs,
}


def handle_tax_discount(
    calculator_id: str,
    inputs: CalculatorInputs,
    unit_system: UnitSystem = UnitSystem.NEUTRAL,
) -> str:
    """Compute a tax-and-discount calculator."""
    calculator = _CALCULATORS.get(calculator_id)
    if calculator is None:
        return CALCULATION_COMPLETE
    return calculator(inputs)
