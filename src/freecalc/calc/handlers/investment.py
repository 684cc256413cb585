"""Investment family: growth of savings, interest, returns and yields."""

from __future__ import annotations

from typing import Final

from freecalc.calc import numeric
from freecalc.calc.formatting import to_fixed
from freecalc.calc.handlers.base import CALCULATION_COMPLETE, CalculatorInputs, money, num, number
from freecalc.calc.registry import UnitSystem

SAVINGS_CALCULATORS: Final[frozenset[str]] = frozenset(
    {
        "savings-calculator",
        "investment-calculator",
        "retirement-calculator",
        "401k-calculator",
        "roth-ira-calculator",
        "college-savings-calculator",
    }
)

# 4% safe withdrawal rate
FIRE_MULTIPLE: Final[int] = 25
MAX_FIRE_YEARS: Final[int] = 100


def future_value(initial: float, monthly: float, monthly_rate: float, months: float) -> float:
    """FV = P(1+r)^n + C((1+r)^n - 1)/r, or P + C*n at a zero rate."""
    if monthly_rate == 0:
        return initial + monthly * months
    growth = numeric.power(1 + monthly_rate, months)
    return initial * growth + monthly * numeric.div(growth - 1, monthly_rate)


def years_to_target(target: float, yearly_savings: float, rate: float) -> int | None:
    """Years of saving ``yearly_savings`` at ``rate`` until ``target`` is reached."""
    balance = 0.0
    for year in range(1, MAX_FIRE_YEARS + 1):
        balance = balance * (1 + rate) + yearly_savings
        if balance >= target:
            return year
    return None


def _savings(inputs: CalculatorInputs) -> str:
    initial = number(inputs, "initial")
    monthly = number(inputs, "monthly")
    rate = number(inputs, "rate") / 100 / 12
    months = number(inputs, "years") * 12

    value = future_value(initial, monthly, rate, months)
    contributions = initial + monthly * months
    return (
        f"Future Value: {money(value)} | Contributions: {money(contributions)} | "
        f"Earnings: {money(value - contributions)}"
    )


def _annuity(inputs: CalculatorInputs) -> str:
    payment = number(inputs, "payment")
    rate = number(inputs, "rate") / 100
    periods = number(inputs, "periods")

    value = future_value(0.0, payment, rate, periods)
    paid = payment * periods
    return (
        f"Future Value: {money(value)} | Total Payments: {money(paid)} | "
        f"Interest Earned: {money(value - paid)}"
    )


def _fire(inputs: CalculatorInputs) -> str:
    target = number(inputs, "expenses") * FIRE_MULTIPLE
    savings = number(inputs, "savings")
    rate = number(inputs, "rate", 7) / 100
    if savings <= 0:
        return f"FIRE Number: {money(target)} | Annual savings must be positive to reach it"

    years = years_to_target(target, savings, rate)
    if years is None:
        return f"FIRE Number: {money(target)} | Years to FIRE: more than {MAX_FIRE_YEARS}"
    return f"FIRE Number: {money(target)} | Years to FIRE: {years}"


def _bond(inputs: CalculatorInputs) -> str:
    face_value = number(inputs, "faceValue", 1000)
    coupon = number(inputs, "coupon")
    years = number(inputs, "years")

    annual = face_value * coupon / 100
    income = annual * years
    return (
        f"Annual Coupon: {money(annual)} | Total Coupon Income: {money(income)} | "
        f"Total Return: {money(income + face_value)}"
    )


def handle_investment(
    calculator_id: str,
    inputs: CalculatorInputs,
    unit_system: UnitSystem = UnitSystem.NEUTRAL,
) -> str:
    """Compute an investment-family calculator."""
    if calculator_id == "simple-interest-calculator":
        principal = number(inputs, "principal")
        rate = number(inputs, "rate") / 100
        interest = principal * rate * number(inputs, "time")
        return f"Interest: {money(interest)} | Total: {money(principal + interest)}"

    if calculator_id in ("compound-interest-calculator", "interest-calculator"):
        principal = number(inputs, "principal")
        rate = number(inputs, "rate") / 100
        time = number(inputs, "time")
        frequency = number(inputs, "frequency", 12)
        amount = principal * numeric.power(1 + numeric.div(rate, frequency), frequency * time)
        return f"Final Amount: {money(amount)} | Interest: {money(amount - principal)}"

    if calculator_id == "roi-calculator":
        initial = number(inputs, "initial")
        final = number(inputs, "final")
        roi = numeric.div(final - initial, initial) * 100
        return f"ROI: {to_fixed(roi, 2)}% | Gain/Loss: {money(final - initial)}"

    if calculator_id in SAVINGS_CALCULATORS:
        return _savings(inputs)

    if calculator_id == "inflation-calculator":
        amount = number(inputs, "amount")
        years = number(inputs, "years")
        rate = number(inputs, "rate", 3) / 100
        future = amount * numeric.power(1 + rate, years)
        return (
            f"${num(amount)} today = {money(future)} in {num(years)} years "
            f"({num(rate * 100)}% inflation)"
        )

    if calculator_id == "depreciation-calculator":
        cost = number(inputs, "cost")
        salvage = number(inputs, "salvage")
        years = number(inputs, "years", 1)
        annual = numeric.div(cost - salvage, years)
        return (
            f"Annual Depreciation: {money(annual)} | "
            f"Value after {num(years)} years: {money(salvage)}"
        )

    if calculator_id == "stock-calculator":
        shares = number(inputs, "shares")
        buy = number(inputs, "buyPrice")
        sell = number(inputs, "sellPrice")
        roi = numeric.div(sell - buy, buy) * 100
        return f"Profit/Loss: {money((sell - buy) * shares)} | ROI: {to_fixed(roi, 2)}%"

    if calculator_id == "dividend-calculator":
        annual = number(inputs, "shares") * number(inputs, "dividend")
        return f"Annual Dividends: {money(annual)} | Quarterly: {money(annual / 4)}"

    if calculator_id == "apr-calculator":
        principal = number(inputs, "principal")
        fee = number(inputs, "fee")
        term = number(inputs, "term", 1)
        apr = numeric.div(numeric.div(fee, principal), term) * 100
        return f"APR: {to_fixed(apr, 2)}%"

    if calculator_id == "apy-calculator":
        rate = number(inputs, "rate") / 100
        frequency = number(inputs, "frequency", 12)
        apy = (numeric.power(1 + numeric.div(rate, frequency), frequency) - 1) * 100
        return f"APY: {to_fixed(apy, 2)}%"

    if calculator_id == "annuity-calculator":
        return _annuity(inputs)
    if calculator_id == "fire-calculator":
        return _fire(inputs)
    if calculator_id == "bond-calculator":
        return _bond(inputs)

    return CALCULATION_COMPLETE
