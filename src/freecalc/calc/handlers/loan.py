"""Loan family: amortized payments, debt payoff and affordability.

All rates are annual percentages; terms are in years unless noted otherwise.
"""

from __future__ import annotations

from typing import Final

from freecalc.calc import numeric
from freecalc.calc.formatting import to_fixed
from freecalc.calc.handlers.base import CalculatorInputs, money, number
from freecalc.calc.registry import UnitSystem

MAX_PAYOFF_MONTHS: Final[int] = 600
FRONT_END_RATIO: Final[float] = 0.28
AFFORDABILITY_RATE: Final[float] = 6.5
AFFORDABILITY_TERM_YEARS: Final[float] = 30
LEASE_TERM_MONTHS: Final[float] = 36

# APR / 2400 converts an annual percentage to a lease money factor
_MONEY_FACTOR_DIVISOR: Final[float] = 2400

PAYMENT_TOO_SMALL: Final[str] = "Payment too small - debt will never be paid off!"

_DEBT_CALCULATORS = frozenset({"debt-calculator", "credit-card-calculator"})


def monthly_payment(principal: float, monthly_rate: float, months: float) -> float:
    """Level payment amortizing ``principal`` over ``months``.

    Uses M = P * r(1+r)^n / ((1+r)^n - 1); a zero rate divides evenly.
    """
    if monthly_rate == 0:
        return numeric.div(principal, months)
    growth = numeric.power(1 + monthly_rate, months)
    return numeric.div(principal * (monthly_rate * growth), growth - 1)


def present_value(payment: float, monthly_rate: float, months: float) -> float:
    """Principal that ``payment`` per month amortizes over ``months``."""
    if monthly_rate == 0:
        return payment * months
    growth = numeric.power(1 + monthly_rate, months)
    return numeric.div(payment * (growth - 1), monthly_rate * growth)


def payoff_schedule(balance: float, monthly_rate: float, payment: float) -> tuple[int, float] | None:
    """Simulate month-by-month payoff of a revolving balance.

    Each month interest accrues on the running balance and then the payment is
    applied. The simulation stops once the balance reaches zero or after
    ``MAX_PAYOFF_MONTHS`` iterations.

    Returns:
        ``(months, total_interest)``, or None when a payment does not exceed
        the interest accrued that month.
    """
    months = 0
    total_interest = 0.0
    while balance > 0 and months < MAX_PAYOFF_MONTHS:
        interest = balance * monthly_rate
        total_interest += interest
        balance = balance + interest - payment
        months += 1
        if payment <= interest:
            return None
    return months, total_interest


def _debt_payoff(inputs: CalculatorInputs) -> str:
    balance = number(inputs, "balance", number(inputs, "principal"))
    annual_rate = number(inputs, "rate", number(inputs, "apr"))
    payment = number(inputs, "payment")

    schedule = payoff_schedule(balance, annual_rate / 100 / 12, payment)
    if schedule is None:
        return PAYMENT_TOO_SMALL

    months, total_interest = schedule
    return (
        f"Payoff Time: {months} months ({to_fixed(months / 12, 1)} years) | "
        f"Total Interest: {money(total_interest)}"
    )


def _lease(inputs: CalculatorInputs) -> str:
    price = number(inputs, "price")
    residual = number(inputs, "residual")
    term = number(inputs, "term", LEASE_TERM_MONTHS)
    money_factor = number(inputs, "rate") / _MONEY_FACTOR_DIVISOR

    depreciation = numeric.div(price - residual, term)
    finance_charge = (price + residual) * money_factor
    return (
        f"Monthly Payment: {money(depreciation + finance_charge)} | "
        f"Depreciation: {money(depreciation)} | Finance Charge: {money(finance_charge)}"
    )


def _refinance(inputs: CalculatorInputs) -> str:
    balance = number(inputs, "balance", number(inputs, "principal"))
    months = number(inputs, "term") * 12
    current = monthly_payment(balance, number(inputs, "rate") / 100 / 12, months)
    refinanced = monthly_payment(balance, number(inputs, "newRate") / 100 / 12, months)
    savings = current - refinanced
    return (
        f"Current Payment: {money(current)} | New Payment: {money(refinanced)} | "
        f"Monthly Savings: {money(savings)} | Lifetime Savings: {money(savings * months)}"
    )


def _home_affordability(inputs: CalculatorInputs) -> str:
    monthly_income = number(inputs, "income") / 12
    budget = monthly_income * FRONT_END_RATIO - number(inputs, "debt")
    if budget <= 0:
        return "Existing debt payments exceed the 28% housing budget"

    months = number(inputs, "term", AFFORDABILITY_TERM_YEARS) * 12
    monthly_rate = number(inputs, "rate", AFFORDABILITY_RATE) / 100 / 12
    loan_amount = present_value(budget, monthly_rate, months)
    price = loan_amount + number(inputs, "downPayment")
    return (
        f"Affordable Home Price: {money(price)} | Max Monthly Payment: {money(budget)} | "
        f"Loan Amount: {money(loan_amount)}"
    )


def handle_loan(
    calculator_id: str,
    inputs: CalculatorInputs,
    unit_system: UnitSystem = UnitSystem.NEUTRAL,
) -> str:
    """Compute a loan-family calculator.

    Args:
        calculator_id: Debt calculators simulate payoff; lease, refinance and
            affordability calculators have their own arithmetic; every other
            id is a fixed-rate amortized loan.
        inputs: ``principal``, ``rate`` (annual %) and ``term`` (years) for
            amortized loans.
        unit_system: Unused.

    Returns:
        Result string. A zero rate spreads the principal evenly.
    """
    if calculator_id in _DEBT_CALCULATORS:
        return _debt_payoff(inputs)
    if calculator_id == "lease-calculator":
        return _lease(inputs)
    if calculator_id == "mortgage-refinance-calculator":
        return _refinance(inputs)
    if calculator_id == "home-affordability-calculator":
        return _home_affordability(inputs)

    principal = number(inputs, "principal")
    rate = number(inputs, "rate") / 100 / 12
    term = number(inputs, "term") * 12

    payment = monthly_payment(principal, rate, term)
    if rate == 0:
        return f"Monthly Payment: {money(payment)} (0% interest)"

    total_paid = payment * term
    total_interest = total_paid - principal
    return (
        f"Monthly Payment: {money(payment)} | Total Interest: {money(total_interest)} | "
        f"Total: {money(total_paid)}"
    )
