"""Salary family: hourly/annual conversions and per-paycheck take-home."""

from __future__ import annotations

from typing import Final

from freecalc.calc import numeric
from freecalc.calc.coercion import coerce
from freecalc.calc.handlers.base import CalculatorInputs, money, number, text_field
from freecalc.calc.registry import UnitSystem

WEEKS_PER_YEAR: Final[int] = 52
DEFAULT_HOURS_PER_WEEK: Final[float] = 40

PAY_PERIODS: Final[dict[str, int]] = {
    "weekly": 52,
    "biweekly": 26,
    "bi-weekly": 26,
    "semimonthly": 24,
    "semi-monthly": 24,
    "monthly": 12,
    "annually": 1,
}


def _pay_periods(raw: str) -> float:
    periods = PAY_PERIODS.get(raw.strip().lower())
    if periods is not None:
        return periods
    return coerce(raw, PAY_PERIODS["biweekly"])


def handle_salary(
    calculator_id: str,
    inputs: CalculatorInputs,
    unit_system: UnitSystem = UnitSystem.NEUTRAL,
) -> str:
    """Convert between hourly and annual pay, or split a salary into paychecks.

    Every id other than "salary-to-hourly" and "paycheck-calculator" treats the
    inputs as an hourly wage and hours per week.
    """
    if calculator_id == "salary-to-hourly":
        annual = number(inputs, "annual")
        hours = number(inputs, "hoursPerWeek", DEFAULT_HOURS_PER_WEEK)
        hourly = numeric.div(annual, hours * WEEKS_PER_YEAR)
        return (
            f"Hourly: {money(hourly)} | Weekly: {money(annual / WEEKS_PER_YEAR)} | "
            f"Monthly: {money(annual / 12)}"
        )

    if calculator_id == "paycheck-calculator":
        periods = _pay_periods(text_field(inputs, "frequency", "biweekly"))
        gross = numeric.div(number(inputs, "salary"), periods)
        taxes = gross * number(inputs, "taxRate") / 100
        return (
            f"Gross Pay: {money(gross)} | Taxes: {money(taxes)} | "
            f"Net Pay: {money(gross - taxes)} per paycheck"
        )

    hourly = number(inputs, "hourly")
    hours = number(inputs, "hoursPerWeek", DEFAULT_HOURS_PER_WEEK)
    annual = hourly * hours * WEEKS_PER_YEAR
    return (
        f"Annual: {money(annual)} | Monthly: {money(annual / 12)} | "
        f"Weekly: {money(annual / WEEKS_PER_YEAR)}"
    )
