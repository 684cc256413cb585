"""Date and time family: ages, date arithmetic, clock times and cycles.

Dates are ISO ``YYYY-MM-DD`` strings and clock times are ``H:MM`` in 24-hour
form. Calculators relative to "today" read the local date through
:func:`today` so that callers and tests can pin it.
"""

from __future__ import annotations

import calendar
import math
import re
import zoneinfo
from collections.abc import Callable
from datetime import date, datetime, timedelta
from typing import Final

from freecalc.calc.handlers.base import (
    CALCULATION_COMPLETE,
    CalculatorInputs,
    integer,
    number,
)
from freecalc.calc.registry import UnitSystem

MINUTES_PER_DAY: Final[int] = 24 * 60
SLEEP_CYCLE_MINUTES: Final[int] = 90
FALL_ASLEEP_MINUTES: Final[int] = 15
GESTATION_DAYS: Final[int] = 280
CONCEPTION_BEFORE_DUE_DAYS: Final[int] = 266
LUTEAL_PHASE_DAYS: Final[int] = 14
DEFAULT_CYCLE_DAYS: Final[int] = 28
UPCOMING_PERIODS: Final[int] = 3

INVALID_DATE: Final[str] = "Please enter a valid date (YYYY-MM-DD)"
INVALID_TIME: Final[str] = "Please enter times as HH:MM"
DATE_OUT_OF_RANGE: Final[str] = "Resulting date is out of range"

_CLOCK = re.compile(r"\s*(\d{1,2}):(\d{2})\s*")


def today() -> date:
    """Current local date."""
    return date.today()


def parse_date(raw: str | None) -> date | None:
    """Parse an ISO date; an empty value means today, garbage means None."""
    if not raw:
        return today()
    try:
        return date.fromisoformat(raw.strip()[:10])
    except ValueError:
        return None


def parse_clock(raw: str | None) -> int | None:
    """Minutes after midnight for "H:MM", or None when malformed."""
    match = _CLOCK.fullmatch(raw or "")
    if match is None:
        return None
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        return None
    return hours * 60 + minutes


def format_clock(minutes: int) -> str:
    minutes %= MINUTES_PER_DAY
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def format_date(value: date) -> str:
    """Render as "Tue Oct 20 2026"."""
    return value.strftime("%a %b %d %Y")


def add_months(start: date, months: int) -> date:
    """Shift by whole months, clamping the day to the target month's length."""
    year_offset, month_index = divmod(start.month - 1 + months, 12)
    year = start.year + year_offset
    month = month_index + 1
    return date(year, month, min(start.day, calendar.monthrange(year, month)[1]))


def calendar_difference(start: date, end: date) -> tuple[int, int, int]:
    """Whole years, months and days from ``start`` to ``end`` (end >= start).

    Jan 31 to Mar 1 is one month (to Feb 28) and one day.
    """
    months = (end.year - start.year) * 12 + end.month - start.month
    if end.day < start.day:
        months -= 1
    anchor = add_months(start, months)
    years, months = divmod(months, 12)
    return years, months, (end - anchor).days


def _shift(start: date, days: float) -> date | None:
    try:
        return start + timedelta(days=math.trunc(days))
    except (OverflowError, ValueError):
        return None


def _age(inputs: CalculatorInputs) -> str:
    birth = parse_date(inputs.get("birthDate"))
    if birth is None:
        return INVALID_DATE
    current = today()
    if birth > current:
        return "Birth date is in the future"
    years, months, days = calendar_difference(birth, current)
    return f"Age: {years} years, {months} months, {days} days"


def _date_offset(inputs: CalculatorInputs) -> str:
    start = parse_date(inputs.get("startDate"))
    if start is None:
        return INVALID_DATE
    result = _shift(start, number(inputs, "days"))
    if result is None:
        return DATE_OUT_OF_RANGE
    return f"Result: {format_date(result)}"


def _days_until(inputs: CalculatorInputs) -> str:
    target = parse_date(inputs.get("targetDate"))
    if target is None:
        return INVALID_DATE
    return f"Days Until: {(target - today()).days} days"


def _next_birthday(inputs: CalculatorInputs) -> str:
    birth = parse_date(inputs.get("birthDate"))
    if birth is None:
        return INVALID_DATE

    current = today()
    year = current.year
    while True:
        day = birth.day
        if birth.month == 2 and day == 29 and not calendar.isleap(year):
            day = 28
        upcoming = date(year, birth.month, day)
        if upcoming >= current:
            break
        year += 1
    return (
        f"Days Until: {(upcoming - current).days} days | "
        f"Next Birthday: {format_date(upcoming)} (turning {year - birth.year})"
    )


def _hours(inputs: CalculatorInputs) -> str:
    start = parse_clock(inputs.get("startTime") or "9:00")
    end = parse_clock(inputs.get("endTime") or "17:00")
    if start is None or end is None:
        return INVALID_TIME
    # an end before the start is a shift that runs past midnight
    total = (end - start) % MINUTES_PER_DAY
    return f"Total Time: {total // 60} hours {total % 60} minutes"


def _time_arithmetic(inputs: CalculatorInputs) -> str:
    first = parse_clock(inputs.get("time1"))
    second = parse_clock(inputs.get("time2"))
    if first is None or second is None:
        return INVALID_TIME
    total = first + second
    difference = abs(first - second)
    return (
        f"Sum: {total // 60} hours {total % 60} minutes | "
        f"Difference: {difference // 60} hours {difference % 60} minutes"
    )


def _time_zone(inputs: CalculatorInputs) -> str:
    minutes = parse_clock(inputs.get("time"))
    if minutes is None:
        return INVALID_TIME

    from_name = (inputs.get("fromZone") or "UTC").strip()
    to_name = (inputs.get("toZone") or "UTC").strip()
    zones = []
    for name in (from_name, to_name):
        # zone directories such as "America" fail with OSError
        try:
            zones.append(zoneinfo.ZoneInfo(name))
        except (zoneinfo.ZoneInfoNotFoundError, ValueError, OSError):
            return f"Unknown time zone: {name}"

    current = today()
    local = datetime(
        current.year, current.month, current.day, minutes // 60, minutes % 60, tzinfo=zones[0]
    )
    converted = local.astimezone(zones[1])
    shift = (converted.date() - local.date()).days
    suffix = {-1: " (previous day)", 1: " (next day)"}.get(shift, "")
    return (
        f"{format_clock(minutes)} {from_name} = "
        f"{format_clock(converted.hour * 60 + converted.minute)} {to_name}{suffix}"
    )


def _sleep(inputs: CalculatorInputs) -> str:
    raw_bedtime = inputs.get("bedtime")
    raw_wakeup = inputs.get("wakeup")
    bedtime = parse_clock(raw_bedtime) if raw_bedtime else None
    wakeup = parse_clock(raw_wakeup) if raw_wakeup else None
    if (raw_bedtime and bedtime is None) or (raw_wakeup and wakeup is None):
        return INVALID_TIME

    if bedtime is not None and wakeup is not None:
        duration = (wakeup - bedtime) % MINUTES_PER_DAY
        cycles = max(0, duration - FALL_ASLEEP_MINUTES) // SLEEP_CYCLE_MINUTES
        return (
            f"Sleep Duration: {duration // 60} hours {duration % 60} minutes "
            f"({cycles} full sleep cycles)"
        )
    if wakeup is not None:
        bedtimes = [
            format_clock(wakeup - FALL_ASLEEP_MINUTES - cycles * SLEEP_CYCLE_MINUTES)
            for cycles in (6, 5, 4)
        ]
        return f"Go to bed at: {', '.join(bedtimes)}"
    if bedtime is not None:
        wake_times = [
            format_clock(bedtime + FALL_ASLEEP_MINUTES + cycles * SLEEP_CYCLE_MINUTES)
            for cycles in (4, 5, 6)
        ]
        return f"Wake up at: {', '.join(wake_times)}"
    return "Please enter a bedtime or wake-up time (HH:MM)"


def _due_date(inputs: CalculatorInputs) -> str:
    last_period = parse_date(inputs.get("lastPeriod"))
    if last_period is None:
        return INVALID_DATE
    due = _shift(last_period, GESTATION_DAYS)
    if due is None:
        return DATE_OUT_OF_RANGE
    return f"Due Date: {format_date(due)}"


def _pregnancy(inputs: CalculatorInputs) -> str:
    last_period = parse_date(inputs.get("lastPeriod"))
    if last_period is None:
        return INVALID_DATE
    elapsed = (today() - last_period).days
    if elapsed < 0:
        return "Last period date is in the future"
    due = _shift(last_period, GESTATION_DAYS)
    if due is None:
        return DATE_OUT_OF_RANGE
    return (
        f"Due Date: {format_date(due)} | "
        f"Weeks Pregnant: {elapsed // 7} weeks {elapsed % 7} days"
    )


def _cycle_length(inputs: CalculatorInputs) -> int:
    length = integer(inputs, "cycleLength", DEFAULT_CYCLE_DAYS)
    # physiologically plausible cycle lengths only
    return length if 20 <= length <= 45 else DEFAULT_CYCLE_DAYS


def _ovulation(inputs: CalculatorInputs) -> str:
    last_period = parse_date(inputs.get("lastPeriod"))
    if last_period is None:
        return INVALID_DATE
    offset = _cycle_length(inputs) - LUTEAL_PHASE_DAYS
    window = [_shift(last_period, offset + days) for days in (0, -5, 1)]
    if None in window:
        return DATE_OUT_OF_RANGE
    ovulation, fertile_start, fertile_end = (format_date(day) for day in window if day)
    return f"Ovulation: {ovulation} | Fertile Window: {fertile_start} - {fertile_end}"


def _conception(inputs: CalculatorInputs) -> str:
    due = parse_date(inputs.get("dueDate"))
    if due is None:
        return INVALID_DATE
    conception = _shift(due, -CONCEPTION_BEFORE_DUE_DAYS)
    if conception is None:
        return DATE_OUT_OF_RANGE
    return f"Estimated Conception: {format_date(conception)}"


def _periods(inputs: CalculatorInputs) -> str:
    last_period = parse_date(inputs.get("lastPeriod"))
    if last_period is None:
        return INVALID_DATE
    length = _cycle_length(inputs)
    upcoming = [_shift(last_period, length * n) for n in range(1, UPCOMING_PERIODS + 1)]
    if None in upcoming:
        return DATE_OUT_OF_RANGE
    return f"Next Periods: {', '.join(format_date(day) for day in upcoming if day)}"


_CALCULATORS: dict[str, Callable[[CalculatorInputs], str]] = {
    "age-calculator": _age,
    "date-calculator": _date_offset,
    "days-until-calculator": _days_until,
    "birthday-calculator": _next_birthday,
    "hours-calculator": _hours,
    "time-calculator": _time_arithmetic,
    "time-zone-converter": _time_zone,
    "sleep-calculator": _sleep,
    "pregnancy-calculator": _pregnancy,
    "due-date-calculator": _due_date,
    "ovulation-calculator": _ovulation,
    "conception-calculator": _conception,
    "period-calculator": _periods,
}


def handle_date_time(
    calculator_id: str,
    inputs: CalculatorInputs,
    unit_system: UnitSystem = UnitSystem.NEUTRAL,
) -> str:
    """Compute a date-or-time calculator."""
    calculator = _CALCULATORS.get(calculator_id)
    if calculator is None:
        return CALCULATION_COMPLETE
    return calculator(inputs)
