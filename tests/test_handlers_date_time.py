"""Tests for the date-time handler family.

Every test pins today to Monday 2026-10-19 through the ``fixed_today``
fixture, so results do not depend on the wall clock.

Tests cover:
1. Age, date offsets, days-until and next birthday
2. Clock arithmetic: hours worked, time sums, sleep cycles, time zones
3. Pregnancy and cycle calculators
4. Malformed dates and times
"""

from __future__ import annotations

from datetime import date

import pytest

from freecalc.calc.engine import CalcEngine
from freecalc.calc.handlers.date_time import (
    DATE_OUT_OF_RANGE,
    INVALID_DATE,
    INVALID_TIME,
    calendar_difference,
    format_date,
    handle_date_time,
    parse_clock,
)


@pytest.mark.usefixtures("fixed_today")
class TestCalendar:
    """Tests for age, offsets and countdowns."""

    def test_age(self) -> None:
        """Years, months and days since birth."""
        result = handle_date_time("age-calculator", {"birthDate": "2000-01-15"})
        assert result == "Age: 26 years, 9 months, 4 days"

    def test_age_in_future(self) -> None:
        """A future birth date is refused."""
        result = handle_date_time("age-calculator", {"birthDate": "2030-01-01"})
        assert result == "Birth date is in the future"

    def test_date_offset(self) -> None:
        """30 days after New Year 2026."""
        inputs = {"startDate": "2026-01-01", "days": "30"}
        assert handle_date_time("date-calculator", inputs) == "Result: Sat Jan 31 2026"

    def test_days_until(self) -> None:
        """Christmas 2026 is 67 days away."""
        result = handle_date_time("days-until-calculator", {"targetDate": "2026-12-25"})
        assert result == "Days Until: 67 days"

    def test_next_birthday(self) -> None:
        """Next birthday this year, with the age being turned."""
        result = handle_date_time("birthday-calculator", {"birthDate": "1990-12-25"})
        assert result == "Days Until: 67 days | Next Birthday: Fri Dec 25 2026 (turning 36)"

    def test_birthday_today(self) -> None:
        """A birthday today is zero days away."""
        result = handle_date_time("birthday-calculator", {"birthDate": "1996-10-19"})
        assert result.startswith("Days Until: 0 days | ")

    def test_invalid_date(self) -> None:
        """Garbage dates are reported."""
        assert handle_date_time("age-calculator", {"birthDate": "not-a-date"}) == INVALID_DATE


class TestClock:
    """Tests for clock arithmetic."""

    def test_hours_default_shift(self) -> None:
        """Defaults are a 9-to-5 day."""
        assert handle_date_time("hours-calculator", {}) == "Total Time: 8 hours 0 minutes"

    def test_hours_past_midnight(self) -> None:
        """A shift ending before it starts wraps past midnight."""
        inputs = {"startTime": "22:00", "endTime": "06:00"}
        assert handle_date_time("hours-calculator", inputs) == "Total Time: 8 hours 0 minutes"

    def test_time_sum_and_difference(self) -> None:
        """1:30 and 2:45."""
        inputs = {"time1": "1:30", "time2": "2:45"}
        assert handle_date_time("time-calculator", inputs) == (
            "Sum: 4 hours 15 minutes | Difference: 1 hours 15 minutes"
        )

    def test_invalid_time(self) -> None:
        """Out-of-range clock values are refused."""
        inputs = {"time1": "25:00", "time2": "1:00"}
        assert handle_date_time("time-calculator", inputs) == INVALID_TIME

    def test_sleep_duration(self) -> None:
        """23:00 to 07:00 is eight hours and five full cycles."""
        inputs = {"bedtime": "23:00", "wakeup": "07:00"}
        assert handle_date_time("sleep-calculator", inputs) == (
            "Sleep Duration: 8 hours 0 minutes (5 full sleep cycles)"
        )

    def test_sleep_bedtimes(self) -> None:
        """Bedtimes for six, five and four cycles before waking."""
        assert handle_date_time("sleep-calculator", {"wakeup": "07:00"}) == (
            "Go to bed at: 21:45, 23:15, 00:45"
        )

    def test_sleep_wake_times(self) -> None:
        """Wake times after four, five and six cycles."""
        assert handle_date_time("sleep-calculator", {"bedtime": "23:00"}) == (
            "Wake up at: 05:15, 06:45, 08:15"
        )

    def test_parse_clock(self) -> None:
        """H:MM parses to minutes after midnight."""
        assert parse_clock("7:05") == 425
        assert parse_clock("23:59") == 1439
        assert parse_clock("7") is None
        assert parse_clock("12:60") is None


@pytest.mark.usefixtures("fixed_today")
class TestTimeZones:
    """Tests for time-zone-converter."""

    def test_same_day(self) -> None:
        """Noon UTC is 21:00 in Tokyo."""
        inputs = {"time": "12:00", "fromZone": "UTC", "toZone": "Asia/Tokyo"}
        assert handle_date_time("time-zone-converter", inputs) == "12:00 UTC = 21:00 Asia/Tokyo"

    def test_next_day(self) -> None:
        """20:00 UTC is the next morning in Tokyo."""
        inputs = {"time": "20:00", "fromZone": "UTC", "toZone": "Asia/Tokyo"}
        assert handle_date_time("time-zone-converter", inputs) == (
            "20:00 UTC = 05:00 Asia/Tokyo (next day)"
        )

    def test_unknown_zone(self) -> None:
        """Unknown zone names are reported."""
        inputs = {"time": "12:00", "fromZone": "UTC", "toZone": "Mars/Base"}
        assert handle_date_time("time-zone-converter", inputs) == "Unknown time zone: Mars/Base"

    def test_zone_directory_is_unknown(self) -> None:
        """Region prefixes such as "America" are not zones."""
        inputs = {"time": "10:00", "fromZone": "America", "toZone": "UTC"}
        assert handle_date_time("time-zone-converter", inputs) == "Unknown time zone: America"


@pytest.mark.usefixtures("fixed_today")
class TestPregnancyAndCycle:
    """Tests for pregnancy and cycle calculators."""

    def test_due_date(self) -> None:
        """280 days after the last period."""
        result = handle_date_time("due-date-calculator", {"lastPeriod": "2026-01-01"})
        assert result == "Due Date: Thu Oct 08 2026"

    def test_pregnancy_weeks(self) -> None:
        """Due date plus weeks elapsed."""
        result = handle_date_time("pregnancy-calculator", {"lastPeriod": "2026-06-01"})
        assert result == "Due Date: Mon Mar 08 2027 | Weeks Pregnant: 20 weeks 0 days"

    def test_ovulation(self) -> None:
        """Ovulation 14 days before the next cycle, with a six-day window."""
        inputs = {"lastPeriod": "2026-10-01", "cycleLength": "28"}
        assert handle_date_time("ovulation-calculator", inputs) == (
            "Ovulation: Thu Oct 15 2026 | Fertile Window: Sat Oct 10 2026 - Fri Oct 16 2026"
        )

    def test_implausible_cycle_uses_default(self) -> None:
        """Cycle lengths outside 20..45 days fall back to 28."""
        normal = {"lastPeriod": "2026-10-01", "cycleLength": "28"}
        odd = {"lastPeriod": "2026-10-01", "cycleLength": "100"}
        assert handle_date_time("ovulation-calculator", odd) == handle_date_time(
            "ovulation-calculator", normal
        )

    def test_conception(self) -> None:
        """266 days before the due date."""
        result = handle_date_time("conception-calculator", {"dueDate": "2026-10-08"})
        assert result == "Estimated Conception: Thu Jan 15 2026"

    def test_next_periods(self) -> None:
        """The next three periods."""
        inputs = {"lastPeriod": "2026-10-01", "cycleLength": "28"}
        assert handle_date_time("period-calculator", inputs) == (
            "Next Periods: Thu Oct 29 2026, Thu Nov 26 2026, Thu Dec 24 2026"
        )

    @pytest.mark.parametrize(
        ("calculator_id", "inputs"),
        [
            ("due-date-calculator", {"lastPeriod": "9999-12-31"}),
            ("ovulation-calculator", {"lastPeriod": "9999-12-31"}),
            ("period-calculator", {"lastPeriod": "9999-12-31"}),
            ("conception-calculator", {"dueDate": "0001-01-01"}),
        ],
    )
    def test_dates_past_calendar_edge(self, calculator_id: str, inputs: dict[str, str]) -> None:
        """Offsets beyond year 1 or 9999 are reported instead of raised."""
        assert handle_date_time(calculator_id, inputs) == DATE_OUT_OF_RANGE

    def test_calendar_edge_through_engine(self, engine: CalcEngine) -> None:
        """The engine returns the descriptive message, not the generic error."""
        outcome = engine.calculate("due-date-calculator", {"lastPeriod": "9999-12-31"})
        assert outcome.ok is True
        assert outcome.result == DATE_OUT_OF_RANGE


class TestHelpers:
    """Tests for date helpers."""

    def test_calendar_difference_borrows_days(self) -> None:
        """Day borrow uses the length of the previous month."""
        assert calendar_difference(date(2026, 1, 31), date(2026, 3, 1)) == (0, 1, 1)

    def test_format_date(self) -> None:
        """Dates render as weekday, month, day and year."""
        assert format_date(date(2026, 10, 20)) == "Tue Oct 20 2026"
