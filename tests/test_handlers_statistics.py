"""Tests for the statistics handler family.

Tests cover:
1. Mean and median for the average calculator
2. Population standard deviation and variance
3. Parsing of comma-separated values
"""

from __future__ import annotations

import pytest

from freecalc.calc.handlers.statistics import (
    handle_statistics,
    mean,
    median,
    parse_values,
    population_variance,
)

EMPTY_PROMPT = "Please enter values separated by commas"


class TestAverage:
    """Tests for mean and median output."""

    def test_mean_and_median(self) -> None:
        """Average calculator reports mean and median."""
        result = handle_statistics("average-calculator", {"values": "10,20,30,40"})
        assert result == "Mean: 25.00 | Median: 25.00"

    def test_skewed_values(self) -> None:
        """Mean and median diverge on skewed data."""
        result = handle_statistics("average-calculator", {"values": "1, 2, 3, 100"})
        assert result == "Mean: 26.50 | Median: 2.50"

    def test_median_of_odd_count(self) -> None:
        """Odd counts take the middle element after sorting."""
        assert median([9, 1, 5]) == 5

    def test_median_of_even_count(self) -> None:
        """Even counts average the two middle elements."""
        assert median([4, 1, 3, 2]) == 2.5


class TestStandardDeviation:
    """Tests for standard-deviation-calculator."""

    def test_standard_deviation(self) -> None:
        """Population standard deviation divides by N."""
        result = handle_statistics(
            "standard-deviation-calculator", {"values": "2,4,4,4,5,5,7,9"}
        )
        assert result == "Mean: 5.00 | Std Dev: 2.0000 | Variance: 4.0000"

    def test_single_value_has_no_spread(self) -> None:
        """One value has zero variance."""
        result = handle_statistics("standard-deviation-calculator", {"values": "7"})
        assert result == "Mean: 7.00 | Std Dev: 0.0000 | Variance: 0.0000"

    def test_population_variance(self) -> None:
        """Helpers agree with the handler output."""
        values = [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]
        assert mean(values) == 5.0
        assert population_variance(values) == 4.0


class TestParsing:
    """Tests for value parsing and empty input."""

    def test_non_numeric_tokens_are_dropped(self) -> None:
        """Tokens that are not numbers are ignored."""
        assert parse_values("10, 20, abc, 30") == [10.0, 20.0, 30.0]
        result = handle_statistics("average-calculator", {"values": "1, x, 3"})
        assert result == "Mean: 2.00 | Median: 2.00"

    @pytest.mark.parametrize("inputs", [{"values": ""}, {"values": "a, b"}, {}])
    def test_no_numeric_values(self, inputs: dict[str, str]) -> None:
        """No numeric values prompts for input."""
        assert handle_statistics("average-calculator", inputs) == EMPTY_PROMPT
