"""Tests for the number-theory handler family.

Tests cover:
1. Exact factorials and combinatorics, with their input bounds
2. Primality, LCM, GCF and divisibility
3. Lottery odds and simple probability
"""

from __future__ import annotations

from freecalc.calc.handlers.number_theory import (
    combinations,
    factorial,
    handle_number_theory,
    is_prime,
    permutations,
)


class TestFactorial:
    """Tests for factorial-calculator."""

    def test_small_factorial(self) -> None:
        """5! = 120."""
        assert handle_number_theory("factorial-calculator", {"number": "5"}) == "5! = 120"

    def test_largest_factorial_is_exact(self) -> None:
        """170! is rendered exactly, digit for digit."""
        result = handle_number_theory("factorial-calculator", {"number": "170"})
        assert result == f"170! = {factorial(170)}"
        assert "e" not in result

    def test_too_large(self) -> None:
        """Inputs above 170 are refused."""
        result = handle_number_theory("factorial-calculator", {"number": "171"})
        assert result == "Number too large (max 170)"

    def test_negative(self) -> None:
        """Negative inputs are refused."""
        result = handle_number_theory("factorial-calculator", {"number": "-1"})
        assert result == "Factorial not defined for negative numbers"


class TestCombinatorics:
    """Tests for combination, permutation and lottery calculators."""

    def test_combinations(self) -> None:
        """C(49,6) is exact."""
        result = handle_number_theory("combination-calculator", {"n": "49", "r": "6"})
        assert result == "C(49,6) = 13983816"

    def test_permutations(self) -> None:
        """P(5,2) = 20."""
        assert handle_number_theory("permutation-calculator", {"n": "5", "r": "2"}) == "P(5,2) = 20"

    def test_r_greater_than_n(self) -> None:
        """r > n is refused."""
        result = handle_number_theory("combination-calculator", {"n": "3", "r": "5"})
        assert result == "r cannot be greater than n"

    def test_n_too_large(self) -> None:
        """n above 1000 is refused."""
        result = handle_number_theory("permutation-calculator", {"n": "1001", "r": "2"})
        assert result == "Number too large (max 1000)"

    def test_lottery_defaults(self) -> None:
        """Default lottery is 6 of 49."""
        assert handle_number_theory("lottery-calculator", {}) == "Odds: 1 in 13983816"

    def test_helpers_agree_with_definitions(self) -> None:
        """The integer helpers match n!/(r!(n-r)!) and n!/(n-r)!."""
        assert combinations(10, 3) == factorial(10) // (factorial(3) * factorial(7))
        assert permutations(10, 3) == factorial(10) // factorial(7)
        assert combinations(5, 0) == 1


class TestDivisors:
    """Tests for prime, LCM, GCF and divisibility calculators."""

    def test_prime(self) -> None:
        """97 is prime; 1 is not."""
        assert handle_number_theory("prime-number-calculator", {"number": "97"}) == "97 is prime"
        assert handle_number_theory("prime-number-calculator", {"number": "1"}) == "1 is not prime"

    def test_is_prime_helper(self) -> None:
        """Trial division handles squares of primes and small primes."""
        assert is_prime(2) and is_prime(3) and is_prime(999_983)
        assert not is_prime(25) and not is_prime(49) and not is_prime(0)

    def test_lcm(self) -> None:
        """LCM(4, 6) = 12; LCM(0, 0) is NaN."""
        assert handle_number_theory("lcm-calculator", {"a": "4", "b": "6"}) == "LCM(4, 6) = 12"
        assert handle_number_theory("lcm-calculator", {"a": "0", "b": "0"}) == "LCM(0, 0) = NaN"

    def test_gcf(self) -> None:
        """GCF(12, 18) = 6."""
        assert handle_number_theory("gcf-calculator", {"a": "12", "b": "18"}) == "GCF(12, 18) = 6"

    def test_divisibility(self) -> None:
        """Division by zero is reported as not divisible."""
        inputs = {"number": "10", "divisor": "0"}
        assert handle_number_theory("divisibility-calculator", inputs) == (
            "10 is NOT divisible by 0"
        )
        inputs = {"number": "10", "divisor": "5"}
        assert handle_number_theory("divisibility-calculator", inputs) == "10 is divisible by 5"

    def test_probability(self) -> None:
        """1 of 4 outcomes is 25%."""
        inputs = {"favorable": "1", "total": "4"}
        assert handle_number_theory("probability-calculator", inputs) == (
            "Probability: 25.00% (1/4)"
        )
