"""Tests for the formula lexer and recursive-descent parser.

Tests cover:
1. Tokenizing: numbers, names, operators, the Math. namespace prefix
2. Precedence and associativity
3. Function allow-list and arity
4. Syntax errors with character positions
5. Nesting depth limit
"""

from __future__ import annotations

import pytest

from freecalc.sandbox.errors import FormulaSyntaxError, FormulaTooComplexError, RejectionReason
from freecalc.sandbox.lexer import TokenKind, tokenize
from freecalc.sandbox.parser import (
    Arithmetic,
    Call,
    Comparison,
    Conditional,
    Factorial,
    Logical,
    Name,
    Number,
    Power,
    Unary,
    parse,
    parse_formula,
)


class TestTokenize:
    """Tests for tokenize()."""

    def test_kinds(self) -> None:
        """A mixed formula splits into the expected token kinds."""
        kinds = [t.kind for t in tokenize("max(a, 2.5e3) >= b ? 1 : 0")]
        assert kinds == [
            TokenKind.NAME,
            TokenKind.LPAREN,
            TokenKind.NAME,
            TokenKind.COMMA,
            TokenKind.NUMBER,
            TokenKind.RPAREN,
            TokenKind.OPERATOR,
            TokenKind.NAME,
            TokenKind.QUESTION,
            TokenKind.NUMBER,
            TokenKind.COLON,
            TokenKind.NUMBER,
            TokenKind.END,
        ]

    def test_longest_operator_wins(self) -> None:
        """Multi-character operators are not split."""
        texts = [t.text for t in tokenize("a === b ** c <= d")]
        assert texts == ["a", "===", "b", "**", "c", "<=", "d", ""]

    def test_math_prefix_is_dropped(self) -> None:
        """Math.sqrt reads as sqrt."""
        texts = [t.text for t in tokenize("Math.sqrt(Math.PI)")]
        assert texts == ["sqrt", "(", "PI", ")", ""]

    def test_leading_dot_number(self) -> None:
        """.5 is a number."""
        token = tokenize(".5")[0]
        assert token.kind == TokenKind.NUMBER
        assert token.text == ".5"

    def test_positions(self) -> None:
        """Tokens record their offsets."""
        assert [t.position for t in tokenize("a + b")] == [0, 2, 4, 5]

    def test_unknown_character(self) -> None:
        """Characters that start no token are syntax errors."""
        with pytest.raises(FormulaSyntaxError, match=r"Unexpected character '=' \(char 3\)"):
            tokenize("a = b")


class TestPrecedence:
    """Tests for operator precedence and associativity."""

    def test_multiplication_binds_tighter(self) -> None:
        """a + b * c is a + (b * c)."""
        tree = parse("a + b * c")
        assert tree == Arithmetic(
            Name("a"), (("+", Arithmetic(Name("b"), (("*", Name("c")),))),)
        )

    def test_left_to_right_fold(self) -> None:
        """a - b - c keeps both operations in order."""
        assert parse("a - b - c") == Arithmetic(Name("a"), (("-", Name("b")), ("-", Name("c"))))

    def test_power_is_right_associative(self) -> None:
        """2 ** 3 ** 2 is 2 ** (3 ** 2)."""
        assert parse("2 ** 3 ** 2") == Power(Number(2.0), Power(Number(3.0), Number(2.0)))

    def test_unary_minus_binds_looser_than_power(self) -> None:
        """-2 ** 2 is -(2 ** 2)."""
        assert parse("-2 ** 2") == Unary("-", Power(Number(2.0), Number(2.0)))

    def test_postfix_factorial(self) -> None:
        """n! applies to the primary before it."""
        assert parse("n! * 2") == Arithmetic(Factorial(Name("n")), (("*", Number(2.0)),))

    def test_prefix_bang_is_not(self) -> None:
        """A leading ! is logical not."""
        assert parse("!a") == Unary("not", Name("a"))

    def test_chained_comparison(self) -> None:
        """a < b <= c is a single chained comparison."""
        assert parse("a < b <= c") == Comparison(
            (Name("a"), Name("b"), Name("c")), ("<", "<=")
        )

    def test_strict_equality_is_equality(self) -> None:
        """=== and !== normalize to == and !=."""
        assert parse("a === b") == Comparison((Name("a"), Name("b")), ("==",))
        assert parse("a !== b") == Comparison((Name("a"), Name("b")), ("!=",))

    @pytest.mark.parametrize("formula", ["a && b || c", "a and b or c", "a & b | c"])
    def test_and_binds_tighter_than_or(self, formula: str) -> None:
        """Every spelling of and/or has the same precedence."""
        assert parse(formula) == Logical(
            "or", (Logical("and", (Name("a"), Name("b"))), Name("c"))
        )

    def test_nested_conditional(self) -> None:
        """The false branch of a ternary may itself be a ternary."""
        assert parse("a ? 1 : b ? 2 : 3") == Conditional(
            Name("a"), Number(1.0), Conditional(Name("b"), Number(2.0), Number(3.0))
        )


class TestFunctions:
    """Tests for function calls."""

    def test_call(self) -> None:
        """Arguments are parsed as full expressions."""
        assert parse("max(a, b + 1)") == Call(
            "max", (Name("a"), Arithmetic(Name("b"), (("+", Number(1.0)),)))
        )

    def test_unknown_function(self) -> None:
        """Functions outside the allow-list are syntax errors."""
        with pytest.raises(FormulaSyntaxError, match="Unknown function 'open'"):
            parse("open(a)")

    @pytest.mark.parametrize("formula", ["sqrt()", "sqrt(1, 2)", "pow(2)", "round(1, 2, 3)"])
    def test_wrong_arity(self, formula: str) -> None:
        """Argument counts are checked while parsing."""
        with pytest.raises(FormulaSyntaxError, match="Wrong number of arguments"):
            parse(formula)

    def test_variadic(self) -> None:
        """min and max accept any number of arguments."""
        tree = parse("min(1, 2, 3, 4, 5)")
        assert isinstance(tree, Call)
        assert len(tree.arguments) == 5

    def test_names_exclude_functions(self) -> None:
        """Only variable names are collected."""
        parsed = parse_formula("sqrt(a) + max(b, pi) * a")
        assert parsed.names == frozenset({"a", "b", "pi"})


class TestSyntaxErrors:
    """Tests for malformed formulas."""

    def test_empty(self) -> None:
        """Whitespace only is empty."""
        with pytest.raises(FormulaSyntaxError, match="Formula is empty"):
            parse("   ")

    @pytest.mark.parametrize("formula", ["a +", "(a + b", "a b", "a ? b", "* a", "a,"])
    def test_malformed(self, formula: str) -> None:
        """Incomplete or juxtaposed expressions are rejected."""
        with pytest.raises(FormulaSyntaxError) as exc_info:
            parse(formula)
        assert exc_info.value.reason_code == RejectionReason.FORMULA_SYNTAX
        assert exc_info.value.message.startswith("Formula evaluation failed: ")

    def test_position_is_one_based(self) -> None:
        """The reported position counts from 1."""
        with pytest.raises(FormulaSyntaxError) as exc_info:
            parse("a b")
        assert exc_info.value.position == 2
        assert exc_info.value.message == "Formula evaluation failed: Unexpected 'b' (char 3)"

    def test_keyword_is_not_a_name(self) -> None:
        """and/or/not cannot be used as variables."""
        with pytest.raises(FormulaSyntaxError):
            parse("and + 1")


class TestDepthLimit:
    """Tests for the nesting depth limit."""

    def test_within_limit(self) -> None:
        """Moderate nesting parses."""
        parse("(" * 10 + "a" + ")" * 10, max_depth=64)

    def test_parentheses_over_limit(self) -> None:
        """Deep parentheses are too complex."""
        with pytest.raises(FormulaTooComplexError) as exc_info:
            parse("(" * 100 + "a" + ")" * 100, max_depth=64)
        assert exc_info.value.reason_code == RejectionReason.FORMULA_TOO_COMPLEX

    def test_unary_chain_over_limit(self) -> None:
        """Long prefix chains count as nesting."""
        with pytest.raises(FormulaTooComplexError):
            parse("-" * 100 + "a", max_depth=64)

    def test_very_deep_input_does_not_crash(self) -> None:
        """Pathological depth is rejected, never a RecursionError."""
        with pytest.raises(FormulaTooComplexError):
            parse("(" * 5000 + "1" + ")" * 5000, max_depth=10_000)
