"""Recursive-descent parser for the restricted formula grammar.

Grammar, loosest binding first::

    conditional    := logical_or ( "?" conditional ":" conditional )?
    logical_or     := logical_and ( ( "||" | "|" | "or" ) logical_and )*
    logical_and    := comparison ( ( "&&" | "&" | "and" ) comparison )*
    comparison     := additive ( ( "<" | "<=" | ">" | ">=" | "==" | "!=" ) additive )*
    additive       := multiplicative ( ( "+" | "-" ) multiplicative )*
    multiplicative := unary ( ( "*" | "/" ) unary )*
    unary          := ( "-" | "+" | "!" | "not" ) unary | power
    power          := postfix ( "**" unary )?
    postfix        := primary "!"*
    primary        := NUMBER | NAME | NAME "(" arguments ")" | "(" conditional ")"

Comparisons chain (``a < b < c`` means ``a < b and b < c``). Function names
are checked against a fixed allow-list while parsing; variable names are only
resolved at evaluation time.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Final

from freecalc.config import DEFAULT_FORMULA_MAX_DEPTH
from freecalc.sandbox.errors import FormulaSyntaxError, FormulaTooComplexError
from freecalc.sandbox.lexer import Token, TokenKind, tokenize

# name -> (min arguments, max arguments or None for variadic)
FUNCTION_ARITY: Final[dict[str, tuple[int, int | None]]] = {
    "abs": (1, 1),
    "ceil": (1, 1),
    "floor": (1, 1),
    "round": (1, 2),
    "sqrt": (1, 1),
    "cbrt": (1, 1),
    "pow": (2, 2),
    "exp": (1, 1),
    "log": (1, 2),
    "log10": (1, 1),
    "log2": (1, 1),
    "min": (1, None),
    "max": (1, None),
    "sin": (1, 1),
    "cos": (1, 1),
    "tan": (1, 1),
    "asin": (1, 1),
    "acos": (1, 1),
    "atan": (1, 1),
    "sign": (1, 1),
    "trunc": (1, 1),
}

COMPARISON_OPERATORS: Final[dict[str, str]] = {
    "<": "<",
    "<=": "<=",
    ">": ">",
    ">=": ">=",
    "==": "==",
    "===": "==",
    "!=": "!=",
    "!==": "!=",
}
OR_OPERATORS: Final[frozenset[str]] = frozenset({"||", "|", "or"})
AND_OPERATORS: Final[frozenset[str]] = frozenset({"&&", "&", "and"})
KEYWORDS: Final[frozenset[str]] = frozenset({"and", "or", "not"})


class Node:
    """Base class of formula syntax tree nodes."""


@dataclass(frozen=True)
class Number(Node):
    value: float


@dataclass(frozen=True)
class Name(Node):
    name: str


@dataclass(frozen=True)
class Unary(Node):
    """Prefix ``-``, ``+`` or logical ``not``."""

    operator: str
    operand: Node


@dataclass(frozen=True)
class Factorial(Node):
    operand: Node


@dataclass(frozen=True)
class Power(Node):
    base: Node
    exponent: Node


@dataclass(frozen=True)
class Arithmetic(Node):
    """Left-to-right fold: ``first (op operand)*`` for ``+ -`` or ``* /``."""

    first: Node
    rest: tuple[tuple[str, Node], ...]


@dataclass(frozen=True)
class Comparison(Node):
    """Chained comparison; ``operators[i]`` sits between operands i and i+1."""

    operands: tuple[Node, ...]
    operators: tuple[str, ...]


@dataclass(frozen=True)
class Logical(Node):
    """Short-circuit ``and``/``or`` over two or more operands."""

    operator: str
    operands: tuple[Node, ...]


@dataclass(frozen=True)
class Conditional(Node):
    test: Node
    if_true: Node
    if_false: Node


@dataclass(frozen=True)
class Call(Node):
    function: str
    arguments: tuple[Node, ...]


class _Parser:
    def __init__(self, tokens: list[Token], max_depth: int) -> None:
        self._tokens = tokens
        self._index = 0
        self._depth = 0
        self._max_depth = max_depth
        self.names: set[str] = set()

    @property
    def _current(self) -> Token:
        return self._tokens[self._index]

    def _advance(self) -> Token:
        token = self._tokens[self._index]
        if token.kind is not TokenKind.END:
            self._index += 1
        return token

    def _at_operator(self, operators: frozenset[str] | dict[str, str]) -> bool:
        token = self._current
        if token.kind is TokenKind.OPERATOR:
            return token.text in operators
        return token.kind is TokenKind.NAME and token.text in KEYWORDS and token.text in operators

    def _expect(self, kind: TokenKind, what: str) -> Token:
        token = self._current
        if token.kind is not kind:
            raise FormulaSyntaxError(f"Expected {what}", token.position)
        return self._advance()

    @contextmanager
    def _nested(self) -> Iterator[None]:
        self._depth += 1
        if self._depth > self._max_depth:
            raise FormulaTooComplexError(f"nesting deeper than {self._max_depth} levels")
        try:
            yield
        finally:
            self._depth -= 1

    def parse(self) -> Node:
        if self._current.kind is TokenKind.END:
            raise FormulaSyntaxError("Formula is empty")
        node = self._conditional()
        token = self._current
        if token.kind is not TokenKind.END:
            raise FormulaSyntaxError(f"Unexpected '{token.text}'", token.position)
        return node

    def _conditional(self) -> Node:
        with self._nested():
            test = self._logical_or()
            if self._current.kind is not TokenKind.QUESTION:
                return test
            self._advance()
            if_true = self._conditional()
            self._expect(TokenKind.COLON, "':' in conditional expression")
            if_false = self._conditional()
            return Conditional(test, if_true, if_false)

    def _logical_or(self) -> Node:
        operands = [self._logical_and()]
        while self._at_operator(OR_OPERATORS):
            self._advance()
            operands.append(self._logical_and())
        return operands[0] if len(operands) == 1 else Logical("or", tuple(operands))

    def _logical_and(self) -> Node:
        operands = [self._comparison()]
        while self._at_operator(AND_OPERATORS):
            self._advance()
            operands.append(self._comparison())
        return operands[0] if len(operands) == 1 else Logical("and", tuple(operands))

    def _comparison(self) -> Node:
        operands = [self._additive()]
        operators: list[str] = []
        while self._at_operator(COMPARISON_OPERATORS):
            operators.append(COMPARISON_OPERATORS[self._advance().text])
            operands.append(self._additive())
        if not operators:
            return operands[0]
        return Comparison(tuple(operands), tuple(operators))

    def _additive(self) -> Node:
        return self._fold(self._multiplicative, frozenset({"+", "-"}))

    def _multiplicative(self) -> Node:
        return self._fold(self._unary, frozenset({"*", "/"}))

    def _fold(self, operand: Callable[[], Node], operators: frozenset[str]) -> Node:
        first = operand()
        rest: list[tuple[str, Node]] = []
        while self._at_operator(operators):
            rest.append((self._advance().text, operand()))
        return Arithmetic(first, tuple(rest)) if rest else first

    def _unary(self) -> Node:
        token = self._current
        is_prefix = (token.kind is TokenKind.OPERATOR and token.text in ("-", "+", "!")) or (
            token.kind is TokenKind.NAME and token.text == "not"
        )
        if not is_prefix:
            return self._power()

        self._advance()
        with self._nested():
            operand = self._unary()
        operator = "not" if token.text in ("!", "not") else token.text
        return Unary(operator, operand)

    def _power(self) -> Node:
        base = self._postfix()
        if not self._at_operator(frozenset({"**"})):
            return base
        self._advance()
        with self._nested():
            exponent = self._unary()
        return Power(base, exponent)

    def _postfix(self) -> Node:
        node = self._primary()
        while self._at_operator(frozenset({"!"})):
            self._advance()
            node = Factorial(node)
        return node

    def _primary(self) -> Node:
        token = self._current

        if token.kind is TokenKind.NUMBER:
            self._advance()
            return Number(float(token.text))

        if token.kind is TokenKind.LPAREN:
            self._advance()
            node = self._conditional()
            self._expect(TokenKind.RPAREN, "')'")
            return node

        if token.kind is TokenKind.NAME and token.text not in KEYWORDS:
            self._advance()
            if self._current.kind is TokenKind.LPAREN:
                return self._call(token)
            self.names.add(token.text)
            return Name(token.text)

        if token.kind is TokenKind.END:
            raise FormulaSyntaxError("Unexpected end of formula", token.position)
        raise FormulaSyntaxError(f"Unexpected '{token.text}'", token.position)

    def _call(self, name: Token) -> Node:
        arity = FUNCTION_ARITY.get(name.text)
        if arity is None:
            raise FormulaSyntaxError(f"Unknown function '{name.text}'", name.position)

        self._expect(TokenKind.LPAREN, "'('")
        arguments: list[Node] = []
        if self._current.kind is not TokenKind.RPAREN:
            arguments.append(self._conditional())
            while self._current.kind is TokenKind.COMMA:
                self._advance()
                arguments.append(self._conditional())
        self._expect(TokenKind.RPAREN, "')'")

        minimum, maximum = arity
        if len(arguments) < minimum or (maximum is not None and len(arguments) > maximum):
            raise FormulaSyntaxError(
                f"Wrong number of arguments for {name.text}(): {len(arguments)}", name.position
            )
        return Call(name.text, tuple(arguments))


@dataclass(frozen=True)
class ParsedFormula:
    """Syntax tree plus the variable names it references."""

    tree: Node
    names: frozenset[str]


def parse_formula(formula: str, max_depth: int = DEFAULT_FORMULA_MAX_DEPTH) -> ParsedFormula:
    """Parse a formula into a syntax tree.

    Args:
        formula: Formula text. Lexical and blacklist guards are the caller's
            responsibility.
        max_depth: Maximum nesting depth.

    Returns:
        ParsedFormula with the tree and referenced variable names.

    Raises:
        FormulaSyntaxError: If the formula is not in the grammar.
        FormulaTooComplexError: If nesting exceeds ``max_depth``.
    """
    parser = _Parser(tokenize(formula), max_depth)
    try:
        tree = parser.parse()
    except RecursionError:
        raise FormulaTooComplexError("nesting too deep to parse") from None
    return ParsedFormula(tree=tree, names=frozenset(parser.names))


def parse(formula: str, max_depth: int = DEFAULT_FORMULA_MAX_DEPTH) -> Node:
    """Parse a formula and return only its syntax tree."""
    return parse_formula(formula, max_depth).tree
