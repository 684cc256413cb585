"""Tokenizer for the formula grammar."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Final

from freecalc.sandbox.errors import FormulaSyntaxError


class TokenKind(StrEnum):
    NUMBER = "number"
    NAME = "name"
    OPERATOR = "operator"
    LPAREN = "("
    RPAREN = ")"
    COMMA = ","
    QUESTION = "?"
    COLON = ":"
    END = "end"


@dataclass(frozen=True)
class Token:
    """A lexical token and its offset in the formula."""

    kind: TokenKind
    text: str
    position: int


# Longest operators first so "<=" wins over "<".
OPERATORS: Final[tuple[str, ...]] = (
    "===",
    "!==",
    "**",
    "<=",
    ">=",
    "==",
    "!=",
    "&&",
    "||",
    "+",
    "-",
    "*",
    "/",
    "<",
    ">",
    "!",
    "&",
    "|",
)

# "Math." is accepted as a namespace prefix so "Math.sqrt(x)" reads as "sqrt(x)".
_NAMESPACE_PREFIX: Final = re.compile(r"Math\.(?=[A-Za-z_])")
_NUMBER: Final = re.compile(r"(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_NAME: Final = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_WHITESPACE: Final = re.compile(r"\s+")

_PUNCTUATION: Final[dict[str, TokenKind]] = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    ",": TokenKind.COMMA,
    "?": TokenKind.QUESTION,
    ":": TokenKind.COLON,
}


def tokenize(formula: str) -> list[Token]:
    """Split a formula into tokens, ending with a single END token.

    Raises:
        FormulaSyntaxError: On a character sequence that is not a token.
    """
    tokens: list[Token] = []
    position = 0
    length = len(formula)

    while position < length:
        match = _WHITESPACE.match(formula, position)
        if match:
            position = match.end()
            continue

        match = _NAMESPACE_PREFIX.match(formula, position)
        if match:
            position = match.end()
            continue

        char = formula[position]
        if char in _PUNCTUATION:
            tokens.append(Token(_PUNCTUATION[char], char, position))
            position += 1
            continue

        match = _NUMBER.match(formula, position)
        if match:
            tokens.append(Token(TokenKind.NUMBER, match.group(0), position))
            position = match.end()
            continue

        match = _NAME.match(formula, position)
        if match:
            tokens.append(Token(TokenKind.NAME, match.group(0), position))
            position = match.end()
            continue

        for operator in OPERATORS:
            if formula.startswith(operator, position):
                tokens.append(Token(TokenKind.OPERATOR, operator, position))
                position += len(operator)
                break
        else:
            raise FormulaSyntaxError(f"Unexpected character '{char}'", position)

    tokens.append(Token(TokenKind.END, "", length))
    return tokens
