"""Text family: counting, case conversion and comparison."""

from __future__ import annotations

import difflib
import re

from freecalc.calc.formatting import to_fixed
from freecalc.calc.handlers.base import CALCULATION_COMPLETE, CalculatorInputs, text_field
from freecalc.calc.registry import UnitSystem

_WHITESPACE = re.compile(r"\s+")
_TITLE_WORD = re.compile(r"\w\S*", re.ASCII)


def count_words(text: str) -> int:
    return len([word for word in _WHITESPACE.split(text.strip()) if word])


def title_case(text: str) -> str:
    """Capitalize the first letter of each word, lowercasing the rest."""
    return _TITLE_WORD.sub(lambda m: m.group(0)[0].upper() + m.group(0)[1:].lower(), text)


def _compare(first: str, second: str) -> str:
    if first == second:
        return "Texts are identical"

    similarity = difflib.SequenceMatcher(None, first, second, autojunk=False).ratio() * 100
    position = next(
        (i for i, (a, b) in enumerate(zip(first, second)) if a != b),
        min(len(first), len(second)),
    )
    return (
        f"Texts differ | Similarity: {to_fixed(similarity, 1)}% | "
        f"First difference at character {position + 1} | "
        f"Words: {count_words(first)} vs {count_words(second)}"
    )


def handle_text(
    calculator_id: str,
    inputs: CalculatorInputs,
    unit_system: UnitSystem = UnitSystem.NEUTRAL,
) -> str:
    """Compute a text calculator; case conversion returns the converted text."""
    text = inputs.get("text") or ""

    if calculator_id == "word-counter":
        return f"Words: {count_words(text)} | Characters: {len(text)}"

    if calculator_id == "character-counter":
        return f"Characters: {len(text)} | Without spaces: {len(_WHITESPACE.sub('', text))}"

    if calculator_id == "case-converter":
        case = text_field(inputs, "case", "upper")
        if case == "upper":
            return text.upper()
        if case == "lower":
            return text.lower()
        if case == "title":
            return title_case(text)
        return text

    if calculator_id == "text-compare":
        return _compare(inputs.get("text1") or "", inputs.get("text2") or "")

    return CALCULATION_COMPLETE
