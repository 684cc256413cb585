"""Generator family: password generation."""

from __future__ import annotations

import secrets
import string

from freecalc.calc.handlers.base import GENERATED_SUCCESSFULLY, CalculatorInputs, integer
from freecalc.calc.handlers.random_gen import clamp_count
from freecalc.calc.registry import UnitSystem

PASSWORD_ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits + "!@#$%^&*"


def generate_password(length: int) -> str:
    return "".join(secrets.choice(PASSWORD_ALPHABET) for _ in range(clamp_count(length)))


def handle_generator(
    calculator_id: str,
    inputs: CalculatorInputs,
    unit_system: UnitSystem = UnitSystem.NEUTRAL,
) -> str:
    """Generate a password of ``length`` characters (default 12)."""
    if calculator_id == "password-generator":
        return f"Generated Password: {generate_password(integer(inputs, 'length', 12))}"
    return GENERATED_SUCCESSFULLY
