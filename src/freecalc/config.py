"""Environment-driven configuration for the formula sandbox.

Environment variables:
    FREECALC_FORMULA_MAX_LENGTH: Maximum accepted formula length in characters.
    FREECALC_FORMULA_MAX_DEPTH: Maximum parser nesting depth (parentheses,
        unary chains, ternaries, function calls).

Values are validated when loaded; an invalid value is a configuration error,
never a silent default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final

ENV_FORMULA_MAX_LENGTH: Final[str] = "FREECALC_FORMULA_MAX_LENGTH"
ENV_FORMULA_MAX_DEPTH: Final[str] = "FREECALC_FORMULA_MAX_DEPTH"

DEFAULT_FORMULA_MAX_LENGTH: Final[int] = 1000
DEFAULT_FORMULA_MAX_DEPTH: Final[int] = 64


class ConfigError(Exception):
    """Raised when configuration from the environment is invalid."""


@dataclass(frozen=True)
class SandboxConfig:
    """Formula sandbox limits (immutable).

    Attributes:
        max_formula_length: Formulas longer than this are rejected before parsing.
        max_depth: Maximum nesting depth accepted by the parser.
    """

    max_formula_length: int = DEFAULT_FORMULA_MAX_LENGTH
    max_depth: int = DEFAULT_FORMULA_MAX_DEPTH

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.max_formula_length <= 0:
            raise ConfigError(
                f"{ENV_FORMULA_MAX_LENGTH} must be a positive integer, "
                f"got {self.max_formula_length}"
            )
        if self.max_depth <= 0:
            raise ConfigError(
                f"{ENV_FORMULA_MAX_DEPTH} must be a positive integer, got {self.max_depth}"
            )


def _parse_positive_int(env_var: str, default: int) -> int:
    """Parse a positive integer from an environment variable.

    Args:
        env_var: Environment variable name.
        default: Value used when the variable is unset or blank.

    Returns:
        Parsed positive integer.

    Raises:
        ConfigError: If the value is set but not a positive integer.
    """
    raw = os.environ.get(env_var)
    if raw is None:
        return default

    raw = raw.strip()
    if not raw:
        return default

    try:
        value = int(raw)
    except ValueError as e:
        raise ConfigError(f"{env_var} must be a positive integer, got '{raw}'") from e

    if value <= 0:
        raise ConfigError(f"{env_var} must be a positive integer, got {value}")

    return value


def load_sandbox_config() -> SandboxConfig:
    """Load sandbox limits from environment variables.

    Returns:
        SandboxConfig with validated values.

    Raises:
        ConfigError: If any value is invalid.
    """
    return SandboxConfig(
        max_formula_length=_parse_positive_int(
            ENV_FORMULA_MAX_LENGTH, DEFAULT_FORMULA_MAX_LENGTH
        ),
        max_depth=_parse_positive_int(ENV_FORMULA_MAX_DEPTH, DEFAULT_FORMULA_MAX_DEPTH),
    )
