"""Tests for environment-driven sandbox configuration."""

from __future__ import annotations

import pytest

from freecalc.config import (
    DEFAULT_FORMULA_MAX_DEPTH,
    DEFAULT_FORMULA_MAX_LENGTH,
    ENV_FORMULA_MAX_DEPTH,
    ENV_FORMULA_MAX_LENGTH,
    ConfigError,
    SandboxConfig,
    load_sandbox_config,
)


class TestLoadSandboxConfig:
    """Tests for load_sandbox_config()."""

    def test_defaults(self) -> None:
        """Unset variables use the defaults."""
        config = load_sandbox_config()
        assert config.max_formula_length == DEFAULT_FORMULA_MAX_LENGTH == 1000
        assert config.max_depth == DEFAULT_FORMULA_MAX_DEPTH == 64

    def test_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Set variables override the defaults."""
        monkeypatch.setenv(ENV_FORMULA_MAX_LENGTH, "250")
        monkeypatch.setenv(ENV_FORMULA_MAX_DEPTH, " 16 ")

        config = load_sandbox_config()
        assert config == SandboxConfig(max_formula_length=250, max_depth=16)

    def test_blank_uses_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A blank value counts as unset."""
        monkeypatch.setenv(ENV_FORMULA_MAX_DEPTH, "   ")
        assert load_sandbox_config().max_depth == DEFAULT_FORMULA_MAX_DEPTH

    @pytest.mark.parametrize("raw", ["abc", "1.5", "0", "-3"])
    def test_invalid_values(self, monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
        """Anything but a positive integer is a configuration error."""
        monkeypatch.setenv(ENV_FORMULA_MAX_LENGTH, raw)
        with pytest.raises(ConfigError, match=ENV_FORMULA_MAX_LENGTH):
            load_sandbox_config()


class TestSandboxConfig:
    """Tests for SandboxConfig validation."""

    def test_rejects_non_positive(self) -> None:
        """Limits must be positive."""
        with pytest.raises(ConfigError):
            SandboxConfig(max_formula_length=0)
        with pytest.raises(ConfigError):
            SandboxConfig(max_depth=-1)

    def test_immutable(self) -> None:
        """Configs are frozen."""
        config = SandboxConfig()
        with pytest.raises(AttributeError):
            config.max_depth = 5  # type: ignore[misc]
