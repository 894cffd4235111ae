"""Validator settings.

Precedence (low -> high):
  built-in defaults < user config file < manifest ``settings`` block
  < HELPPARITY_* env vars < CLI flags

The user config file lives at ``~/.config/helpparity/config.yaml`` (XDG path
via platformdirs). A missing file silently applies defaults; invalid YAML or
schema raises ConfigError.
"""

from __future__ import annotations

import contextlib
import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from helpparity.config.loader import deep_merge, format_validation_error
from helpparity.constants import (
    DEFAULT_PLACEHOLDER_MARKERS,
    ENV_PREFIX,
    EXCLUDED_PARAMETERS,
)
from helpparity.domain.report import RuleKind
from helpparity.exceptions import ConfigError


class ValidatorSettings(BaseModel):
    """Tunables for a validation run. Frozen once a run starts."""

    model_config = {"extra": "forbid", "frozen": True}

    placeholder_markers: tuple[str, ...] = Field(
        default=DEFAULT_PLACEHOLDER_MARKERS,
        description="Synopsis substrings that mark unauthored, generated help",
    )
    extra_excluded_parameters: frozenset[str] = Field(
        default_factory=frozenset,
        description="Parameter names excluded in addition to the common set",
    )
    disabled_rules: frozenset[RuleKind] = Field(
        default_factory=frozenset, description="Rule kinds to skip entirely"
    )
    strict: bool = Field(
        default=False, description="Also flag documented parameters the registry lacks"
    )
    jobs: int = Field(default=1, ge=0, description="Worker threads (0 = one per CPU)")
    output_format: Literal["table", "json", "github"] = Field(default="table")

    @field_validator("placeholder_markers")
    @classmethod
    def drop_blank_markers(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(marker for marker in value if marker.strip())

    @field_validator("disabled_rules")
    @classmethod
    def adapter_errors_cannot_be_disabled(cls, value: frozenset[RuleKind]) -> frozenset[RuleKind]:
        blocked = sorted(str(rule) for rule in value if rule.is_adapter_error)
        if blocked:
            raise ValueError(f"adapter failures cannot be disabled: {', '.join(blocked)}")
        return value

    @property
    def excluded_parameters(self) -> frozenset[str]:
        """Effective excluded parameter names for this run."""
        return EXCLUDED_PARAMETERS | self.extra_excluded_parameters

    def rule_enabled(self, rule: RuleKind) -> bool:
        if rule == RuleKind.STALE_PARAMETER_HELP and not self.strict:
            return False
        return rule not in self.disabled_rules


def get_user_config_path() -> Path:
    """Return the XDG-compliant user config path.

    Linux:   ~/.config/helpparity/config.yaml
    macOS:   ~/Library/Application Support/helpparity/config.yaml
    Windows: %APPDATA%\\helpparity\\config.yaml

    HELPPARITY_CONFIG replaces the path entirely.
    """
    if override := os.environ.get(f"{ENV_PREFIX}CONFIG"):
        return Path(override).expanduser()

    from platformdirs import user_config_dir

    return Path(user_config_dir("helpparity")) / "config.yaml"


def _split_list(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def env_overrides() -> dict[str, Any]:
    """Collect HELPPARITY_* environment overrides as a settings dict."""
    overrides: dict[str, Any] = {}
    if val := os.environ.get(f"{ENV_PREFIX}STRICT"):
        overrides["strict"] = val.strip().lower() in ("1", "true", "yes", "on")
    if val := os.environ.get(f"{ENV_PREFIX}JOBS"):
        with contextlib.suppress(ValueError):
            overrides["jobs"] = int(val)
    if val := os.environ.get(f"{ENV_PREFIX}FORMAT"):
        overrides["output_format"] = val.strip().lower()
    if val := os.environ.get(f"{ENV_PREFIX}EXCLUDE"):
        overrides["extra_excluded_parameters"] = _split_list(val)
    if val := os.environ.get(f"{ENV_PREFIX}DISABLED_RULES"):
        overrides["disabled_rules"] = _split_list(val)
    if val := os.environ.get(f"{ENV_PREFIX}PLACEHOLDER_MARKERS"):
        overrides["placeholder_markers"] = _split_list(val)
    return overrides


def _load_user_settings(config_path: Path) -> dict[str, Any]:
    if not config_path.exists():
        return {}
    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in user config {config_path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"User config must be a YAML mapping: {config_path}")
    return data


def load_settings(
    config_path: Path | None = None,
    manifest_overrides: dict[str, Any] | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> ValidatorSettings:
    """Resolve validator settings from every layer.

    Args:
        config_path: Explicit user config path (for testing). None = XDG default.
        manifest_overrides: The manifest's ``settings`` block.
        cli_overrides: CLI flag values; None values are ignored (unset flags).

    Returns:
        Frozen ValidatorSettings.

    Raises:
        ConfigError: Invalid user config file or invalid merged values.
    """
    path = config_path or get_user_config_path()

    merged: dict[str, Any] = _load_user_settings(path)
    if manifest_overrides:
        merged = deep_merge(merged, manifest_overrides)
    merged = deep_merge(merged, env_overrides())
    if cli_overrides:
        merged = deep_merge(merged, {k: v for k, v in cli_overrides.items() if v is not None})

    try:
        return ValidatorSettings.model_validate(merged)
    except ValidationError as e:
        raise ConfigError(format_validation_error(e)) from e


__all__ = ["ValidatorSettings", "env_overrides", "get_user_config_path", "load_settings"]
