"""helpparity -- keep command parameter contracts and help documentation in sync.

Public API:
    validate, check_command, validate_commands, load_manifest,
    ValidationRequest, ValidationReport, RuleKind, __version__

Stability contract: exports in __all__ follow SemVer. Names not in __all__
are internal and may change without notice.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from helpparity.adapters import build_documentation, build_registry
from helpparity.config.loader import load_manifest
from helpparity.config.settings import ValidatorSettings, load_settings
from helpparity.constants import DEFAULT_MANIFEST
from helpparity.core.checker import check_command
from helpparity.core.runner import validate_commands
from helpparity.domain.report import RuleKind, RuleResult, ValidationReport, ValidationRequest

__version__: str = "0.4.0"


def validate(
    manifest_path: Path | str | None = None,
    commands: list[str] | None = None,
    settings_overrides: dict[str, Any] | None = None,
    user_config_path: Path | None = None,
) -> ValidationReport:
    """Validate commands described by a manifest.

    Args:
        manifest_path: Manifest file. None = HELPPARITY_MANIFEST or ./helpparity.yaml.
        commands: Command names to validate. None = every manifest command.
        settings_overrides: Highest-priority settings (same keys as ValidatorSettings).
        user_config_path: Explicit user config file (for testing).

    Returns:
        The combined ValidationReport.

    Raises:
        ConfigError: Invalid manifest, settings, help files or click target.
    """
    manifest = load_manifest(manifest_path or DEFAULT_MANIFEST)
    settings = load_settings(
        config_path=user_config_path,
        manifest_overrides=manifest.settings,
        cli_overrides=settings_overrides,
    )
    registry = build_registry(manifest)
    docs = build_documentation(manifest)
    return validate_commands(manifest.requests(commands), registry, docs, settings)


__all__ = [
    "RuleKind",
    "RuleResult",
    "ValidationReport",
    "ValidationRequest",
    "ValidatorSettings",
    "__version__",
    "check_command",
    "load_manifest",
    "validate",
    "validate_commands",
]
