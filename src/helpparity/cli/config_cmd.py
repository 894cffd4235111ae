"""helpparity config -- show effective validator settings.

Purely informational: always exits 0, even when a layer fails to load.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

import typer

from helpparity.cli._display import console, print_settings
from helpparity.config.loader import load_manifest
from helpparity.config.settings import ValidatorSettings, get_user_config_path, load_settings
from helpparity.constants import DEFAULT_MANIFEST
from helpparity.exceptions import ConfigError


def config_cmd(
    manifest: Annotated[
        Path | None,
        typer.Option("--manifest", "-m", help="Manifest file (default: ./helpparity.yaml)"),
    ] = None,
) -> None:
    """Show effective settings and where they come from."""
    manifest_path = manifest or DEFAULT_MANIFEST
    user_config = get_user_config_path()
    user_label = str(user_config) if user_config.exists() else f"{user_config} (not present)"

    manifest_settings: dict[str, Any] = {}
    manifest_label: str | None = None
    if manifest_path.exists():
        try:
            manifest_settings = load_manifest(manifest_path).settings
            manifest_label = str(manifest_path)
        except ConfigError as e:
            console.print(f"[yellow]Manifest ignored:[/yellow] {e}")

    try:
        settings = load_settings(manifest_overrides=manifest_settings)
    except ConfigError as e:
        console.print(f"[yellow]Falling back to defaults:[/yellow] {e}")
        settings = ValidatorSettings()

    print_settings(settings, user_label, manifest_label)
