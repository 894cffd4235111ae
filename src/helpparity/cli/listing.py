"""helpparity list -- show the parameter contracts a registry declares."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from helpparity.adapters import build_registry
from helpparity.cli._display import console, print_error, print_parameters
from helpparity.config.loader import load_manifest
from helpparity.config.settings import load_settings
from helpparity.constants import DEFAULT_MANIFEST
from helpparity.core.filtering import exclude
from helpparity.exceptions import ConfigError


def list_cmd(
    manifest: Annotated[
        Path | None,
        typer.Option("--manifest", "-m", help="Manifest file (default: ./helpparity.yaml)"),
    ] = None,
    all_parameters: Annotated[
        bool,
        typer.Option("--all", "-a", help="Include framework-common parameters"),
    ] = False,
) -> None:
    """List registered commands and the parameters they declare."""
    manifest_path = manifest or DEFAULT_MANIFEST
    try:
        loaded = load_manifest(manifest_path)
        settings = load_settings(manifest_overrides=loaded.settings)
        registry = build_registry(loaded)
    except ConfigError as e:
        print_error(e)
        raise typer.Exit(code=2) from None

    names = registry.list_commands()
    if not names:
        console.print(f"[yellow]No commands registered in {manifest_path}[/yellow]")
        return

    for name in names:
        parameters = registry.list_parameters(name)
        if not all_parameters:
            parameters = exclude(parameters, settings.excluded_parameters)
        print_parameters(name, parameters)

    console.print(f"\n{len(names)} command(s)")
