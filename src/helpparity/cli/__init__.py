"""Command-line interface for helpparity.

Provides commands for:
- Checking commands against their help records
- Listing the parameter contracts a registry declares
- Showing effective validator settings
"""

from __future__ import annotations

# Load .env file BEFORE any helpparity imports (constants reads env vars at import time)
from dotenv import load_dotenv

load_dotenv()

# ruff: noqa: E402 - imports must come after load_dotenv()
import os
from typing import Annotated

import typer

from helpparity import __version__
from helpparity.cli._display import console
from helpparity.logging import VERBOSITY_ENV, VerbosityType, setup_logging

app = typer.Typer(
    name="helpparity",
    help="Check that command parameter contracts and help documentation agree",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"helpparity v{__version__}")
        raise typer.Exit()


@app.callback()  # type: ignore[misc]
def main(
    version: Annotated[
        bool,
        typer.Option("--version", callback=version_callback, is_eager=True),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable full logs with timestamps")
    ] = False,
    quiet: Annotated[
        bool, typer.Option("--quiet", "-q", help="Minimal output (warnings only)")
    ] = False,
    json_logs: Annotated[
        bool, typer.Option("--json-logs", help="Emit logs as JSON (machine-readable)")
    ] = False,
) -> None:
    """Check that command parameter contracts and help documentation agree."""
    verbosity: VerbosityType
    if quiet:
        verbosity = "quiet"
    elif verbose:
        verbosity = "verbose"
    else:
        verbosity = "normal"

    os.environ[VERBOSITY_ENV] = verbosity
    setup_logging(verbosity=verbosity, json_output=json_logs)


def _register_commands() -> None:
    """Register all commands with the app.

    Done in a function to control import order and avoid circular imports.
    """
    from helpparity.cli import check, config_cmd, listing

    app.command("check")(check.check_cmd)
    app.command("list")(listing.list_cmd)
    app.command("config")(config_cmd.config_cmd)


_register_commands()

__all__ = ["app"]
