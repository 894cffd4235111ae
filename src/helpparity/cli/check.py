"""helpparity check -- validate commands against their help records."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from helpparity.adapters import build_documentation, build_registry
from helpparity.cli._display import console, print_error, print_report
from helpparity.config.loader import load_manifest
from helpparity.config.settings import load_settings
from helpparity.constants import DEFAULT_MANIFEST
from helpparity.core.runner import validate_commands
from helpparity.domain.report import ValidationReport
from helpparity.exceptions import ConfigError
from helpparity.results.exporters import save_report, to_github_annotations, to_json


def check_cmd(
    commands: Annotated[
        list[str] | None,
        typer.Argument(help="Command names to validate (default: every manifest command)"),
    ] = None,
    manifest: Annotated[
        Path | None,
        typer.Option("--manifest", "-m", help="Manifest file (default: ./helpparity.yaml)"),
    ] = None,
    output_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Report format: table, json or github"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Also write the JSON report to this file"),
    ] = None,
    jobs: Annotated[
        int | None,
        typer.Option("--jobs", "-j", help="Parallel workers (0 = one per CPU)"),
    ] = None,
    strict: Annotated[
        bool | None,
        typer.Option("--strict/--no-strict", help="Flag documented parameters the command lacks"),
    ] = None,
    show_passed: Annotated[
        bool,
        typer.Option("--show-passed", help="Include passing checks in the table"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show tracebacks on errors"),
    ] = False,
) -> None:
    """Check commands against their help records and fail on any drift."""
    try:
        report, output_format = _check_impl(
            commands=commands,
            manifest_path=manifest or DEFAULT_MANIFEST,
            output_format=output_format,
            jobs=jobs,
            strict=strict,
        )
    except ConfigError as e:
        print_error(e, verbose=verbose)
        raise typer.Exit(code=2) from None

    if output_format == "json":
        print(to_json(report))
    elif output_format == "github":
        for line in to_github_annotations(report):
            print(line)
        print_report(report, show_passed=False)
    else:
        print_report(report, show_passed=show_passed)

    if output is not None:
        path = save_report(report, output)
        if output_format != "json":
            console.print(f"[dim]Report saved to {path}[/dim]")

    if not report.passed:
        raise typer.Exit(code=1)


def _check_impl(
    commands: list[str] | None,
    manifest_path: Path,
    output_format: str | None,
    jobs: int | None,
    strict: bool | None,
) -> tuple[ValidationReport, str]:
    manifest = load_manifest(manifest_path)
    settings = load_settings(
        manifest_overrides=manifest.settings,
        cli_overrides={
            "output_format": output_format.lower() if output_format else None,
            "jobs": jobs,
            "strict": strict,
        },
    )
    registry = build_registry(manifest)
    docs = build_documentation(manifest)

    requests = manifest.requests(commands)
    if not requests:
        requests = manifest.requests(registry.list_commands())
    if not requests:
        raise ConfigError(f"No commands to validate (manifest {manifest_path} lists none)")

    logger.debug(f"Checking {len(requests)} command(s) from {manifest_path}")
    report = validate_commands(requests, registry, docs, settings)
    return report, settings.output_format
