"""Rich rendering for CLI output.

Report tables go to stdout; errors go to stderr.
"""

from __future__ import annotations

import sys
import traceback

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from helpparity.config.settings import ValidatorSettings
from helpparity.domain.parameters import ParameterDescriptor
from helpparity.domain.report import ValidationReport
from helpparity.exceptions import HelpParityError
from helpparity.results.emitter import describe, summarize

console = Console()


def print_report(report: ValidationReport, show_passed: bool = False) -> None:
    """Print the report as a table, then a one-line summary."""
    rows = report.results if show_passed else report.failures
    if rows:
        table = Table(title="Help Parity Report")
        table.add_column("Command", style="bold")
        table.add_column("Parameter", style="cyan")
        table.add_column("Rule")
        table.add_column("Status")
        table.add_column("Details", style="dim")
        for result in rows:
            status = "[green]pass[/green]" if result.passed else "[red]FAIL[/red]"
            table.add_row(
                escape(result.command_name),
                escape(result.parameter_name or ""),
                str(result.rule),
                status,
                escape(describe(result)) if not result.passed else "",
            )
        console.print(table)

    summary = summarize(report)
    if summary.success:
        console.print(
            f"[green]All {summary.checks} check(s) passed[/green] "
            f"across {summary.commands} command(s)"
        )
    else:
        console.print(
            f"[red]{summary.failed} of {summary.checks} check(s) failed[/red] "
            f"in {len(summary.failed_commands)} of {summary.commands} command(s)"
        )
        for rule, count in summary.failures_by_rule.items():
            console.print(f"  {rule}: {count}")


def print_parameters(command_name: str, parameters: list[ParameterDescriptor]) -> None:
    table = Table(title=command_name)
    table.add_column("Parameter", style="bold")
    table.add_column("Type", style="cyan")
    table.add_column("Mandatory")
    table.add_column("Parameter sets", style="dim")
    for parameter in parameters:
        table.add_row(
            escape(parameter.name),
            escape(parameter.type_name),
            "yes" if parameter.is_mandatory else "no",
            escape(", ".join(parameter.parameter_sets)),
        )
    console.print(table)


def print_settings(settings: ValidatorSettings, user_config: str, manifest: str | None) -> None:
    table = Table(title="Effective Settings")
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    table.add_row("User config", escape(user_config))
    table.add_row("Manifest", escape(manifest or "not found"))
    table.add_row("Strict", str(settings.strict))
    table.add_row("Jobs", "auto" if settings.jobs == 0 else str(settings.jobs))
    table.add_row("Output format", settings.output_format)
    table.add_row("Placeholder markers", escape(" | ".join(settings.placeholder_markers)))
    table.add_row("Excluded parameters", ", ".join(sorted(settings.excluded_parameters)))
    disabled = sorted(str(rule) for rule in settings.disabled_rules)
    table.add_row("Disabled rules", ", ".join(disabled) or "[dim]none[/dim]")
    console.print(table)


def format_error(error: HelpParityError, verbose: bool = False) -> str:
    """Format an error for stderr, with traceback in verbose mode."""
    message = f"{type(error).__name__}: {error}"
    if verbose:
        message += "\n" + "".join(traceback.format_exception(error))
    return message


def print_error(error: HelpParityError, verbose: bool = False) -> None:
    print(format_error(error, verbose=verbose), file=sys.stderr)
