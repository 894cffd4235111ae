"""Report emitter: orders rule outcomes and summarises them for gating."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field

from helpparity.domain.report import RuleKind, RuleResult, ValidationReport


@dataclass
class ReportSummary:
    """Counts derived from a report."""

    commands: int = 0
    checks: int = 0
    passed: int = 0
    failed: int = 0
    failures_by_rule: dict[str, int] = field(default_factory=dict)
    failed_commands: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.failed == 0


def emit(results: Iterable[RuleResult]) -> ValidationReport:
    """Build a report ordered by command name.

    The sort is stable, so each command keeps its results in rule order
    regardless of the order commands finished in.
    """
    ordered = sorted(results, key=lambda result: result.command_name.casefold())
    return ValidationReport(results=ordered)


def summarize(report: ValidationReport) -> ReportSummary:
    failures = report.failures
    by_rule = Counter(str(result.rule) for result in failures)
    return ReportSummary(
        commands=len(report.commands),
        checks=len(report.results),
        passed=len(report.results) - len(failures),
        failed=len(failures),
        failures_by_rule=dict(sorted(by_rule.items())),
        failed_commands=list(dict.fromkeys(result.command_name for result in failures)),
    )


def describe(result: RuleResult) -> str:
    """One-line explanation of a rule outcome."""
    if result.passed:
        return "ok"
    details = result.details
    match result.rule:
        case RuleKind.COMMAND_NOT_FOUND | RuleKind.HELP_NOT_FOUND | RuleKind.INVALID_HELP:
            return details.get("error", str(result.rule))
        case RuleKind.UNAUTHORED_SYNOPSIS:
            if details.get("reason") == "placeholder":
                return f"synopsis contains placeholder '{details.get('marker', '')}'"
            return "synopsis is empty"
        case RuleKind.MISSING_DESCRIPTION:
            return "description is empty"
        case RuleKind.MISSING_RELATED_LINK:
            return details.get("reason", "no related link")
        case RuleKind.UNDOCUMENTED_PARAMETER:
            return "parameter has no help entry"
        case RuleKind.EMPTY_PARAMETER_HELP:
            return "parameter help text is empty"
        case RuleKind.MANDATORY_MISMATCH | RuleKind.TYPE_NAME_MISMATCH:
            return f"expected '{details.get('expected', '')}', help says '{details.get('actual', '')}'"
        case RuleKind.MISSING_PRIMARY_PARAMETER:
            if details.get("reason") == "absent":
                return "primary parameter is not declared"
            return "primary parameter is not mandatory in any parameter set"
        case RuleKind.STALE_PARAMETER_HELP:
            return "documented parameter is not declared by the command"
    return str(result.rule)
