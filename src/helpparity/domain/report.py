"""Validation requests, rule outcomes and reports."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class RuleKind(str, Enum):
    """Rules evaluated per command, in evaluation order.

    CommandNotFound, HelpNotFound and InvalidHelp are adapter failures rather
    than rules; they appear in reports as the single entry for a command that
    could not be validated.
    """

    UNAUTHORED_SYNOPSIS = "UnauthoredSynopsis"
    MISSING_DESCRIPTION = "MissingDescription"
    MISSING_RELATED_LINK = "MissingRelatedLink"
    UNDOCUMENTED_PARAMETER = "UndocumentedParameter"
    EMPTY_PARAMETER_HELP = "EmptyParameterHelp"
    MANDATORY_MISMATCH = "MandatoryMismatch"
    TYPE_NAME_MISMATCH = "TypeNameMismatch"
    MISSING_PRIMARY_PARAMETER = "MissingPrimaryParameter"
    STALE_PARAMETER_HELP = "StaleParameterHelp"
    COMMAND_NOT_FOUND = "CommandNotFound"
    HELP_NOT_FOUND = "HelpNotFound"
    INVALID_HELP = "InvalidHelp"

    def __str__(self) -> str:
        return self.value

    @property
    def is_adapter_error(self) -> bool:
        return self in (RuleKind.COMMAND_NOT_FOUND, RuleKind.HELP_NOT_FOUND, RuleKind.INVALID_HELP)


class ValidationRequest(BaseModel):
    """What to validate: one command plus its primary parameter names."""

    model_config = {"frozen": True}

    command_name: str = Field(..., min_length=1)
    primary_parameter_names: frozenset[str] = Field(default_factory=frozenset)


class RuleResult(BaseModel):
    """Outcome of one rule for one command (and optionally one parameter)."""

    model_config = {"frozen": True}

    command_name: str
    rule: RuleKind
    parameter_name: str | None = None
    passed: bool
    details: dict[str, str] = Field(default_factory=dict)

    @property
    def label(self) -> str:
        """Human-readable ``command[/parameter]: rule`` label."""
        target = self.command_name
        if self.parameter_name:
            target = f"{target}/{self.parameter_name}"
        return f"{target}: {self.rule}"


class ValidationReport(BaseModel):
    """Ordered rule outcomes for one or more commands."""

    model_config = {"frozen": True}

    results: list[RuleResult] = Field(default_factory=list)

    @property
    def passed(self) -> bool:
        """Gating boolean: True when every rule passed."""
        return all(result.passed for result in self.results)

    @property
    def failures(self) -> list[RuleResult]:
        return [result for result in self.results if not result.passed]

    @property
    def commands(self) -> list[str]:
        """Command names in report order, without duplicates."""
        return list(dict.fromkeys(result.command_name for result in self.results))

    def for_command(self, command_name: str) -> list[RuleResult]:
        key = command_name.casefold()
        return [r for r in self.results if r.command_name.casefold() == key]
