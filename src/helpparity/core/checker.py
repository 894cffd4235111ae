"""Consistency checker: compares a command's parameter contract with its help.

Rules run in a fixed order and every rule reports a result, pass or fail:

Whole command
  1. UnauthoredSynopsis      synopsis present and not a generated placeholder
  2. MissingDescription      description present
  3. MissingRelatedLink      first related link has a navigation target
Per parameter (filtered registry list, sorted by name)
  4. UndocumentedParameter   a help entry exists; when missing, 5-7 are skipped
  5. EmptyParameterHelp      the help entry has prose
  6. MandatoryMismatch       "true"/"false" rendering matches the help's required flag
  7. TypeNameMismatch        trimmed declared type equals the registry type name
Registry only
  8. MissingPrimaryParameter each primary parameter exists and is mandatory in some set
Opt-in (strict)
  9. StaleParameterHelp      every documented parameter exists in the registry

A failing rule never suppresses another rule or another parameter. A command
the adapters cannot serve yields a single CommandNotFound, HelpNotFound or
InvalidHelp entry.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from helpparity.config.settings import ValidatorSettings
from helpparity.constants import DEFAULT_PLACEHOLDER_MARKERS
from helpparity.core.filtering import exclude
from helpparity.domain.help import HelpRecord, ParameterDoc, RelatedLink
from helpparity.domain.parameters import ParameterDescriptor, find_parameter
from helpparity.domain.report import RuleKind, RuleResult, ValidationRequest
from helpparity.exceptions import CommandNotFoundError, ConfigError, HelpNotFoundError
from helpparity.logging import get_logger

if TYPE_CHECKING:
    from helpparity.protocols import DocumentationAdapter, RegistryAdapter


def render_bool(value: bool) -> str:
    return "true" if value else "false"


# =============================================================================
# Whole-command rules
# =============================================================================


def check_synopsis(
    command_name: str,
    synopsis: str,
    placeholder_markers: Iterable[str] = DEFAULT_PLACEHOLDER_MARKERS,
) -> RuleResult:
    rule = RuleKind.UNAUTHORED_SYNOPSIS
    if not synopsis.strip():
        return RuleResult(
            command_name=command_name, rule=rule, passed=False, details={"reason": "empty"}
        )
    folded = synopsis.casefold()
    for marker in placeholder_markers:
        if marker.casefold() in folded:
            return RuleResult(
                command_name=command_name,
                rule=rule,
                passed=False,
                details={"reason": "placeholder", "marker": marker, "synopsis": synopsis},
            )
    return RuleResult(command_name=command_name, rule=rule, passed=True)


def check_description(command_name: str, description: str) -> RuleResult:
    passed = bool(description.strip())
    return RuleResult(
        command_name=command_name,
        rule=RuleKind.MISSING_DESCRIPTION,
        passed=passed,
        details={} if passed else {"reason": "empty"},
    )


def check_related_links(command_name: str, links: Sequence[RelatedLink]) -> RuleResult:
    rule = RuleKind.MISSING_RELATED_LINK
    if not links:
        return RuleResult(
            command_name=command_name,
            rule=rule,
            passed=False,
            details={"reason": "no related links"},
        )
    first = links[0]
    if not first.has_target:
        return RuleResult(
            command_name=command_name,
            rule=rule,
            passed=False,
            details={"reason": "first link has no target", "text": first.text},
        )
    return RuleResult(
        command_name=command_name, rule=rule, passed=True, details={"uri": first.uri}
    )


# =============================================================================
# Per-parameter rules
# =============================================================================


def check_parameter(
    command_name: str,
    parameter: ParameterDescriptor,
    doc: ParameterDoc | None,
) -> list[RuleResult]:
    """Evaluate rules 4-7 for one parameter.

    An undocumented parameter produces exactly one failing
    UndocumentedParameter entry.
    """
    name = parameter.name
    if doc is None:
        return [
            RuleResult(
                command_name=command_name,
                rule=RuleKind.UNDOCUMENTED_PARAMETER,
                parameter_name=name,
                passed=False,
                details={"reason": "no help entry"},
            )
        ]

    results = [
        RuleResult(
            command_name=command_name,
            rule=RuleKind.UNDOCUMENTED_PARAMETER,
            parameter_name=name,
            passed=True,
        )
    ]

    has_text = bool(doc.text.strip())
    results.append(
        RuleResult(
            command_name=command_name,
            rule=RuleKind.EMPTY_PARAMETER_HELP,
            parameter_name=name,
            passed=has_text,
            details={} if has_text else {"reason": "empty"},
        )
    )

    expected_required = render_bool(parameter.is_mandatory)
    results.append(
        RuleResult(
            command_name=command_name,
            rule=RuleKind.MANDATORY_MISMATCH,
            parameter_name=name,
            passed=expected_required.casefold() == doc.required.casefold(),
            details={"expected": expected_required, "actual": doc.required},
        )
    )

    # Absent and whitespace-only declarations are the same thing
    declared = (doc.declared_type or "").strip()
    results.append(
        RuleResult(
            command_name=command_name,
            rule=RuleKind.TYPE_NAME_MISMATCH,
            parameter_name=name,
            passed=declared == parameter.type_name,
            details={"expected": parameter.type_name, "actual": declared},
        )
    )
    return results


# =============================================================================
# Registry-only and strict rules
# =============================================================================


def check_primary_parameters(
    command_name: str,
    parameters: Sequence[ParameterDescriptor],
    primary_names: Iterable[str],
) -> list[RuleResult]:
    results = []
    for primary in sorted(primary_names, key=str.casefold):
        parameter = find_parameter(parameters, primary)
        if parameter is None:
            passed, details = False, {"reason": "absent"}
        elif not parameter.is_mandatory:
            passed = False
            details = {
                "reason": "optional",
                "parameter_sets": ", ".join(sorted(parameter.parameter_sets)),
            }
        else:
            passed = True
            mandatory_in = [name for name, flag in parameter.parameter_sets.items() if flag]
            details = {"mandatory_in": ", ".join(sorted(mandatory_in))}
        results.append(
            RuleResult(
                command_name=command_name,
                rule=RuleKind.MISSING_PRIMARY_PARAMETER,
                parameter_name=parameter.name if parameter else primary,
                passed=passed,
                details=details,
            )
        )
    return results


def check_stale_documentation(
    command_name: str,
    parameters: Sequence[ParameterDescriptor],
    docs: Sequence[ParameterDoc],
) -> list[RuleResult]:
    results = []
    for doc in sorted(docs, key=lambda d: d.name.casefold()):
        declared = find_parameter(parameters, doc.name) is not None
        results.append(
            RuleResult(
                command_name=command_name,
                rule=RuleKind.STALE_PARAMETER_HELP,
                parameter_name=doc.name,
                passed=declared,
                details={} if declared else {"reason": "documented but not declared"},
            )
        )
    return results


# =============================================================================
# Entry point
# =============================================================================


def compare(
    request: ValidationRequest,
    parameters: Sequence[ParameterDescriptor],
    help_record: HelpRecord,
    settings: ValidatorSettings | None = None,
) -> list[RuleResult]:
    """Run every enabled rule over already-fetched adapter records."""
    settings = settings or ValidatorSettings()
    command_name = request.command_name
    excluded = settings.excluded_parameters

    declared = exclude(parameters, excluded)
    documented = exclude(help_record.parameter_docs.values(), excluded)

    results: list[RuleResult] = [
        check_synopsis(command_name, help_record.synopsis, settings.placeholder_markers),
        check_description(command_name, help_record.description),
        check_related_links(command_name, help_record.related_links),
    ]
    for parameter in declared:
        doc = help_record.find_parameter(parameter.name)
        results.extend(check_parameter(command_name, parameter, doc))
    results.extend(
        check_primary_parameters(command_name, parameters, request.primary_parameter_names)
    )
    if settings.strict:
        results.extend(check_stale_documentation(command_name, declared, documented))

    return [result for result in results if settings.rule_enabled(result.rule)]


def check_command(
    request: ValidationRequest,
    registry: RegistryAdapter,
    docs: DocumentationAdapter,
    settings: ValidatorSettings | None = None,
) -> list[RuleResult]:
    """Validate one command end to end.

    Adapter lookups that fail become a single failing entry for the command;
    they are never raised to the caller.
    """
    command_name = request.command_name
    log = get_logger(command_name)
    try:
        parameters = registry.list_parameters(command_name)
    except CommandNotFoundError as e:
        log.warning(str(e))
        return [_adapter_failure(command_name, RuleKind.COMMAND_NOT_FOUND, e)]
    try:
        help_record = docs.get_help(command_name)
    except HelpNotFoundError as e:
        log.warning(str(e))
        return [_adapter_failure(command_name, RuleKind.HELP_NOT_FOUND, e)]
    except ConfigError as e:
        # One malformed help file must not abort the rest of the batch
        log.warning(f"Invalid help for {command_name}: {e}")
        return [_adapter_failure(command_name, RuleKind.INVALID_HELP, e)]

    results = compare(request, parameters, help_record, settings)
    failed = sum(1 for result in results if not result.passed)
    log.debug(f"{command_name}: {len(results)} check(s), {failed} failed")
    return results


def _adapter_failure(command_name: str, rule: RuleKind, error: Exception) -> RuleResult:
    return RuleResult(
        command_name=command_name, rule=rule, passed=False, details={"error": str(error)}
    )
