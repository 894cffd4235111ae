"""Batch validation across many commands.

Each command's validation is independent and side-effect free, so commands
fan out to a thread pool when more than one job is requested. Results are
gathered in completion order and sorted once, when the report is emitted.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import TYPE_CHECKING

from loguru import logger

from helpparity.config.settings import ValidatorSettings
from helpparity.core.checker import check_command
from helpparity.domain.report import RuleResult, ValidationReport, ValidationRequest
from helpparity.results.emitter import emit

if TYPE_CHECKING:
    from helpparity.protocols import DocumentationAdapter, RegistryAdapter


def resolve_jobs(jobs: int, n_commands: int) -> int:
    """Number of workers to use: 0 means one per CPU, never more than commands."""
    if jobs <= 0:
        jobs = os.cpu_count() or 1
    return max(1, min(jobs, n_commands))


def validate_commands(
    requests: Sequence[ValidationRequest],
    registry: RegistryAdapter,
    docs: DocumentationAdapter,
    settings: ValidatorSettings | None = None,
    jobs: int | None = None,
) -> ValidationReport:
    """Validate every requested command and return the combined report.

    Args:
        requests: One request per command.
        registry: Source of declared parameters.
        docs: Source of help records.
        settings: Validator settings (defaults when None).
        jobs: Worker count override; falls back to ``settings.jobs``.

    Returns:
        Report sorted by command name, each command's results in rule order.
    """
    settings = settings or ValidatorSettings()
    workers = resolve_jobs(settings.jobs if jobs is None else jobs, len(requests))
    collected: list[list[RuleResult]] = []

    if workers > 1:
        logger.debug(f"Validating {len(requests)} command(s) with {workers} workers")
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = {
                executor.submit(check_command, request, registry, docs, settings): request
                for request in requests
            }
            for future in as_completed(futures):
                collected.append(future.result())
    else:
        for request in requests:
            collected.append(check_command(request, registry, docs, settings))

    report = emit(result for results in collected for result in results)
    logger.info(
        f"Validated {len(report.commands)} command(s): "
        f"{len(report.failures)} failure(s) in {len(report.results)} check(s)"
    )
    return report
