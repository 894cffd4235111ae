"""Report exporters: JSON and CI annotations.

Where the output goes (console, file, CI log) is the caller's concern;
these functions only render, except ``save_report`` which writes atomically.
"""

from __future__ import annotations

import contextlib
import json
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from loguru import logger

from helpparity.constants import SCHEMA_VERSION
from helpparity.domain.report import ValidationReport
from helpparity.results.emitter import describe, summarize


def report_to_dict(report: ValidationReport) -> dict[str, Any]:
    summary = summarize(report)
    return {
        "schema_version": SCHEMA_VERSION,
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "passed": report.passed,
        "summary": {
            "commands": summary.commands,
            "checks": summary.checks,
            "passed": summary.passed,
            "failed": summary.failed,
            "failures_by_rule": summary.failures_by_rule,
        },
        "results": [result.model_dump(mode="json") for result in report.results],
    }


def to_json(report: ValidationReport, indent: int = 2) -> str:
    return json.dumps(report_to_dict(report), indent=indent)


def _escape_annotation(value: str) -> str:
    # GitHub workflow command encoding
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def to_github_annotations(report: ValidationReport) -> list[str]:
    """Render failures as GitHub Actions ``::error`` workflow commands."""
    lines = []
    for result in report.failures:
        title = _escape_annotation(result.label).replace(",", "%2C").replace("::", "%3A%3A")
        lines.append(f"::error title={title}::{_escape_annotation(describe(result))}")
    return lines


def save_report(report: ValidationReport, path: Path) -> Path:
    """Write the JSON report to ``path`` via temp file + os.replace()."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_fd, tmp_path = tempfile.mkstemp(dir=path.parent, suffix=".tmp", prefix=path.stem)
    try:
        with os.fdopen(tmp_fd, "w", encoding="utf-8") as f:
            f.write(to_json(report))
        os.replace(tmp_path, path)
    except Exception:
        with contextlib.suppress(OSError):
            os.unlink(tmp_path)
        raise
    logger.debug(f"Report written to {path}")
    return path
