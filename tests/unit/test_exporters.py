"""Tests for JSON and GitHub annotation exporters."""

from __future__ import annotations

import json
from pathlib import Path

from helpparity.constants import SCHEMA_VERSION
from helpparity.domain.report import RuleKind, RuleResult, ValidationReport
from helpparity.results.exporters import (
    report_to_dict,
    save_report,
    to_github_annotations,
    to_json,
)


def _report() -> ValidationReport:
    return ValidationReport(
        results=[
            RuleResult(command_name="Cmd", rule=RuleKind.MISSING_DESCRIPTION, passed=True),
            RuleResult(
                command_name="Cmd",
                rule=RuleKind.MANDATORY_MISMATCH,
                parameter_name="target",
                passed=False,
                details={"expected": "true", "actual": "false"},
            ),
        ]
    )


def test_report_to_dict():
    data = report_to_dict(_report())
    assert data["schema_version"] == SCHEMA_VERSION
    assert data["passed"] is False
    assert data["summary"]["failed"] == 1
    assert data["summary"]["failures_by_rule"] == {"MandatoryMismatch": 1}
    failing = data["results"][1]
    assert failing["rule"] == "MandatoryMismatch"
    assert failing["parameter_name"] == "target"
    assert failing["details"] == {"expected": "true", "actual": "false"}


def test_to_json_is_parseable():
    data = json.loads(to_json(_report()))
    assert len(data["results"]) == 2
    assert data["results"][0]["parameter_name"] is None


def test_github_annotations_only_for_failures():
    lines = to_github_annotations(_report())
    assert lines == [
        "::error title=Cmd/target: MandatoryMismatch::expected 'true', help says 'false'"
    ]


def test_github_annotation_escaping():
    report = ValidationReport(
        results=[
            RuleResult(
                command_name="a,b",
                rule=RuleKind.HELP_NOT_FOUND,
                passed=False,
                details={"error": "100%\nbroken"},
            )
        ]
    )
    (line,) = to_github_annotations(report)
    assert line == "::error title=a%2Cb: HelpNotFound::100%25%0Abroken"


def test_save_report_atomic(tmp_path: Path):
    path = save_report(_report(), tmp_path / "out" / "report.json")
    assert path.exists()
    assert json.loads(path.read_text())["passed"] is False
    assert list(path.parent.glob("*.tmp")) == []
