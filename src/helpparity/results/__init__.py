"""Report emission and export."""

from helpparity.results.emitter import ReportSummary, describe, emit, summarize
from helpparity.results.exporters import (
    report_to_dict,
    save_report,
    to_github_annotations,
    to_json,
)

__all__ = [
    "ReportSummary",
    "describe",
    "emit",
    "report_to_dict",
    "save_report",
    "summarize",
    "to_github_annotations",
    "to_json",
]
