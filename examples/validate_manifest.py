"""
Validating a Command Table from Python
======================================

Runs the bundled manifest through the library API instead of the CLI and
prints every failing check. Get-Inventory is documented badly on purpose,
so expect failures for it and a clean pass for the other two commands.

Usage:
    python examples/validate_manifest.py
"""

from pathlib import Path

from helpparity import validate
from helpparity.results import describe, summarize

MANIFEST = Path(__file__).parent / "manifest" / "helpparity.yaml"


def main() -> int:
    report = validate(MANIFEST)
    summary = summarize(report)

    print(f"{summary.commands} command(s), {summary.checks} check(s)")
    for result in report.failures:
        print(f"  FAIL {result.label}: {describe(result)}")

    return 0 if report.passed else 1


if __name__ == "__main__":
    raise SystemExit(main())
