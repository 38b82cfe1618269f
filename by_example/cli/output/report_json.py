"""JSON export of a RunReport for CI artifacts."""

import json
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from by_example.runner.domain.report import RunReport

SCHEMA_VERSION = "by_example_report_1"


def build_report_json(report: RunReport, suites: list[str]) -> dict[str, Any]:
    """Return the report as a JSON-ready dict with run metadata on top."""
    return {
        "schema_version": SCHEMA_VERSION,
        "generated_at": datetime.now(UTC).isoformat(),
        "suites": suites,
        "succeeded": report.succeeded,
        "failure_count": report.failure_count,
        **report.model_dump(mode="json"),
    }


def write_report_json(path: Path, report: RunReport, suites: list[str]) -> Path:
    """Write the JSON report to ``path``, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    data = build_report_json(report=report, suites=suites)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path
