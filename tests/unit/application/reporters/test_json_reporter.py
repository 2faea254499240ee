"""Tests for reporters/json_reporter.py."""

import json
from io import StringIO

from gearcheck.application.reporters.json_reporter import JSONReporter
from gearcheck.domain.model.enums import Severity
from tests.factories import make_diagnostic, make_report


class TestJSONReporter:
    """Tests for JSONReporter."""

    def test_document(self) -> None:
        """Summary and diagnostics in report order."""
        report = make_report(
            make_diagnostic("R02", "a.go", 4, 7, "pointer", Severity.ERROR),
            make_diagnostic("R05", "internal/config", None, None, "missing", Severity.WARNING),
            files_checked=5,
            packages_checked=2,
        )
        output = StringIO()

        JSONReporter(output).report(report)
        data = json.loads(output.getvalue())

        assert data["passed"] is False
        assert data["exit_code"] == 1
        assert data["summary"] == {
            "errors": 1,
            "warnings": 1,
            "info": 0,
            "files_checked": 5,
            "packages_checked": 2,
        }
        assert data["diagnostics"] == [
            {"rule_id": "R02", "severity": "error", "file": "a.go", "line": 4, "column": 7, "message": "pointer"},
            {
                "rule_id": "R05",
                "severity": "warning",
                "file": "internal/config",
                "line": None,
                "column": None,
                "message": "missing",
            },
        ]

    def test_compact_output(self) -> None:
        """indent=None writes a single line."""
        output = StringIO()

        JSONReporter(output, indent=None).report(make_report())

        assert output.getvalue().count("\n") == 1
        assert json.loads(output.getvalue())["passed"] is True

    def test_non_ascii_kept(self) -> None:
        """Messages are written as UTF-8 text."""
        output = StringIO()

        JSONReporter(output).report(make_report(make_diagnostic(message="тип *Репо")))

        assert "тип *Репо" in output.getvalue()
