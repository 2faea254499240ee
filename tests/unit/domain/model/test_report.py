"""Tests for domain/model/report.py."""

import pytest

from gearcheck.domain.model.enums import ExitCode, Severity
from gearcheck.domain.model.report import ValidationReport
from tests.factories import make_diagnostic, make_report


class TestValidationReport:
    """Tests for ValidationReport."""

    def test_empty_passes(self) -> None:
        """Empty report passes with exit code 0."""
        report = ValidationReport.empty()

        assert report.passed is True
        assert report.exit_code is ExitCode.OK

    def test_counts(self) -> None:
        """Counts per severity."""
        report = make_report(
            make_diagnostic(file="a.go", severity=Severity.ERROR),
            make_diagnostic(file="b.go", severity=Severity.WARNING),
            make_diagnostic(file="c.go", severity=Severity.WARNING),
            make_diagnostic(file="d.go", severity=Severity.INFO),
        )

        assert (report.error_count, report.warning_count, report.info_count) == (1, 2, 1)

    def test_warnings_do_not_fail(self) -> None:
        """Only errors fail the run."""
        report = make_report(make_diagnostic(severity=Severity.WARNING), make_diagnostic(severity=Severity.INFO))

        assert report.passed is True
        assert report.exit_code is ExitCode.OK

    def test_error_fails(self) -> None:
        """Any error gives exit code 1."""
        report = make_report(make_diagnostic(severity=Severity.ERROR))

        assert report.exit_code is ExitCode.VIOLATIONS
        assert int(report.exit_code) == 1

    def test_for_rule(self) -> None:
        """Diagnostics of one rule."""
        report = make_report(make_diagnostic(rule_id="R01", file="a.go"), make_diagnostic(rule_id="R02", file="b.go"))

        assert [d.rule_id for d in report.for_rule("R02")] == ["R02"]

    def test_unsorted_rejected(self) -> None:
        """Diagnostics must already be sorted."""
        with pytest.raises(ValueError, match="must be sorted"):
            ValidationReport(diagnostics=(make_diagnostic(file="b.go"), make_diagnostic(file="a.go")))

    def test_negative_counts_rejected(self) -> None:
        """Counters are non-negative."""
        with pytest.raises(ValueError, match="files_checked"):
            ValidationReport(files_checked=-1)
