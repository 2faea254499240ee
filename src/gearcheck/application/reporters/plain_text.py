"""Plain text reporter using print().

One line per diagnostic followed by a one-line summary:

    ❌ [R02] pkg/user/service.go:12:7 - Struct field 'repo' has type '*Repository' - ...
    1 errors, 0 warnings
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gearcheck.application.reporters._base import SEVERITY_MARKS, BaseReporter, summary_line

if TYPE_CHECKING:
    from gearcheck.domain.model.diagnostic import Diagnostic
    from gearcheck.domain.model.report import ValidationReport


def format_diagnostic(diagnostic: Diagnostic) -> str:
    """Render 'MARK [RULE_ID] location - message'."""
    mark = SEVERITY_MARKS[diagnostic.severity]
    return f"{mark} [{diagnostic.rule_id}] {diagnostic.location} - {diagnostic.message}"


class PlainTextReporter(BaseReporter):
    """Plain text reporter using print().

    Output depends only on the report: two runs over the same tree are
    byte-identical.
    """

    def report(self, report: ValidationReport) -> None:
        """Report validation results as plain text.

        Args:
            report: Complete validation report
        """
        for diagnostic in report.diagnostics:
            self._write(format_diagnostic(diagnostic))
        self._write(summary_line(report))

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)
