"""JSON reporter for machine-readable output.

Stdlib-only reporter for JSON output.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, TextIO

from gearcheck.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from gearcheck.domain.model.diagnostic import Diagnostic
    from gearcheck.domain.model.report import ValidationReport


class JSONReporter(BaseReporter):
    """JSON reporter for machine-readable output.

    Outputs validation results as JSON for CI/CD integration
    or parsing by other tools.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        super().__init__(output)
        self._indent = indent

    def report(self, report: ValidationReport) -> None:
        """Report validation results as JSON.

        Args:
            report: Complete validation report
        """
        data = self.to_dict(report)
        json.dump(data, self._output, indent=self._indent, ensure_ascii=False)
        self._output.write("\n")

    def to_dict(self, report: ValidationReport) -> dict[str, object]:
        """Convert ValidationReport to JSON-serializable dict.

        Args:
            report: Report to convert

        Returns:
            Dictionary suitable for json.dump()
        """
        return {
            "passed": report.passed,
            "exit_code": int(report.exit_code),
            "summary": {
                "errors": report.error_count,
                "warnings": report.warning_count,
                "info": report.info_count,
                "files_checked": report.files_checked,
                "packages_checked": report.packages_checked,
            },
            "diagnostics": [self._diagnostic_to_dict(d) for d in report.diagnostics],
        }

    @staticmethod
    def _diagnostic_to_dict(diagnostic: Diagnostic) -> dict[str, object]:
        return {
            "rule_id": diagnostic.rule_id,
            "severity": diagnostic.severity.value,
            "file": diagnostic.file,
            "line": diagnostic.line,
            "column": diagnostic.column,
            "message": diagnostic.message,
        }
