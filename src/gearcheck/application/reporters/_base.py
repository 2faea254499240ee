"""Base reporter class for output formatting.

Provides default implementation of ReporterProtocol.
Concrete reporters inherit from this.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO

from gearcheck.domain.model.enums import Severity

if TYPE_CHECKING:
    from gearcheck.domain.model.report import ValidationReport

SEVERITY_MARKS: dict[Severity, str] = {
    Severity.ERROR: "❌",
    Severity.WARNING: "⚠️",
    Severity.INFO: "ℹ️",
}


class BaseReporter(ABC):
    """Base class for reporters implementing ReporterProtocol.

    Concrete reporters must implement the report() method.
    gearcheck provides PlainTextReporter, ConsoleReporter and JSONReporter.

    Example:
        class CountReporter(BaseReporter):
            def report(self, report: ValidationReport) -> None:
                print(f"Errors: {report.error_count}", file=self._output)
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
        """
        self._output = output if output is not None else sys.stdout

    @abstractmethod
    def report(self, report: ValidationReport) -> None:
        """Report validation results.

        Implementation decides output format.

        Args:
            report: Complete validation report
        """


def summary_line(report: ValidationReport) -> str:
    """One-line summary: '<n> errors, <m> warnings'."""
    return f"{report.error_count} errors, {report.warning_count} warnings"
