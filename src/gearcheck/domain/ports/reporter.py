"""Reporter protocol for output formatting.

Users extend gearcheck by implementing this Protocol.
NOT rich-specific - users can adapt to any output format.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from gearcheck.domain.model.report import ValidationReport


class ReporterProtocol(Protocol):
    """Contract for reporters.

    gearcheck provides PlainTextReporter, ConsoleReporter and
    JSONReporter.
    """

    def report(self, report: ValidationReport) -> None:
        """Report validation results.

        Implementation decides output format and destination.

        Args:
            report: Complete validation report
        """
        ...
