"""Console reporter: ValidationReport → rich formatted output."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from rich.console import Console
from rich.table import Table
from rich.text import Text

from gearcheck.application.reporters._base import SEVERITY_MARKS, BaseReporter, summary_line
from gearcheck.domain.model.enums import Severity

if TYPE_CHECKING:
    from gearcheck.domain.model.diagnostic import Diagnostic
    from gearcheck.domain.model.report import ValidationReport

_STYLES: dict[Severity, str] = {
    Severity.ERROR: "bold red",
    Severity.WARNING: "yellow",
    Severity.INFO: "cyan",
}


class ConsoleReporter(BaseReporter):
    """Console reporter: diagnostics with colours and a summary table.

    Content matches PlainTextReporter; only the presentation differs.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        force_terminal: bool | None = None,
        width: int | None = None,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            force_terminal: Emit colour codes even when output is not a TTY
            width: Console width (default: detected)
        """
        super().__init__(output)
        self._console = Console(file=self._output, force_terminal=force_terminal, width=width, highlight=False)

    def report(self, report: ValidationReport) -> None:
        """Render diagnostics then the summary table.

        Args:
            report: Complete validation report
        """
        console = self._console

        for diagnostic in report.diagnostics:
            console.print(self._render_diagnostic(diagnostic))

        if report.diagnostics:
            console.print()
        console.print(self._render_summary(report))

        status = "[bold green]PASSED[/bold green]" if report.passed else "[bold red]FAILED[/bold red]"
        console.print(f"{status} {summary_line(report)}")

    @staticmethod
    def _render_diagnostic(diagnostic: Diagnostic) -> Text:
        style = _STYLES[diagnostic.severity]
        text = Text()
        text.append(f"{SEVERITY_MARKS[diagnostic.severity]} ")
        text.append(f"[{diagnostic.rule_id}]", style=style)
        text.append(f" {diagnostic.location}", style="bold")
        text.append(f" - {diagnostic.message}")
        return text

    @staticmethod
    def _render_summary(report: ValidationReport) -> Table:
        table = Table(title="GEAR validation", show_header=True, header_style="bold")
        table.add_column("Severity")
        table.add_column("Count", justify="right")
        for severity in Severity:
            table.add_row(Text(severity.value, style=_STYLES[severity]), str(report.count(severity)))
        table.add_row("files", str(report.files_checked))
        table.add_row("packages", str(report.packages_checked))
        return table
