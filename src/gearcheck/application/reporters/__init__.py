"""Reporters for validation reports.

PlainTextReporter and JSONReporter use stdlib only; ConsoleReporter uses rich.
"""

from gearcheck.application.reporters._base import SEVERITY_MARKS, BaseReporter, summary_line
from gearcheck.application.reporters.console import ConsoleReporter
from gearcheck.application.reporters.json_reporter import JSONReporter
from gearcheck.application.reporters.plain_text import PlainTextReporter, format_diagnostic

__all__ = [
    "BaseReporter",
    "PlainTextReporter",
    "ConsoleReporter",
    "JSONReporter",
    "SEVERITY_MARKS",
    "format_diagnostic",
    "summary_line",
]
