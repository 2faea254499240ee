"""Diagnostic entity."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from gearcheck.domain.model.enums import Severity

UNPARSABLE_FILE_RULE_ID = "R00"
"""Rule id carried by diagnostics for files that could not be parsed."""


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One reported finding.

    File-level findings have neither line nor column.

    Attributes:
        rule_id: Stable rule identifier ("R01")
        file: POSIX path relative to the validated root
        message: Human-readable message
        severity: Coded severity, or effective severity after reporting
        line: 1-based line, None for file-level findings
        column: 1-based column, None for file-level findings
    """

    rule_id: str
    file: str
    message: str
    severity: Severity
    line: int | None = None
    column: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.rule_id:
            raise ValueError("rule_id must not be empty")
        if not self.file:
            raise ValueError("file must not be empty")
        if not self.message:
            raise ValueError("message must not be empty")
        if (self.line is None) != (self.column is None):
            raise ValueError("line and column must be both set or both None")
        if self.line is not None and self.line <= 0:
            raise ValueError(f"line must be > 0, got {self.line}")
        if self.column is not None and self.column <= 0:
            raise ValueError(f"column must be > 0, got {self.column}")

    @property
    def is_file_level(self) -> bool:
        """True when the finding has no line/column."""
        return self.line is None

    @property
    def location(self) -> str:
        """Format as path:line:col, or path for file-level findings."""
        if self.line is None:
            return self.file
        return f"{self.file}:{self.line}:{self.column}"

    def sort_key(self) -> tuple[str, int, int, str, str]:
        """Deterministic order: file, line, column, rule id, message."""
        return (self.file, self.line or 0, self.column or 0, self.rule_id, self.message)

    def with_severity(self, severity: Severity) -> Diagnostic:
        """Copy with another severity."""
        if severity is self.severity:
            return self
        return dataclasses.replace(self, severity=severity)
