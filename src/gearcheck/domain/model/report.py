"""Validation report aggregate."""

from __future__ import annotations

from dataclasses import dataclass

from gearcheck.domain.model.diagnostic import Diagnostic
from gearcheck.domain.model.enums import ExitCode, Severity


@dataclass(frozen=True, slots=True)
class ValidationReport:
    """Result of one validation run.

    Immutable aggregate consumed by reporters. Diagnostics carry their
    effective severity and are already in deterministic order.

    Attributes:
        diagnostics: Sorted diagnostics with effective severities
        files_checked: Number of successfully parsed files
        packages_checked: Number of packages the rules ran against
    """

    diagnostics: tuple[Diagnostic, ...] = ()
    files_checked: int = 0
    packages_checked: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.files_checked < 0:
            raise ValueError(f"files_checked must be >= 0, got {self.files_checked}")
        if self.packages_checked < 0:
            raise ValueError(f"packages_checked must be >= 0, got {self.packages_checked}")
        keys = [d.sort_key() for d in self.diagnostics]
        if keys != sorted(keys):
            raise ValueError("diagnostics must be sorted")

    def count(self, severity: Severity) -> int:
        """Number of diagnostics with the given effective severity."""
        return sum(1 for d in self.diagnostics if d.severity is severity)

    @property
    def error_count(self) -> int:
        """Number of ERROR diagnostics."""
        return self.count(Severity.ERROR)

    @property
    def warning_count(self) -> int:
        """Number of WARNING diagnostics."""
        return self.count(Severity.WARNING)

    @property
    def info_count(self) -> int:
        """Number of INFO diagnostics."""
        return self.count(Severity.INFO)

    @property
    def passed(self) -> bool:
        """True when no diagnostic is an error."""
        return self.error_count == 0

    @property
    def exit_code(self) -> ExitCode:
        """VIOLATIONS if any effective error exists, else OK."""
        return ExitCode.OK if self.passed else ExitCode.VIOLATIONS

    def for_rule(self, rule_id: str) -> tuple[Diagnostic, ...]:
        """Diagnostics of one rule, in report order."""
        return tuple(d for d in self.diagnostics if d.rule_id == rule_id)

    @classmethod
    def empty(cls) -> ValidationReport:
        """Create empty report (passed, no diagnostics)."""
        return cls()
