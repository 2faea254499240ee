"""Report builder: raw diagnostics → ValidationReport.

Applies severity overrides and the deterministic ordering. Diagnostics
gathered from parallel workers are merged here, so worker scheduling
never shows in the output.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from gearcheck.domain.model.report import ValidationReport

if TYPE_CHECKING:
    from gearcheck.domain.model.configuration import ValidationConfig
    from gearcheck.domain.model.diagnostic import Diagnostic


def effective_diagnostics(
    diagnostics: Iterable[Diagnostic],
    config: ValidationConfig,
) -> tuple[Diagnostic, ...]:
    """Apply per-rule severity overrides and sort.

    A configured override replaces the severity the rule coded (R01 codes
    two severities, the override applies to both).

    Args:
        diagnostics: Diagnostics with coded severities, any order
        config: Run configuration

    Returns:
        Diagnostics with effective severities, sorted by
        file, line, column, rule id, message
    """
    resolved = [d.with_severity(config.severity_for(d.rule_id, d.severity)) for d in diagnostics]
    return tuple(sorted(resolved, key=lambda d: d.sort_key()))


def build_report(
    diagnostics: Iterable[Diagnostic],
    config: ValidationConfig,
    *,
    files_checked: int = 0,
    packages_checked: int = 0,
) -> ValidationReport:
    """Build the final report of one run.

    Args:
        diagnostics: Diagnostics with coded severities, any order
        config: Run configuration
        files_checked: Number of parsed files
        packages_checked: Number of packages checked

    Returns:
        Immutable report (exit code 1 iff any effective error)
    """
    return ValidationReport(
        diagnostics=effective_diagnostics(diagnostics, config),
        files_checked=files_checked,
        packages_checked=packages_checked,
    )
