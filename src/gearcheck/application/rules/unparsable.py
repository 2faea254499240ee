"""R00: unparsable files.

Not one of the architecture rules: it turns files the loader could not
parse into diagnostics, so a broken file is reported instead of aborting
the run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gearcheck.application.rules._base import Rule
from gearcheck.domain.model.diagnostic import UNPARSABLE_FILE_RULE_ID
from gearcheck.domain.model.enums import RuleCategory, Severity

if TYPE_CHECKING:
    from gearcheck.domain.model.configuration import ValidationConfig
    from gearcheck.domain.model.diagnostic import Diagnostic
    from gearcheck.domain.model.package import Package, SourceTree
    from gearcheck.domain.ports.type_resolver import TypeResolverPort


class UnparsableFileRule(Rule):
    """One diagnostic per load failure."""

    rule_id = UNPARSABLE_FILE_RULE_ID
    name = "unparsable-file"
    description = "Go file could not be read or parsed"
    default_severity = Severity.ERROR
    category = RuleCategory.PARSING

    def check(
        self,
        package: Package,
        resolver: TypeResolverPort,
        config: ValidationConfig,
    ) -> tuple[Diagnostic, ...]:
        """No per-package findings."""
        return ()

    def check_tree(self, tree: SourceTree, config: ValidationConfig) -> tuple[Diagnostic, ...]:
        """Convert every ParseFailure of the tree."""
        return tuple(
            self.diagnostic(failure.rel_path, f"unparsable file: {failure.reason}", failure.position)
            for failure in tree.failures
        )
