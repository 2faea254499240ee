"""Rule protocol for architecture rules.

Users extend gearcheck by implementing this Protocol and registering the
rule in a RuleRegistry.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from gearcheck.domain.model.configuration import ValidationConfig
    from gearcheck.domain.model.diagnostic import Diagnostic
    from gearcheck.domain.model.enums import RuleCategory, Severity
    from gearcheck.domain.model.package import Package, SourceTree
    from gearcheck.domain.ports.type_resolver import TypeResolverPort


class RuleProtocol(Protocol):
    """Contract for rules.

    Rules are stateless and never mutate their inputs. The resolver's
    cache is the only shared mutable state a rule may touch.
    """

    rule_id: str
    """Stable identifier, e.g. "R01"."""

    name: str
    """Short human name."""

    description: str
    """One-line description."""

    default_severity: Severity
    """Severity used when configuration has no override."""

    category: RuleCategory
    """Rule category for grouping diagnostics."""

    def check(
        self,
        package: Package,
        resolver: TypeResolverPort,
        config: ValidationConfig,
    ) -> tuple[Diagnostic, ...]:
        """Check one package.

        Args:
            package: Package under analysis
            resolver: Cross-package type resolver of this run
            config: Run configuration

        Returns:
            Diagnostics found (empty if compliant)
        """
        ...

    def check_tree(self, tree: SourceTree, config: ValidationConfig) -> tuple[Diagnostic, ...]:
        """Check the whole tree once per run.

        Args:
            tree: Loaded source tree
            config: Run configuration

        Returns:
            Diagnostics found (empty if compliant)
        """
        ...
