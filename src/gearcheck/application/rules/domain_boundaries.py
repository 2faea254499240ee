"""R04: domain boundaries.

Registered extension point for layer checks inside a domain module
(handler/service/repository/model, no upward imports). It currently
reports nothing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gearcheck.application.rules._base import Rule
from gearcheck.domain.model.enums import RuleCategory, Severity

if TYPE_CHECKING:
    from gearcheck.domain.model.configuration import ValidationConfig
    from gearcheck.domain.model.diagnostic import Diagnostic
    from gearcheck.domain.model.package import Package
    from gearcheck.domain.ports.type_resolver import TypeResolverPort


class DomainBoundariesRule(Rule):
    """Domain layer separation. Inert."""

    rule_id = "R04"
    name = "domain-boundaries"
    description = "Clean layer separation inside domains (not enforced yet)"
    default_severity = Severity.INFO
    category = RuleCategory.BOUNDARIES

    def check(
        self,
        package: Package,
        resolver: TypeResolverPort,
        config: ValidationConfig,
    ) -> tuple[Diagnostic, ...]:
        """Report nothing."""
        return ()
