"""Rule registry for architecture rules.

Central registry of all rules with a factory function.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from gearcheck.application.rules._base import Rule
from gearcheck.application.rules.constructor_patterns import ConstructorPatternsRule
from gearcheck.application.rules.domain_boundaries import DomainBoundariesRule
from gearcheck.application.rules.interface_contracts import InterfaceContractsRule
from gearcheck.application.rules.interface_usage import InterfaceUsageRule
from gearcheck.application.rules.required_packages import CentralizedConfigRule, SystematicErrorsRule
from gearcheck.domain.exceptions import RuleRegistrationError
from gearcheck.domain.model.configuration import RULE_ID_PATTERN
from gearcheck.domain.model.enums import Severity
from gearcheck.domain.ports.rule import RuleProtocol

# Rules run in this order
_ALL_RULES: tuple[type[Rule], ...] = (
    InterfaceContractsRule,  # R01
    InterfaceUsageRule,  # R02
    ConstructorPatternsRule,  # R03
    DomainBoundariesRule,  # R04
    CentralizedConfigRule,  # R05
    SystematicErrorsRule,  # R06
)


class RuleRegistry:
    """Ordered set of rules with unique identifiers.

    Iteration follows registration order.
    """

    def __init__(self, rules: Iterable[RuleProtocol] = ()) -> None:
        """Initialize registry.

        Args:
            rules: Rules to register, in order

        Raises:
            RuleRegistrationError: Malformed or duplicate identifier
        """
        self._rules: dict[str, RuleProtocol] = {}
        for rule in rules:
            self.register(rule)

    def register(self, rule: RuleProtocol) -> None:
        """Append rule.

        Raises:
            RuleRegistrationError: Malformed or duplicate identifier
        """
        rule_id = getattr(rule, "rule_id", None)
        if not isinstance(rule_id, str) or not RULE_ID_PATTERN.match(rule_id):
            raise RuleRegistrationError(str(rule_id), "identifier must look like R01")
        if rule_id in self._rules:
            raise RuleRegistrationError(rule_id, "duplicate identifier")
        self._rules[rule_id] = rule

    def get(self, rule_id: str) -> RuleProtocol:
        """Rule by identifier.

        Raises:
            KeyError: Unknown identifier
        """
        return self._rules[rule_id]

    def default_severity(self, rule_id: str) -> Severity:
        """Coded default severity of a registered rule.

        Raises:
            KeyError: Unknown identifier
        """
        return self._rules[rule_id].default_severity

    @property
    def rule_ids(self) -> tuple[str, ...]:
        """Identifiers in registration order."""
        return tuple(self._rules)

    def __iter__(self) -> Iterator[RuleProtocol]:
        return iter(tuple(self._rules.values()))

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self._rules


def default_rules() -> tuple[Rule, ...]:
    """Instantiate the six GEAR rules in order."""
    return tuple(rule_cls() for rule_cls in _ALL_RULES)


def default_registry() -> RuleRegistry:
    """Registry with R01..R06 in order."""
    return RuleRegistry(default_rules())
