"""GEAR architecture rules.

Rules check Packages (and, for tree-level rules, the whole SourceTree)
and return Diagnostics. Registered in a fixed order by default_registry().
"""

from gearcheck.application.rules._base import Rule
from gearcheck.application.rules._registry import RuleRegistry, default_registry, default_rules
from gearcheck.application.rules.constructor_patterns import ConstructorPatternsRule
from gearcheck.application.rules.domain_boundaries import DomainBoundariesRule
from gearcheck.application.rules.interface_contracts import InterfaceContractsRule
from gearcheck.application.rules.interface_usage import InterfaceUsageRule, is_interface_ref
from gearcheck.application.rules.required_packages import (
    CentralizedConfigRule,
    RequiredDirectoryRule,
    SystematicErrorsRule,
)
from gearcheck.application.rules.unparsable import UnparsableFileRule

__all__ = [
    # Base
    "Rule",
    "RequiredDirectoryRule",
    # Rules
    "InterfaceContractsRule",
    "InterfaceUsageRule",
    "ConstructorPatternsRule",
    "DomainBoundariesRule",
    "CentralizedConfigRule",
    "SystematicErrorsRule",
    "UnparsableFileRule",
    # Registry
    "RuleRegistry",
    "default_registry",
    "default_rules",
    # Helpers
    "is_interface_ref",
]
