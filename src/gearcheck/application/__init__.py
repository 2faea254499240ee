"""Application layer for GEAR validation.

Components:
- rules: Architecture rules R01..R06 and their registry
- reporters: Output formatting (PlainText, Console, JSON)
- services: Report building and the main facade (GearValidator)
"""

from gearcheck.application.reporters import (
    BaseReporter,
    ConsoleReporter,
    JSONReporter,
    PlainTextReporter,
)
from gearcheck.application.rules import (
    CentralizedConfigRule,
    ConstructorPatternsRule,
    DomainBoundariesRule,
    InterfaceContractsRule,
    InterfaceUsageRule,
    Rule,
    RuleRegistry,
    SystematicErrorsRule,
    UnparsableFileRule,
    default_registry,
)
from gearcheck.application.services import GearValidator, build_report, validate

__all__ = [
    # Rules
    "Rule",
    "InterfaceContractsRule",
    "InterfaceUsageRule",
    "ConstructorPatternsRule",
    "DomainBoundariesRule",
    "CentralizedConfigRule",
    "SystematicErrorsRule",
    "UnparsableFileRule",
    "RuleRegistry",
    "default_registry",
    # Reporters
    "BaseReporter",
    "PlainTextReporter",
    "ConsoleReporter",
    "JSONReporter",
    # Services
    "GearValidator",
    "build_report",
    "validate",
]
