"""R05 and R06: centralized packages.

Tree-level checks: configuration and errors live in one designated
directory each. A missing directory yields one file-level diagnostic per
run, whatever the number of packages.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING

from gearcheck.application.rules._base import Rule
from gearcheck.domain.model.enums import RuleCategory, Severity

if TYPE_CHECKING:
    from gearcheck.domain.model.configuration import Classification, ValidationConfig
    from gearcheck.domain.model.diagnostic import Diagnostic
    from gearcheck.domain.model.package import Package, SourceTree
    from gearcheck.domain.ports.type_resolver import TypeResolverPort


class RequiredDirectoryRule(Rule):
    """Base for rules requiring a directory somewhere under the root."""

    missing_message: str

    @abstractmethod
    def required_dir(self, classification: Classification) -> str:
        """Directory that must exist, relative to any walked directory."""

    def check(
        self,
        package: Package,
        resolver: TypeResolverPort,
        config: ValidationConfig,
    ) -> tuple[Diagnostic, ...]:
        """No per-package findings."""
        return ()

    def check_tree(self, tree: SourceTree, config: ValidationConfig) -> tuple[Diagnostic, ...]:
        """One diagnostic if the required directory exists nowhere under the root.

        A directory counts when it was walked or, excluded or not, sits at
        root/required on disk.
        """
        required = self.required_dir(config.classification).strip("/")
        if tree.has_directory(required) or (tree.root / required).is_dir():
            return ()
        return (self.diagnostic(required, f"{self.missing_message} ({required} not found)"),)


class CentralizedConfigRule(RequiredDirectoryRule):
    """Configuration lives in internal/config."""

    rule_id = "R05"
    name = "centralized-configuration"
    description = "Configuration centralized in internal/config"
    default_severity = Severity.ERROR
    category = RuleCategory.CONFIGURATION
    missing_message = "missing centralized configuration package"

    def required_dir(self, classification: Classification) -> str:
        return classification.config_dir


class SystematicErrorsRule(RequiredDirectoryRule):
    """Errors live in internal/errors."""

    rule_id = "R06"
    name = "systematic-errors"
    description = "Error handling centralized in internal/errors"
    default_severity = Severity.ERROR
    category = RuleCategory.ERRORS
    missing_message = "missing centralized errors package"

    def required_dir(self, classification: Classification) -> str:
        return classification.errors_dir
