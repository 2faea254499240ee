"""Base rule class for architecture rules.

Provides default implementation of RuleProtocol.
Concrete rules inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from gearcheck.domain.model.diagnostic import Diagnostic

if TYPE_CHECKING:
    from gearcheck.domain.model.configuration import ValidationConfig
    from gearcheck.domain.model.enums import RuleCategory, Severity
    from gearcheck.domain.model.location import Position
    from gearcheck.domain.model.package import Package, SourceTree
    from gearcheck.domain.ports.type_resolver import TypeResolverPort


class Rule(ABC):
    """Base class for rules implementing RuleProtocol.

    Concrete rules must:
    1. Set the identity class attributes (rule_id, name, description,
       default_severity, category)
    2. Implement `check()` for per-package findings
    3. Optionally override `check_tree()` for findings about the whole tree

    Example:
        class NoInitRule(Rule):
            rule_id = "R42"
            name = "no-init"
            description = "init functions are forbidden"
            default_severity = Severity.WARNING
            category = RuleCategory.CONSTRUCTORS

            def check(self, package, resolver, config):
                return tuple(
                    self.diagnostic(f.rel_path, "init function", decl.position)
                    for f, decl in package.iter_functions()
                    if decl.name == "init"
                )
    """

    rule_id: ClassVar[str]
    name: ClassVar[str]
    description: ClassVar[str]
    default_severity: ClassVar[Severity]
    category: ClassVar[RuleCategory]

    @abstractmethod
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

    def check_tree(self, tree: SourceTree, config: ValidationConfig) -> tuple[Diagnostic, ...]:
        """Check the whole tree once per run.

        Default: no tree-level findings.
        """
        return ()

    def diagnostic(
        self,
        file: str,
        message: str,
        position: Position | None = None,
        severity: Severity | None = None,
    ) -> Diagnostic:
        """Create a diagnostic of this rule.

        Args:
            file: Path relative to the root
            message: Human-readable message
            position: Source position, None for file-level findings
            severity: Coded severity (default: the rule's default)
        """
        return Diagnostic(
            rule_id=self.rule_id,
            file=file,
            message=message,
            severity=severity if severity is not None else self.default_severity,
            line=position.line if position is not None else None,
            column=position.column if position is not None else None,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.rule_id})"
