"""R01: interface contracts.

Business logic is exposed through exported interfaces implemented by
unexported structs. A struct has methods only when the file declaring it
also declares a method on it. Structs without methods are data carriers
and are never flagged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gearcheck.application.rules._base import Rule
from gearcheck.domain.model.enums import RuleCategory, Severity
from gearcheck.domain.visitor import BaseVisitor, walk

if TYPE_CHECKING:
    from gearcheck.domain.model.configuration import Classification, ValidationConfig
    from gearcheck.domain.model.declarations import TypeDecl
    from gearcheck.domain.model.diagnostic import Diagnostic
    from gearcheck.domain.model.package import Package
    from gearcheck.domain.model.source_file import SourceFile
    from gearcheck.domain.ports.type_resolver import TypeResolverPort


class InterfaceContractsRule(Rule):
    """Exported structs with methods should hide behind interfaces;
    interfaces must be exported."""

    rule_id = "R01"
    name = "interface-contracts"
    description = "Exported interfaces, unexported business logic structs"
    default_severity = Severity.WARNING
    category = RuleCategory.CONTRACTS

    unexported_interface_severity = Severity.ERROR

    def check(
        self,
        package: Package,
        resolver: TypeResolverPort,
        config: ValidationConfig,
    ) -> tuple[Diagnostic, ...]:
        """Flag exported business structs and unexported interfaces."""
        visitor = _ContractsVisitor(self, config.classification)
        for source_file in package.files:
            walk(source_file, visitor)
        return tuple(visitor.diagnostics)

    def is_exempt(self, decl: TypeDecl, source_file: SourceFile, classification: Classification) -> bool:
        """True if the struct is a data carrier by name or location."""
        if classification.is_data_name(decl.name):
            return True
        return source_file.in_category(classification.data_path_categories)


class _ContractsVisitor(BaseVisitor):
    def __init__(
        self,
        rule: InterfaceContractsRule,
        classification: Classification,
    ) -> None:
        self._rule = rule
        self._classification = classification
        self.diagnostics: list[Diagnostic] = []

    def visit_type(self, decl: TypeDecl, source_file: SourceFile) -> None:
        if decl.is_interface and not decl.exported:
            self.diagnostics.append(
                self._rule.diagnostic(
                    source_file.rel_path,
                    f"Interface '{decl.name}' is unexported - interface must be exported",
                    decl.position,
                    self._rule.unexported_interface_severity,
                )
            )
            return

        if not (decl.is_struct and decl.exported):
            return
        if not decl.has_methods:
            return
        if self._rule.is_exempt(decl, source_file, self._classification):
            return
        self.diagnostics.append(
            self._rule.diagnostic(
                source_file.rel_path,
                f"Struct '{decl.name}' is exported and has methods - exported struct used as "
                "business logic should be unexported behind an interface",
                decl.position,
            )
        )
