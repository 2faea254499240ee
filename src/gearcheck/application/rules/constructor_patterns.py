"""R03: constructor patterns.

Constructors (New...) return the interface they implement, not a pointer
to the concrete struct. Utility, configuration, model, DTO, proto and
error packages are exempt: their constructors build plain values.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gearcheck.application.rules._base import Rule
from gearcheck.domain.model.enums import RuleCategory, Severity

if TYPE_CHECKING:
    from gearcheck.domain.model.configuration import ValidationConfig
    from gearcheck.domain.model.declarations import FuncDecl
    from gearcheck.domain.model.diagnostic import Diagnostic
    from gearcheck.domain.model.package import Package
    from gearcheck.domain.model.source_file import SourceFile
    from gearcheck.domain.ports.type_resolver import TypeResolverPort


class ConstructorPatternsRule(Rule):
    """Constructors should return interfaces."""

    rule_id = "R03"
    name = "constructor-patterns"
    description = "Constructors return interfaces, not pointers to concrete types"
    default_severity = Severity.WARNING
    category = RuleCategory.CONSTRUCTORS

    def check(
        self,
        package: Package,
        resolver: TypeResolverPort,
        config: ValidationConfig,
    ) -> tuple[Diagnostic, ...]:
        """Flag constructors whose first result is *LocalConcreteType."""
        classification = config.classification
        diagnostics: list[Diagnostic] = []

        for source_file, decl in package.iter_functions():
            if not self._is_constructor(decl, classification.constructor_prefix):
                continue
            if source_file.in_category(classification.constructor_exempt_categories):
                continue
            if self._returns_concrete_pointer(decl, source_file, package):
                diagnostics.append(
                    self.diagnostic(
                        source_file.rel_path,
                        f"Constructor '{decl.name}' returns '{decl.results[0].type.text}' - "
                        "constructor should return an interface, not a pointer to a concrete type",
                        decl.position,
                    )
                )

        return tuple(diagnostics)

    @staticmethod
    def _is_constructor(decl: FuncDecl, prefix: str) -> bool:
        return not decl.is_method and decl.exported and decl.name.startswith(prefix)

    @staticmethod
    def _returns_concrete_pointer(decl: FuncDecl, source_file: SourceFile, package: Package) -> bool:
        if not decl.results:
            return False
        first = decl.results[0].type
        if not first.is_named_pointer or first.is_qualified or first.name is None:
            return False
        local = source_file.lookup_type(first.name) or package.lookup_type(first.name)
        # pointers to interfaces belong to R02
        return local is not None and not local.is_interface
