"""R02: interface usage.

Interfaces are already reference types: a pointer to an interface is
always a mistake. Every pointer to a named type in struct fields,
signatures and bare expressions is resolved, locally or through the
import's package, and reported once if it names an interface.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gearcheck.application.rules._base import Rule
from gearcheck.domain.model.declarations import FuncDecl
from gearcheck.domain.model.enums import RuleCategory, Severity
from gearcheck.domain.visitor import BaseVisitor, walk

if TYPE_CHECKING:
    from gearcheck.domain.model.configuration import ValidationConfig
    from gearcheck.domain.model.declarations import (
        Field,
        InterfaceMethod,
        Param,
        PointerExpr,
        TypeDecl,
        TypeRef,
    )
    from gearcheck.domain.model.diagnostic import Diagnostic
    from gearcheck.domain.model.package import Package
    from gearcheck.domain.model.source_file import SourceFile
    from gearcheck.domain.ports.type_resolver import TypeResolverPort


class InterfaceUsageRule(Rule):
    """No pointers to interfaces."""

    rule_id = "R02"
    name = "interface-usage"
    description = "No pointer-to-interface fields, parameters or results"
    default_severity = Severity.ERROR
    category = RuleCategory.USAGE

    def check(
        self,
        package: Package,
        resolver: TypeResolverPort,
        config: ValidationConfig,
    ) -> tuple[Diagnostic, ...]:
        """Flag every pointer-to-interface site of the package."""
        visitor = _UsageVisitor(self, package, resolver)
        for source_file in package.files:
            walk(source_file, visitor)
        return tuple(visitor.diagnostics)


def is_interface_ref(
    ref: TypeRef,
    source_file: SourceFile,
    package: Package,
    resolver: TypeResolverPort,
) -> bool:
    """True if the named type ref points to is an interface.

    Unqualified names resolve through the file, then the package.
    Qualified names resolve their alias through the file's imports and
    delegate to the resolver. Unknown aliases are not interfaces.
    """
    if ref.name is None:
        return False
    if ref.qualifier is None:
        decl = source_file.lookup_type(ref.name) or package.lookup_type(ref.name)
        return decl is not None and decl.is_interface
    import_path = source_file.import_map().get(ref.qualifier)
    if import_path is None:
        return False
    return resolver.is_interface(import_path, ref.name)


class _UsageVisitor(BaseVisitor):
    def __init__(self, rule: InterfaceUsageRule, package: Package, resolver: TypeResolverPort) -> None:
        self._rule = rule
        self._package = package
        self._resolver = resolver
        self._seen: set[tuple[str, int, int]] = set()
        self.diagnostics: list[Diagnostic] = []

    def visit_field(self, field: Field, owner: TypeDecl, source_file: SourceFile) -> None:
        for ref in field.type.pointers():
            self._report(ref, source_file, f"Struct field '{field.name}' has type '{ref.text}'")

    def visit_param(
        self,
        param: Param,
        owner: FuncDecl | InterfaceMethod,
        source_file: SourceFile,
    ) -> None:
        func = _owner_name(owner)
        for ref in param.type.pointers():
            if not param.is_result:
                subject = f"Function parameter '{param.display_name}' of '{func}' has type '{ref.text}'"
            elif param.name:
                subject = f"Result '{param.name}' of '{func}' has type '{ref.text}'"
            else:
                subject = f"Function '{func}' returns '{ref.text}'"
            self._report(ref, source_file, subject)

    def visit_pointer_expr(self, expr: PointerExpr, source_file: SourceFile) -> None:
        self._report(expr.type, source_file, f"Pointer to interface '{expr.type.text}' in {expr.context}")

    def _report(self, ref: TypeRef, source_file: SourceFile, subject: str) -> None:
        key = (source_file.rel_path, ref.position.line, ref.position.column)
        if key in self._seen:
            return
        if not is_interface_ref(ref, source_file, self._package, self._resolver):
            return
        self._seen.add(key)
        self.diagnostics.append(
            self._rule.diagnostic(
                source_file.rel_path,
                f"{subject} - pointer to interface is an anti-pattern, use '{ref.corrected}' instead",
                ref.position,
            )
        )


def _owner_name(owner: FuncDecl | InterfaceMethod) -> str:
    if isinstance(owner, FuncDecl) and owner.receiver is not None:
        return f"{owner.receiver.type_name}.{owner.name}"
    return owner.name
