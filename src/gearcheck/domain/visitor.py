"""Exhaustive traversal of the declaration model.

Checkers implement DeclarationVisitor (usually by subclassing
BaseVisitor) and hand it to walk(). Dispatch happens in one place with a
match statement over the closed Declaration union, so adding a variant
fails loudly here instead of being skipped silently by every checker.

Example:
    class ExportedStructs(BaseVisitor):
        def __init__(self) -> None:
            self.names: list[str] = []

        def visit_type(self, decl: TypeDecl, source_file: SourceFile) -> None:
            if decl.is_struct and decl.exported:
                self.names.append(decl.name)

    visitor = ExportedStructs()
    walk(source_file, visitor)
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Protocol, TypeAlias

from gearcheck.domain.model.declarations import (
    Field,
    FuncDecl,
    InterfaceMethod,
    Param,
    PointerExpr,
    TypeDecl,
)

if TYPE_CHECKING:
    from gearcheck.domain.model.declarations import Declaration
    from gearcheck.domain.model.location import Position
    from gearcheck.domain.model.source_file import SourceFile

Owner: TypeAlias = TypeDecl | FuncDecl | InterfaceMethod


class DeclarationVisitor(Protocol):
    """Contract for declaration visitors: one method per variant."""

    def visit_type(self, decl: TypeDecl, source_file: SourceFile) -> None:
        """Top-level type declaration."""
        ...

    def visit_function(self, decl: FuncDecl, source_file: SourceFile) -> None:
        """Top-level function or method."""
        ...

    def visit_field(self, field: Field, owner: TypeDecl, source_file: SourceFile) -> None:
        """Struct field of owner."""
        ...

    def visit_interface_method(
        self,
        method: InterfaceMethod,
        owner: TypeDecl,
        source_file: SourceFile,
    ) -> None:
        """Method element of interface owner."""
        ...

    def visit_param(
        self,
        param: Param,
        owner: FuncDecl | InterfaceMethod,
        source_file: SourceFile,
    ) -> None:
        """Parameter or result of owner."""
        ...

    def visit_pointer_expr(self, expr: PointerExpr, source_file: SourceFile) -> None:
        """Bare pointer expression."""
        ...


class BaseVisitor:
    """No-op DeclarationVisitor. Override only what you need."""

    def visit_type(self, decl: TypeDecl, source_file: SourceFile) -> None:
        """Ignore."""

    def visit_function(self, decl: FuncDecl, source_file: SourceFile) -> None:
        """Ignore."""

    def visit_field(self, field: Field, owner: TypeDecl, source_file: SourceFile) -> None:
        """Ignore."""

    def visit_interface_method(
        self,
        method: InterfaceMethod,
        owner: TypeDecl,
        source_file: SourceFile,
    ) -> None:
        """Ignore."""

    def visit_param(
        self,
        param: Param,
        owner: FuncDecl | InterfaceMethod,
        source_file: SourceFile,
    ) -> None:
        """Ignore."""

    def visit_pointer_expr(self, expr: PointerExpr, source_file: SourceFile) -> None:
        """Ignore."""


def _top_level_position(node: TypeDecl | FuncDecl | PointerExpr) -> Position:
    return node.position


def iter_nodes(source_file: SourceFile) -> Iterator[tuple[Declaration, Owner | None]]:
    """Yield (declaration, owner) pairs in source order.

    Top-level declarations have owner None. Each one is followed by its
    children: struct fields, interface methods and their signatures,
    function parameters then results.
    """
    top_level: list[TypeDecl | FuncDecl | PointerExpr] = [
        *source_file.types,
        *source_file.functions,
        *source_file.pointer_exprs,
    ]
    top_level.sort(key=_top_level_position)

    for node in top_level:
        yield node, None
        match node:
            case TypeDecl():
                for field in node.fields:
                    yield field, node
                for method in node.methods:
                    yield method, node
                    for param in (*method.params, *method.results):
                        yield param, method
            case FuncDecl():
                for param in (*node.params, *node.results):
                    yield param, node
            case PointerExpr():
                pass


def walk(source_file: SourceFile, visitor: DeclarationVisitor) -> None:
    """Dispatch every declaration of source_file to visitor.

    Raises:
        TypeError: Unknown declaration variant or owner mismatch.
    """
    for node, owner in iter_nodes(source_file):
        match node:
            case TypeDecl():
                visitor.visit_type(node, source_file)
            case FuncDecl():
                visitor.visit_function(node, source_file)
            case Field() if isinstance(owner, TypeDecl):
                visitor.visit_field(node, owner, source_file)
            case InterfaceMethod() if isinstance(owner, TypeDecl):
                visitor.visit_interface_method(node, owner, source_file)
            case Param() if isinstance(owner, FuncDecl | InterfaceMethod):
                visitor.visit_param(node, owner, source_file)
            case PointerExpr():
                visitor.visit_pointer_expr(node, source_file)
            case _:
                raise TypeError(f"unexpected declaration {type(node).__name__} under {type(owner).__name__}")
