"""Parsed Go source file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from gearcheck.domain.model.declarations import (
        FuncDecl,
        Import,
        PointerExpr,
        TypeDecl,
    )
    from gearcheck.domain.model.location import Position


@dataclass(frozen=True, slots=True)
class SourceFile:
    """Go source file after parsing. Immutable.

    Attributes:
        path: Absolute path on disk
        rel_path: POSIX path relative to the validated root
        package: Declared package name
        imports: Import specs in source order
        types: Top-level type declarations in source order
        functions: Top-level functions and methods in source order
        pointer_exprs: Bare pointer expressions in source order
    """

    path: Path
    rel_path: str
    package: str
    imports: tuple[Import, ...] = ()
    types: tuple[TypeDecl, ...] = ()
    functions: tuple[FuncDecl, ...] = ()
    pointer_exprs: tuple[PointerExpr, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.path is None:
            raise TypeError("path must not be None")
        if not self.rel_path:
            raise ValueError("rel_path must not be empty")
        if not self.package:
            raise ValueError("package must not be empty")

    @property
    def directory(self) -> str:
        """Containing directory relative to the root ("" for the root)."""
        parent = PurePosixPath(self.rel_path).parent.as_posix()
        return "" if parent == "." else parent

    @property
    def path_segments(self) -> tuple[str, ...]:
        """Directory segments of rel_path (file name excluded)."""
        return PurePosixPath(self.rel_path).parts[:-1]

    def in_category(self, categories: tuple[str, ...] | frozenset[str]) -> bool:
        """True if any directory segment is one of categories."""
        return any(segment in categories for segment in self.path_segments)

    def lookup_type(self, name: str) -> TypeDecl | None:
        """First type declared with name in this file."""
        for decl in self.types:
            if decl.name == name:
                return decl
        return None

    def import_map(self) -> Mapping[str, str]:
        """Qualifier → import path. Blank and dot imports are skipped."""
        result: dict[str, str] = {}
        for imp in self.imports:
            name = imp.name
            if name is not None:
                result[name] = imp.path
        return result


@dataclass(frozen=True, slots=True)
class ParseFailure:
    """File that could not be read or parsed during a load.

    Attributes:
        rel_path: POSIX path relative to the root
        reason: Error description
        position: Error position when known
    """

    rel_path: str
    reason: str
    position: Position | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.rel_path:
            raise ValueError("rel_path must not be empty")
        if not self.reason:
            raise ValueError("reason must not be empty")
