"""Package and source tree aggregates."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gearcheck.domain.model.declarations import FuncDecl, TypeDecl
    from gearcheck.domain.model.source_file import ParseFailure, SourceFile


@dataclass(frozen=True, slots=True)
class Package:
    """Files sharing one declared package name.

    Grouping key is the declared name, not the directory: two directories
    declaring `package model` form a single Package.

    Attributes:
        name: Declared package name
        files: Files sorted by rel_path
    """

    name: str
    files: tuple[SourceFile, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        for source_file in self.files:
            if source_file.package != self.name:
                raise ValueError(
                    f"{source_file.rel_path} declares package {source_file.package!r}, not {self.name!r}"
                )
        ordered = tuple(sorted(self.files, key=lambda f: f.rel_path))
        if ordered != self.files:
            object.__setattr__(self, "files", ordered)

    @classmethod
    def from_files(cls, files: tuple[SourceFile, ...] | list[SourceFile]) -> Package:
        """Build package named after its files' declared package.

        Raises:
            ValueError: files is empty
        """
        if not files:
            raise ValueError("files must not be empty")
        return cls(name=files[0].package, files=tuple(files))

    def lookup_type(self, name: str) -> TypeDecl | None:
        """First type named `name`, searching files in path order."""
        for source_file in self.files:
            decl = source_file.lookup_type(name)
            if decl is not None:
                return decl
        return None

    def iter_types(self) -> Iterator[tuple[SourceFile, TypeDecl]]:
        """All type declarations with their file."""
        for source_file in self.files:
            for decl in source_file.types:
                yield source_file, decl

    def iter_functions(self) -> Iterator[tuple[SourceFile, FuncDecl]]:
        """All function declarations with their file."""
        for source_file in self.files:
            for decl in source_file.functions:
                yield source_file, decl


@dataclass(frozen=True, slots=True)
class SourceTree:
    """Result of loading one root directory.

    Attributes:
        root: Absolute root directory
        packages: Package name → Package
        directories: Walked directories as POSIX paths relative to root
        failures: Files that could not be parsed
    """

    root: Path
    packages: Mapping[str, Package] = field(default_factory=dict)
    directories: frozenset[str] = frozenset()
    failures: tuple[ParseFailure, ...] = ()

    @property
    def file_count(self) -> int:
        """Number of successfully parsed files."""
        return sum(len(p.files) for p in self.packages.values())

    def iter_packages(self) -> tuple[Package, ...]:
        """Packages ordered by name."""
        return tuple(self.packages[name] for name in sorted(self.packages))

    def has_directory(self, rel_dir: str) -> bool:
        """True if a walked directory is rel_dir or ends with it.

        Examples:
            has_directory("internal/config") matches "internal/config"
            and "services/api/internal/config".
        """
        wanted = PurePosixPath(rel_dir.strip("/")).parts
        if not wanted:
            return True
        size = len(wanted)
        return any(PurePosixPath(d).parts[-size:] == wanted for d in self.directories)
