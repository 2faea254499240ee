"""External type resolver adapter.

Answers "is type T of package P an interface?" for packages imported by the
files under analysis. The imported package is located inside the validated
tree by stripping the module path, parsed once on first use and cached for
the lifetime of the resolver (one validation run).

Anything that cannot be located locally (standard library, third-party
modules) resolves to "not an interface". This is a precision limit, not an
error.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING

from gearcheck.domain.exceptions import ParseError
from gearcheck.domain.model.package import Package
from gearcheck.infrastructure.golang.gomod import read_module_path

if TYPE_CHECKING:
    from gearcheck.domain.model.source_file import SourceFile
    from gearcheck.domain.ports.source_parser import SourceParserPort

logger = logging.getLogger(__name__)

TEST_FILE_SUFFIX = "_test.go"


class ExternalTypeResolver:
    """TypeResolverPort backed by on-demand parsing of local packages.

    Thread-safe: the cache is guarded by a lock around lookup and first
    insertion. Two threads may parse the same package concurrently; the
    first stored result wins and both answers agree.

    Attributes:
        root: Absolute root of the validated tree
        module_prefixes: Module paths stripped from import paths, longest first
    """

    def __init__(
        self,
        root: Path,
        parser: SourceParserPort,
        module_prefixes: Iterable[str] = (),
    ) -> None:
        """Initialize resolver with an empty cache.

        Args:
            root: Root of the validated tree
            parser: Parser for single files
            module_prefixes: Module paths of the analyzed code

        Raises:
            TypeError: If parser is None
        """
        if parser is None:
            raise TypeError("parser must not be None")

        self.root = Path(root).absolute()
        cleaned = {p.strip().strip("/") for p in module_prefixes}
        self.module_prefixes: tuple[str, ...] = tuple(sorted((p for p in cleaned if p), key=lambda p: (-len(p), p)))
        self._parser = parser
        self._cache: dict[str, Package | None] = {}
        self._cache_lock = threading.Lock()

    @classmethod
    def for_tree(
        cls,
        root: Path,
        parser: SourceParserPort,
        extra_prefixes: Iterable[str] = (),
    ) -> ExternalTypeResolver:
        """Create resolver using the module path from <root>/go.mod.

        Args:
            root: Root of the validated tree
            parser: Parser for single files
            extra_prefixes: Additional module prefixes from configuration

        Returns:
            Resolver with go.mod module path plus extra prefixes
        """
        prefixes = list(extra_prefixes)
        module = read_module_path(Path(root))
        if module is not None:
            prefixes.append(module)
        return cls(root, parser, prefixes)

    def is_interface(self, import_path: str, type_name: str) -> bool:
        """Check whether type_name in package import_path is an interface.

        Args:
            import_path: Import path as written in the importing file
            type_name: Type name

        Returns:
            True iff the package is found locally and declares type_name as
            an interface. False on any miss.
        """
        package = self.resolve_package(import_path)
        if package is None:
            logger.debug(f"Unresolved import {import_path!r}, assuming {type_name} is not an interface")
            return False
        decl = package.lookup_type(type_name)
        if decl is None:
            logger.debug(f"Type {type_name} not found in {import_path!r}")
            return False
        return decl.is_interface

    def resolve_package(self, import_path: str) -> Package | None:
        """Ephemeral Package for import_path, parsed at most once.

        Args:
            import_path: Import path as written in the importing file

        Returns:
            Package, or None if it cannot be located or has no parsable file
        """
        with self._cache_lock:
            if import_path in self._cache:
                return self._cache[import_path]

        package = self._load(import_path)

        with self._cache_lock:
            return self._cache.setdefault(import_path, package)

    def local_directory(self, import_path: str) -> Path | None:
        """Directory under the root that import_path refers to.

        The longest matching module prefix is stripped. Import paths that
        match no prefix are tried relative to the root as they are.

        Returns:
            Existing directory, or None
        """
        relative: str | None = None
        for prefix in self.module_prefixes:
            if import_path == prefix:
                relative = ""
                break
            if import_path.startswith(f"{prefix}/"):
                relative = import_path[len(prefix) + 1 :]
                break
        if relative is None:
            relative = import_path

        rel = PurePosixPath(relative)
        if rel.is_absolute() or ".." in rel.parts:
            return None
        candidate = self.root.joinpath(*rel.parts)
        return candidate if candidate.is_dir() else None

    @property
    def cache_size(self) -> int:
        """Number of cached import paths (hits and misses)."""
        with self._cache_lock:
            return len(self._cache)

    @property
    def cached_paths(self) -> frozenset[str]:
        """Import paths resolved so far."""
        with self._cache_lock:
            return frozenset(self._cache)

    def clear(self) -> None:
        """Drop every cached package."""
        with self._cache_lock:
            self._cache.clear()
        logger.debug("Resolver cache cleared")

    def _load(self, import_path: str) -> Package | None:
        directory = self.local_directory(import_path)
        if directory is None:
            return None

        files: list[SourceFile] = []
        for path in sorted(directory.glob("*.go")):
            if path.name.endswith(TEST_FILE_SUFFIX) or not path.is_file():
                continue
            try:
                files.append(self._parser.parse_file(path, self.root))
            except ParseError as e:
                logger.debug(f"Skipping {e.path} while resolving {import_path!r}: {e.reason}")

        if not files:
            return None

        name = files[0].package
        package = Package.from_files([f for f in files if f.package == name])
        logger.debug(f"Resolved {import_path!r} to package {name} ({len(package.files)} files)")
        return package
