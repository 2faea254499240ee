"""Source tree loader adapter.

Walks a root directory, applies exclusion filtering, parses every
remaining Go file and groups the results into Packages by declared
package name.

Per-file parse failures are isolated: they are collected as ParseFailure
records and never abort the load of the rest of the tree.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import TYPE_CHECKING

from gearcheck.domain.exceptions import ParseError, SourceTreeError
from gearcheck.domain.model.location import Position
from gearcheck.domain.model.package import Package, SourceTree
from gearcheck.domain.model.source_file import ParseFailure, SourceFile
from gearcheck.infrastructure.filters.exclusion import ExclusionMatcher

if TYPE_CHECKING:
    from gearcheck.domain.ports.source_parser import SourceParserPort

logger = logging.getLogger(__name__)

ALWAYS_EXCLUDED_DIRS = frozenset({".git"})
GO_SUFFIX = ".go"


class SourceTreeLoader:
    """Load a Go source tree into Packages.

    Usage:
        loader = SourceTreeLoader(GoSourceParser(), ("vendor", "*_test.go"))
        tree = loader.load(Path("."))
    """

    def __init__(
        self,
        parser: SourceParserPort,
        exclusions: ExclusionMatcher | Iterable[str] = (),
        max_workers: int | None = None,
    ) -> None:
        """Initialize loader.

        Args:
            parser: Parser for single files
            exclusions: Matcher or raw exclusion patterns
            max_workers: Parse files with this many threads (None = sequential)

        Raises:
            TypeError: If parser is None
            ValueError: If max_workers < 1
        """
        if parser is None:
            raise TypeError("parser must not be None")
        if max_workers is not None and max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")

        self._parser = parser
        self._matcher = (
            exclusions if isinstance(exclusions, ExclusionMatcher) else ExclusionMatcher.from_patterns(exclusions)
        )
        self._max_workers = max_workers

    @property
    def matcher(self) -> ExclusionMatcher:
        """Exclusion matcher in use."""
        return self._matcher

    def load(self, root: Path) -> SourceTree:
        """Walk, filter, parse and group.

        Args:
            root: Root directory of the tree

        Returns:
            SourceTree with packages, walked directories and parse failures

        Raises:
            SourceTreeError: Root missing, not a directory or unreadable
        """
        root = Path(root).absolute()
        if not root.exists():
            raise SourceTreeError(root, "no such directory")
        if not root.is_dir():
            raise SourceTreeError(root, "not a directory")
        if not os.access(root, os.R_OK | os.X_OK):
            raise SourceTreeError(root, "permission denied")

        directories, candidates = self._walk(root)
        results = self._parse_all(root, candidates)

        files = [r for r in results if isinstance(r, SourceFile)]
        failures = tuple(r for r in results if isinstance(r, ParseFailure))
        packages = _group_by_package(files)

        logger.info(
            f"Loaded {len(files)} files into {len(packages)} packages from {root}"
            f" ({len(failures)} unparsable)"
        )
        return SourceTree(
            root=root,
            packages=packages,
            directories=frozenset(directories),
            failures=failures,
        )

    def _walk(self, root: Path) -> tuple[list[str], list[Path]]:
        """Collect walked directories and candidate files in sorted order."""
        directories: list[str] = []
        candidates: list[Path] = []

        for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
            rel_dir = Path(dirpath).relative_to(root).as_posix()
            prefix = "" if rel_dir == "." else f"{rel_dir}/"

            kept: list[str] = []
            for name in sorted(dirnames):
                rel = f"{prefix}{name}"
                if name in ALWAYS_EXCLUDED_DIRS:
                    continue
                if self._matcher.prunes(rel):
                    logger.debug(f"Pruned directory {rel}")
                    continue
                kept.append(name)
                directories.append(rel)
            # os.walk descends only into what is left in dirnames
            dirnames[:] = kept

            for name in sorted(filenames):
                if not name.endswith(GO_SUFFIX):
                    continue
                rel = f"{prefix}{name}"
                pattern = self._matcher.matched_by(rel)
                if pattern is not None:
                    logger.debug(f"Excluded {rel} (pattern {pattern!r})")
                    continue
                candidates.append(Path(dirpath) / name)

        return directories, candidates

    def _parse_all(self, root: Path, candidates: list[Path]) -> list[SourceFile | ParseFailure]:
        """Parse candidates, keeping their order whatever the scheduling."""
        if self._max_workers is None or self._max_workers == 1 or len(candidates) < 2:
            return [self._parse_one(root, path) for path in candidates]

        results: list[SourceFile | ParseFailure | None] = [None] * len(candidates)
        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            future_to_idx = {
                executor.submit(self._parse_one, root, path): idx for idx, path in enumerate(candidates)
            }
            for future in as_completed(future_to_idx):
                results[future_to_idx[future]] = future.result()
        return [r for r in results if r is not None]

    def _parse_one(self, root: Path, path: Path) -> SourceFile | ParseFailure:
        """Parse one file, converting ParseError into a ParseFailure."""
        try:
            return self._parser.parse_file(path, root)
        except ParseError as e:
            rel_path = path.relative_to(root).as_posix()
            logger.warning(f"Unparsable file {rel_path}: {e.reason}")
            position = Position(e.line, e.column) if e.line and e.column else None
            return ParseFailure(rel_path=rel_path, reason=e.reason, position=position)


def _group_by_package(files: list[SourceFile]) -> dict[str, Package]:
    """Group files by declared package name, packages ordered by name."""
    by_name: dict[str, list[SourceFile]] = {}
    for source_file in files:
        by_name.setdefault(source_file.package, []).append(source_file)

    packages: dict[str, Package] = {}
    for name in sorted(by_name):
        package = Package.from_files(by_name[name])
        dirs = {f.directory for f in package.files}
        if len(dirs) > 1:
            logger.debug(f"Package {name} merged from {len(dirs)} directories: {', '.join(sorted(dirs))}")
        packages[name] = package
    return packages


def _log_walk_error(error: OSError) -> None:
    logger.warning(f"Cannot read directory {error.filename}: {error.strerror}")
