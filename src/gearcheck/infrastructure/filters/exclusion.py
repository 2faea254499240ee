"""Exclusion filters.

Decide whether a path relative to the validated root is left out of the
analysis. Paths are POSIX strings without a leading "./".

Pattern kinds, checked in precedence order for each pattern:
    1. exact base name ("main.go")
    2. directory segment(s) contained in the path ("vendor", "pkg/external")
    3. glob with Go filepath.Match semantics ("*_test.go", "pkg/*/gen.go"),
       only for patterns containing * or ?
"""

from __future__ import annotations

import fnmatch
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import PurePosixPath

_GLOB_CHARS = ("*", "?")


def is_glob(pattern: str) -> bool:
    """True if pattern uses wildcards."""
    return any(ch in pattern for ch in _GLOB_CHARS)


def go_match(pattern: str, name: str) -> bool:
    """Match name against pattern like Go's filepath.Match.

    Unlike fnmatch, * and ? never cross a "/": pattern and name must have
    the same number of segments and match segment by segment.

    Examples:
        go_match("*_test.go", "a_test.go")          → True
        go_match("pkg/*.go", "pkg/a.go")            → True
        go_match("pkg/*.go", "pkg/sub/a.go")        → False
    """
    pattern_parts = pattern.split("/")
    name_parts = name.split("/")
    if len(pattern_parts) != len(name_parts):
        return False
    return all(fnmatch.fnmatchcase(n, p) for p, n in zip(pattern_parts, name_parts, strict=True))


def _normalize(pattern: str) -> str:
    pattern = pattern.strip()
    while pattern.startswith("./"):
        pattern = pattern[2:]
    return pattern.rstrip("/")


def _contains_run(parts: tuple[str, ...], run: tuple[str, ...]) -> bool:
    """True if run appears as contiguous segments of parts."""
    size = len(run)
    return any(parts[i : i + size] == run for i in range(len(parts) - size + 1))


@dataclass(frozen=True, slots=True)
class ExclusionMatcher:
    """Ordered exclusion patterns.

    Patterns are stripped; empty ones are dropped.

    Attributes:
        patterns: Normalized patterns in configuration order
    """

    patterns: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Normalize patterns."""
        normalized = tuple(p for p in (_normalize(raw) for raw in self.patterns) if p)
        object.__setattr__(self, "patterns", normalized)

    @classmethod
    def from_patterns(cls, patterns: Iterable[str]) -> ExclusionMatcher:
        """Create matcher from any iterable of patterns."""
        return cls(tuple(patterns))

    def matched_by(self, rel_path: str) -> str | None:
        """First pattern excluding rel_path, None if it is kept.

        Args:
            rel_path: File path relative to the root

        Returns:
            The excluding pattern or None
        """
        path = PurePosixPath(rel_path)
        base = path.name
        parts = path.parts
        for pattern in self.patterns:
            glob = is_glob(pattern)
            if not glob and base == pattern:
                return pattern
            run = tuple(pattern.split("/"))
            if _contains_run(parts[:-1], run) or parts[-len(run) :] == run:
                return pattern
            if glob and (go_match(pattern, base) or go_match(pattern, rel_path)):
                return pattern
        return None

    def is_excluded(self, rel_path: str) -> bool:
        """True if any pattern excludes rel_path."""
        return self.matched_by(rel_path) is not None

    def prunes(self, rel_dir: str) -> bool:
        """True if the walk must not descend into rel_dir.

        A directory is pruned when its final segment equals a pattern, or
        its trailing segments equal a multi-segment pattern.
        """
        parts = PurePosixPath(rel_dir).parts
        for pattern in self.patterns:
            if is_glob(pattern):
                continue
            run = tuple(pattern.split("/"))
            if parts[-len(run) :] == run:
                return True
        return False
