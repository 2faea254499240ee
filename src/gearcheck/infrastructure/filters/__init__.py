"""Infrastructure layer: path exclusion filters.

Usage:
    from gearcheck.infrastructure.filters import ExclusionMatcher

    matcher = ExclusionMatcher(("vendor", "*_test.go"))
    matcher.is_excluded("pkg/foo/foo_test.go")  # True
"""

from gearcheck.infrastructure.filters.exclusion import ExclusionMatcher, go_match, is_glob

__all__ = [
    "ExclusionMatcher",
    "go_match",
    "is_glob",
]
