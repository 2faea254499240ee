"""Domain exceptions: all public errors of gearcheck.

Hexagonal architecture: all exceptions visible to users defined in domain.
Infrastructure/Application use these, not define their own public exceptions.

Fatal errors (ConfigError, SourceTreeError) stop a run before any diagnostic
is produced. ParseError is recovered per file by the tree loader.
"""

from __future__ import annotations

from pathlib import Path


class GearCheckError(Exception):
    """Base for all gearcheck error exceptions.

    Allows: except GearCheckError to catch all library errors.
    """


class ConfigError(GearCheckError, ValueError):
    """Configuration document is malformed.

    Fatal to the run: no partial validation is performed.

    Attributes:
        path: Configuration file (None for programmatic configs).
        reason: What is wrong with it.
    """

    def __init__(self, reason: str, *, path: Path | None = None) -> None:
        """Initialize with reason and optional file path."""
        if not reason:
            raise ValueError("reason must not be empty")

        self.path = path
        self.reason = reason
        prefix = f"{path}: " if path is not None else ""
        super().__init__(f"{prefix}{reason}")


class SourceTreeError(GearCheckError, OSError):
    """Root of the source tree is missing or unreadable.

    Inherits OSError for semantic correctness (filesystem failure).

    Attributes:
        root: Requested root directory.
        reason: Why it cannot be used.
    """

    def __init__(self, root: Path, reason: str) -> None:
        """Initialize with root path and reason."""
        self.root = root
        self.reason = reason
        super().__init__(f"{root}: {reason}")


class ParseError(GearCheckError, SyntaxError):
    """Failed to read or parse a Go source file.

    Recovered locally by the loader: turned into an "unparsable file"
    diagnostic, the rest of the tree is still processed.

    Attributes:
        path: File that failed.
        reason: Error description.
        line: 1-based line of the error, None if unknown.
        column: 1-based column of the error, None if unknown.
    """

    def __init__(
        self,
        *,
        path: str,
        reason: str,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with file path, reason and optional position."""
        self.path = path
        self.reason = reason
        self.line = line
        self.column = column
        where = f"{path}:{line}:{column}" if line is not None else path
        super().__init__(f"{where}: {reason}")


class RuleRegistrationError(GearCheckError):
    """Rule cannot be registered.

    Raised for malformed or duplicate rule identifiers.

    Attributes:
        rule_id: Offending identifier.
        reason: Why registration failed.
    """

    def __init__(self, rule_id: str, reason: str) -> None:
        """Initialize with rule id and reason."""
        if not reason:
            raise ValueError("reason must not be empty")

        self.rule_id = rule_id
        self.reason = reason
        super().__init__(f"Invalid rule '{rule_id}': {reason}")
