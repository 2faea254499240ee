"""Domain enumerations."""

from __future__ import annotations

from enum import Enum, IntEnum, auto


class Severity(Enum):
    """Diagnostic severity.

    Values are the spellings used in configuration documents.
    """

    ERROR = "error"  # fails the run
    WARNING = "warning"
    INFO = "info"

    @classmethod
    def parse(cls, value: str) -> Severity:
        """Parse configuration spelling (case-insensitive).

        Raises:
            ValueError: Unknown severity.
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            allowed = ", ".join(s.value for s in cls)
            raise ValueError(f"unknown severity {value!r}, expected one of: {allowed}") from None


class DeclKind(Enum):
    """Kind of a top-level Go type declaration."""

    INTERFACE = auto()
    STRUCT = auto()
    OTHER = auto()  # defined types over non-struct types, aliases


class RuleCategory(Enum):
    """Architecture rule category."""

    CONTRACTS = auto()  # R01
    USAGE = auto()  # R02
    CONSTRUCTORS = auto()  # R03
    BOUNDARIES = auto()  # R04
    CONFIGURATION = auto()  # R05
    ERRORS = auto()  # R06
    PARSING = auto()  # unparsable files


class ExitCode(IntEnum):
    """Process exit status of a validation run."""

    OK = 0
    VIOLATIONS = 1
    FATAL = 2
