"""Source position value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Position in a Go source file.

    Both coordinates are 1-based, as reported by Go tooling.

    Attributes:
        line: Line number (must be > 0)
        column: Column number (must be > 0)
    """

    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.line <= 0:
            raise ValueError(f"line must be > 0, got {self.line}")
        if self.column <= 0:
            raise ValueError(f"column must be > 0, got {self.column}")

    def __str__(self) -> str:
        """Format as line:column."""
        return f"{self.line}:{self.column}"
