"""Source parser port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from gearcheck.domain.model.source_file import SourceFile


class SourceParserPort(ABC):
    """Port for parsing Go source files into the declaration model.

    Infrastructure layer must provide implementation.
    """

    @abstractmethod
    def parse_file(self, path: Path, root: Path) -> SourceFile:
        """Parse single Go file.

        Args:
            path: Path to .go file
            root: Validated root, used to compute the relative path

        Returns:
            Parsed SourceFile

        Raises:
            ParseError: If file cannot be read or parsed
        """
        ...
