"""Type resolver protocol for cross-package lookups."""

from __future__ import annotations

from typing import Protocol


class TypeResolverPort(Protocol):
    """Contract for answering "is this imported type an interface?".

    Implementations may cache. A type that cannot be located must
    resolve to False, never raise.

    Example:
        class FixedResolver:
            def __init__(self, interfaces: set[tuple[str, str]]) -> None:
                self._interfaces = interfaces

            def is_interface(self, import_path: str, type_name: str) -> bool:
                return (import_path, type_name) in self._interfaces
    """

    def is_interface(self, import_path: str, type_name: str) -> bool:
        """Check whether type_name in package import_path is an interface.

        Args:
            import_path: Import path as written in the importing file
            type_name: Exported type name

        Returns:
            True iff the type is declared as an interface
        """
        ...
