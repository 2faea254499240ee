"""gearcheck domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, abc, dataclasses, enum, pathlib, collections.abc, re
"""

from gearcheck.domain.exceptions import (
    ConfigError,
    GearCheckError,
    ParseError,
    RuleRegistrationError,
    SourceTreeError,
)
from gearcheck.domain.model import (
    Classification,
    DeclKind,
    Diagnostic,
    ExitCode,
    FuncDecl,
    Package,
    Position,
    RuleCategory,
    Severity,
    SourceFile,
    SourceTree,
    TypeDecl,
    TypeRef,
    ValidationConfig,
    ValidationReport,
)
from gearcheck.domain.ports import (
    ReporterProtocol,
    RuleProtocol,
    SourceParserPort,
    TypeResolverPort,
)

__all__ = [
    # Exceptions
    "GearCheckError",
    "ConfigError",
    "SourceTreeError",
    "ParseError",
    "RuleRegistrationError",
    # Enums
    "DeclKind",
    "ExitCode",
    "RuleCategory",
    "Severity",
    # Value objects
    "Position",
    "TypeRef",
    # Entities
    "TypeDecl",
    "FuncDecl",
    "SourceFile",
    "Package",
    "SourceTree",
    # Results
    "Diagnostic",
    "ValidationReport",
    # Configuration
    "Classification",
    "ValidationConfig",
    # Ports
    "SourceParserPort",
    "TypeResolverPort",
    "RuleProtocol",
    "ReporterProtocol",
]
