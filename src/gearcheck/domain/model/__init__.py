"""Domain model entities."""

from gearcheck.domain.model.configuration import Classification, ValidationConfig
from gearcheck.domain.model.declarations import (
    Declaration,
    Field,
    FuncDecl,
    Import,
    InterfaceMethod,
    Param,
    PointerExpr,
    Receiver,
    TypeDecl,
    TypeRef,
    is_exported,
)
from gearcheck.domain.model.diagnostic import UNPARSABLE_FILE_RULE_ID, Diagnostic
from gearcheck.domain.model.enums import DeclKind, ExitCode, RuleCategory, Severity
from gearcheck.domain.model.location import Position
from gearcheck.domain.model.package import Package, SourceTree
from gearcheck.domain.model.report import ValidationReport
from gearcheck.domain.model.source_file import ParseFailure, SourceFile

__all__ = [
    # Enums
    "DeclKind",
    "ExitCode",
    "RuleCategory",
    "Severity",
    # Value objects
    "Position",
    "TypeRef",
    "Receiver",
    # Declarations
    "Declaration",
    "Field",
    "FuncDecl",
    "Import",
    "InterfaceMethod",
    "Param",
    "PointerExpr",
    "TypeDecl",
    "is_exported",
    # Aggregates
    "SourceFile",
    "ParseFailure",
    "Package",
    "SourceTree",
    # Results
    "Diagnostic",
    "UNPARSABLE_FILE_RULE_ID",
    "ValidationReport",
    # Configuration
    "Classification",
    "ValidationConfig",
]
