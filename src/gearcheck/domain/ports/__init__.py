"""Domain ports (interfaces/protocols)."""

from gearcheck.domain.ports.reporter import ReporterProtocol
from gearcheck.domain.ports.rule import RuleProtocol
from gearcheck.domain.ports.source_parser import SourceParserPort
from gearcheck.domain.ports.type_resolver import TypeResolverPort

__all__ = [
    "SourceParserPort",
    "TypeResolverPort",
    "RuleProtocol",
    "ReporterProtocol",
]
