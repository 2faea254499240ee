"""Infrastructure adapters: tree loader, external type resolver, .gearrc."""

from gearcheck.infrastructure.adapters.gearrc import (
    GEARRC,
    find_config,
    load_config,
    parse_config,
    write_default_config,
)
from gearcheck.infrastructure.adapters.resolver import ExternalTypeResolver
from gearcheck.infrastructure.adapters.tree_loader import ALWAYS_EXCLUDED_DIRS, SourceTreeLoader

__all__ = [
    "ALWAYS_EXCLUDED_DIRS",
    "GEARRC",
    "ExternalTypeResolver",
    "SourceTreeLoader",
    "find_config",
    "load_config",
    "parse_config",
    "write_default_config",
]
