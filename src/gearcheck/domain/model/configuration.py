"""Validation configuration.

Immutable objects with FAIL-FIRST validation. Loaded once per run
(see gearcheck.infrastructure.adapters.gearrc) and never mutated.
"""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from gearcheck.domain.model.enums import Severity

RULE_ID_PATTERN = re.compile(r"^R\d{2}$")

DEFAULT_DATA_SUFFIXES: tuple[str, ...] = (
    "Request",
    "Response",
    "Model",
    "DTO",
    "Data",
    "Entity",
    "Config",
    "Settings",
    "Options",
    "Params",
    "Result",
    "Info",
    "Status",
    "State",
    "Event",
    "Message",
    "Payload",
    "Body",
    "Error",
    "Exception",
    "Notification",
    "Alert",
    "Report",
)
DEFAULT_DATA_PREFIXES: tuple[str, ...] = ("Create", "Update", "Delete", "Get", "List", "Search")
DEFAULT_DATA_PATH_CATEGORIES: tuple[str, ...] = (
    "model",
    "proto",
    "dto",
    "client",
    "provider",
    "config",
    "errors",
)
DEFAULT_CONSTRUCTOR_EXEMPT_CATEGORIES: tuple[str, ...] = (
    "errors",
    "utils",
    "util",
    "config",
    "model",
    "dto",
    "proto",
)


@dataclass(frozen=True, slots=True)
class Classification:
    """Naming and path heuristics used by the rules.

    Attributes:
        data_suffixes: Struct name suffixes marking data carriers (R01)
        data_prefixes: Struct name prefixes marking data carriers (R01)
        data_path_categories: Directory names holding data carriers (R01)
        constructor_exempt_categories: Directories whose constructors may
            return concrete types (R03)
        constructor_prefix: Constructor name prefix (R03)
        config_dir: Required centralized configuration directory (R05)
        errors_dir: Required centralized errors directory (R06)
        module_prefixes: Extra module roots stripped from import paths
            before local resolution, in addition to go.mod's module path
    """

    data_suffixes: tuple[str, ...] = DEFAULT_DATA_SUFFIXES
    data_prefixes: tuple[str, ...] = DEFAULT_DATA_PREFIXES
    data_path_categories: tuple[str, ...] = DEFAULT_DATA_PATH_CATEGORIES
    constructor_exempt_categories: tuple[str, ...] = DEFAULT_CONSTRUCTOR_EXEMPT_CATEGORIES
    constructor_prefix: str = "New"
    config_dir: str = "internal/config"
    errors_dir: str = "internal/errors"
    module_prefixes: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.constructor_prefix:
            raise ValueError("constructor_prefix must not be empty")
        if not self.config_dir.strip("/"):
            raise ValueError("config_dir must not be empty")
        if not self.errors_dir.strip("/"):
            raise ValueError("errors_dir must not be empty")
        for name in (
            "data_suffixes",
            "data_prefixes",
            "data_path_categories",
            "constructor_exempt_categories",
            "module_prefixes",
        ):
            values = getattr(self, name)
            if any(not isinstance(v, str) or not v for v in values):
                raise ValueError(f"{name} must contain non-empty strings")

    def is_data_name(self, name: str) -> bool:
        """True if name looks like a data carrier (suffix or prefix match)."""
        return name.endswith(self.data_suffixes) or name.startswith(self.data_prefixes)


@dataclass(frozen=True, slots=True)
class ValidationConfig:
    """Configuration of one validation run.

    Attributes:
        exclude: Ordered exclusion patterns (name | directory segment | glob)
        rules: Rule id → severity override
        classification: Naming and path heuristics
    """

    exclude: tuple[str, ...] = ()
    rules: Mapping[str, Severity] = field(default_factory=dict)
    classification: Classification = field(default_factory=Classification)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if any(not isinstance(p, str) for p in self.exclude):
            raise TypeError("exclude patterns must be strings")
        for rule_id, severity in self.rules.items():
            if not RULE_ID_PATTERN.match(rule_id):
                raise ValueError(f"rule id must look like R01, got {rule_id!r}")
            if not isinstance(severity, Severity):
                raise TypeError(f"severity for {rule_id} must be Severity, got {type(severity).__name__}")

    def severity_for(self, rule_id: str, default: Severity) -> Severity:
        """Override for rule_id if configured, else default."""
        return self.rules.get(rule_id, default)

    def with_exclusions(self, patterns: Iterable[str], *, override: bool = False) -> ValidationConfig:
        """Copy with command-line patterns added (or replacing the list).

        Duplicates are dropped, first occurrence wins.
        """
        extra = tuple(p.strip() for p in patterns if p.strip())
        combined = extra if override else self.exclude + extra
        return dataclasses.replace(self, exclude=tuple(dict.fromkeys(combined)))
