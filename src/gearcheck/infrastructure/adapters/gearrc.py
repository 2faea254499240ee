""".gearrc configuration adapter.

Reads the YAML configuration document into an immutable ValidationConfig.

Example .gearrc:
    exclude:
      - "vendor"
      - "*_test.go"
    rules:
      R01: "error"
      R02: "warning"
    classification:
      module_prefixes: ["github.com/acme/app"]
"""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import Any

import yaml

from gearcheck.domain.exceptions import ConfigError
from gearcheck.domain.model.configuration import RULE_ID_PATTERN, Classification, ValidationConfig
from gearcheck.domain.model.enums import Severity

logger = logging.getLogger(__name__)

GEARRC = ".gearrc"
TOP_LEVEL_KEYS = frozenset({"exclude", "rules", "classification"})

DEFAULT_GEARRC = """\
exclude:
  - "vendor"
  - "*_test.go"
  - "*.pb.go"
  - "scripts"
  - "docs"

rules:
  R01: "warning"  # Interface contracts (exported interfaces, unexported structs)
  R02: "error"    # Interface usage (no pointer-to-interface anti-patterns)
  R03: "warning"  # Constructor patterns (returning interfaces)
  R04: "info"     # Domain boundaries (clean layer separation)
  R05: "error"    # Centralized configuration (internal/config package)
  R06: "error"    # Systematic error handling (internal/errors package)
"""


def find_config(root: Path) -> Path | None:
    """Path of <root>/.gearrc if it exists."""
    candidate = Path(root) / GEARRC
    return candidate if candidate.is_file() else None


def load_config(path: Path | None) -> ValidationConfig:
    """Load configuration from a .gearrc file.

    A missing file is not an error: built-in defaults are returned.

    Args:
        path: Configuration file, or None for defaults

    Returns:
        Validated configuration

    Raises:
        ConfigError: File unreadable or document malformed
    """
    if path is None:
        return ValidationConfig()

    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug(f"No configuration file at {path}, using defaults")
        return ValidationConfig()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"cannot read configuration: {e}", path=path) from e

    config = parse_config(text, path=path)
    logger.info(f"Configuration loaded from {path}")
    return config


def parse_config(text: str, *, path: Path | None = None) -> ValidationConfig:
    """Parse a .gearrc YAML document.

    Args:
        text: Document contents
        path: Source file for error messages

    Returns:
        Validated configuration

    Raises:
        ConfigError: Invalid YAML, unknown keys, bad patterns or severities
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML: {e}", path=path) from e

    if data is None:
        return ValidationConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"top level must be a mapping, got {type(data).__name__}", path=path)

    unknown = sorted(str(k) for k in data if k not in TOP_LEVEL_KEYS)
    if unknown:
        raise ConfigError(f"unknown keys: {', '.join(unknown)}", path=path)

    exclude = _parse_exclude(data.get("exclude"), path)
    rules = _parse_rules(data.get("rules"), path)
    classification = _parse_classification(data.get("classification"), path)

    try:
        return ValidationConfig(exclude=exclude, rules=rules, classification=classification)
    except (TypeError, ValueError) as e:
        raise ConfigError(str(e), path=path) from e


def write_default_config(root: Path, *, force: bool = False) -> Path:
    """Write the default .gearrc into root.

    Args:
        root: Project root
        force: Overwrite an existing file

    Returns:
        Path of the written file

    Raises:
        FileExistsError: File exists and force is False
    """
    target = Path(root) / GEARRC
    if target.exists() and not force:
        raise FileExistsError(f"{target} already exists")
    target.write_text(DEFAULT_GEARRC, encoding="utf-8")
    logger.info(f"Default configuration written to {target}")
    return target


def _parse_exclude(value: Any, path: Path | None) -> tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise ConfigError(f"'exclude' must be a list of patterns, got {type(value).__name__}", path=path)
    patterns: list[str] = []
    for item in value:
        if not isinstance(item, str):
            raise ConfigError(f"exclude pattern must be a string, got {item!r}", path=path)
        if item.strip():
            patterns.append(item.strip())
    return tuple(patterns)


def _parse_rules(value: Any, path: Path | None) -> dict[str, Severity]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"'rules' must be a mapping of rule id to severity, got {type(value).__name__}", path=path)
    rules: dict[str, Severity] = {}
    for key, raw in value.items():
        rule_id = str(key).strip().upper()
        if not RULE_ID_PATTERN.match(rule_id):
            raise ConfigError(f"invalid rule id {key!r}, expected R01..R99", path=path)
        if not isinstance(raw, str):
            raise ConfigError(f"severity for {rule_id} must be a string, got {raw!r}", path=path)
        try:
            rules[rule_id] = Severity.parse(raw)
        except ValueError as e:
            raise ConfigError(f"{rule_id}: {e}", path=path) from e
    return rules


def _parse_classification(value: Any, path: Path | None) -> Classification:
    if value is None:
        return Classification()
    if not isinstance(value, dict):
        raise ConfigError(f"'classification' must be a mapping, got {type(value).__name__}", path=path)

    fields = {f.name: f for f in dataclasses.fields(Classification)}
    kwargs: dict[str, Any] = {}
    for key, raw in value.items():
        if key not in fields:
            raise ConfigError(f"unknown classification key {key!r}", path=path)
        if fields[key].type == "str":
            if not isinstance(raw, str):
                raise ConfigError(f"classification.{key} must be a string, got {raw!r}", path=path)
            kwargs[key] = raw
        else:
            if not isinstance(raw, list) or not all(isinstance(item, str) for item in raw):
                raise ConfigError(f"classification.{key} must be a list of strings", path=path)
            kwargs[key] = tuple(raw)

    try:
        return Classification(**kwargs)
    except ValueError as e:
        raise ConfigError(f"classification: {e}", path=path) from e
