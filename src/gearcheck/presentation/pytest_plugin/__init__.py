"""pytest plugin for gearcheck.

Provides fixtures for GEAR architecture tests:
    gear_config: Validation configuration (override in conftest.py)
    gear_validator: GearValidator facade
    gear_report: Report of validating gear_root, computed once per session

Configuration (pytest.ini or pyproject.toml):
    gear_root: Root of the Go tree to validate (default: ".")
    gear_config: Configuration file relative to gear_root (default: ".gearrc")

Example:
    @pytest.mark.gear
    def test_no_gear_errors(gear_report):
        assert gear_report.passed, [d.location for d in gear_report.diagnostics]
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Register fixtures from fixtures module
from gearcheck.presentation.pytest_plugin.fixtures import (
    gear_config,
    gear_report,
    gear_validator,
)

if TYPE_CHECKING:
    import pytest

# Export fixtures for pytest discovery
__all__ = [
    "gear_config",
    "gear_report",
    "gear_validator",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini("gear_root", "Root of the Go source tree to validate", default=".")
    parser.addini("gear_config", "gearcheck configuration file relative to gear_root", default=".gearrc")


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    # Add marker for architecture tests
    config.addinivalue_line(
        "markers",
        "gear: mark test as GEAR architecture test",
    )
