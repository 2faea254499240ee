"""pytest fixtures for GEAR validation.

Provides fixtures for validating a Go tree from a test suite.
User overrides gear_config in their conftest.py.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from gearcheck.application.services import GearValidator
from gearcheck.domain.model.configuration import ValidationConfig
from gearcheck.domain.model.report import ValidationReport
from gearcheck.infrastructure.adapters.gearrc import load_config


def _get_ini_value(config: pytest.Config, name: str, default: str) -> str:
    """Get ini value from pytest config with fallback.

    Args:
        config: pytest Config object
        name: ini option name
        default: default value if not set

    Returns:
        String value of ini option
    """
    value = config.getini(name)
    if value:
        return str(value)
    return default


def _gear_root(config: pytest.Config) -> Path:
    root_dir = Path(str(config.rootpath))
    return root_dir / _get_ini_value(config, "gear_root", ".")


@pytest.fixture(scope="session")
def gear_config(request: pytest.FixtureRequest) -> ValidationConfig:
    """Configuration read from the gear_config ini option.

    Defaults to <gear_root>/.gearrc; a missing file yields built-in
    defaults. Override this fixture in conftest.py for a custom config.

    Returns:
        ValidationConfig
    """
    root = _gear_root(request.config)
    config_name = _get_ini_value(request.config, "gear_config", ".gearrc")
    return load_config(root / config_name)


@pytest.fixture(scope="session")
def gear_validator(gear_config: ValidationConfig) -> GearValidator:
    """GearValidator with the session configuration.

    Returns:
        GearValidator with default rules
    """
    return GearValidator(gear_config)


@pytest.fixture(scope="session")
def gear_report(request: pytest.FixtureRequest, gear_validator: GearValidator) -> ValidationReport:
    """Report of validating gear_root once per session.

    Raises:
        FileNotFoundError: gear_root does not exist

    Returns:
        ValidationReport
    """
    root = _gear_root(request.config)
    if not root.is_dir():
        raise FileNotFoundError(
            f"gear_root '{root}' does not exist. Configure gear_root in pytest.ini or pyproject.toml."
        )
    return gear_validator.validate(root)
