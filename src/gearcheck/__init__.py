"""gearcheck - GEAR architecture rule validator for Go source trees."""

__version__ = "0.1.0"

from gearcheck.application.services import GearValidator, validate
from gearcheck.domain.model import Diagnostic, Severity, ValidationConfig, ValidationReport
from gearcheck.infrastructure.adapters.gearrc import find_config, load_config

__all__ = [
    "Diagnostic",
    "GearValidator",
    "Severity",
    "ValidationConfig",
    "ValidationReport",
    "__version__",
    "find_config",
    "load_config",
    "validate",
]
