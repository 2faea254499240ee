"""Application services for GEAR validation.

GearValidator is the main facade for running a validation pass.
"""

from gearcheck.application.services.report_builder import build_report, effective_diagnostics
from gearcheck.application.services.validator import GearValidator, validate

__all__ = [
    "GearValidator",
    "build_report",
    "effective_diagnostics",
    "validate",
]
