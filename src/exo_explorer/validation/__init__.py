"""Validation and cleaning of mapped archive records."""

from exo_explorer.validation.cleaner import (
    BadValue,
    DuplicateName,
    ValidationReport,
    ValidationStats,
    YearRange,
    compute_validation_summary,
    estimate_eq_temp,
    estimate_mass_from_radius,
    log_validation_report,
    validate_and_clean,
)

__all__ = [
    "BadValue",
    "DuplicateName",
    "ValidationReport",
    "ValidationStats",
    "YearRange",
    "compute_validation_summary",
    "estimate_eq_temp",
    "estimate_mass_from_radius",
    "log_validation_report",
    "validate_and_clean",
]
