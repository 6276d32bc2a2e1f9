"""
Utility functions and helper modules.

This module provides configuration management and the form validation
helpers shared by the web layer.
"""

from .config import (
    AppSettings,
    ConfigError,
    DatabaseURLValidator,
    EnvironmentConfig,
    LoggingConfigurator,
    LogLevel,
)
from .validation import (
    DIGITS,
    DUPLICATE,
    REQUIRED,
    SIZE,
    TYPE_MISMATCH,
    FieldError,
    ValidationResult,
    bind_form,
    check_duplicate_pet_name,
    validate_owner,
    validate_pet,
    validate_required,
    validate_telephone,
    validate_visit,
)

__all__ = [
    # Configuration
    "AppSettings",
    "ConfigError",
    "DatabaseURLValidator",
    "EnvironmentConfig",
    "LoggingConfigurator",
    "LogLevel",
    # Validation
    "FieldError",
    "ValidationResult",
    "bind_form",
    "check_duplicate_pet_name",
    "validate_owner",
    "validate_pet",
    "validate_required",
    "validate_telephone",
    "validate_visit",
    "REQUIRED",
    "TYPE_MISMATCH",
    "DUPLICATE",
    "DIGITS",
    "SIZE",
]
