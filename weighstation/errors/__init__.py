"""
errors/ - Error Taxonomy

Structured error classification for invalid inputs and configuration.
"""

from .taxonomy import (
    ErrorSeverity,
    ErrorCategory,
    ErrorCode,
    ValidationIssue,
    WeighStationError,
    InvalidConfigurationError,
    ConfigurationLoadError,
    error_response,
)

__all__ = [
    "ErrorSeverity",
    "ErrorCategory",
    "ErrorCode",
    "ValidationIssue",
    "WeighStationError",
    "InvalidConfigurationError",
    "ConfigurationLoadError",
    "error_response",
]
