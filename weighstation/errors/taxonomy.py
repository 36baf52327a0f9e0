"""
errors/taxonomy.py - Error classification for weight compliance

Structured error types raised by the compliance library and its
configuration layer. Over-limit conditions are never errors; they are
reported as Violation entries on the ComplianceResult.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
from enum import Enum


class ErrorSeverity(Enum):
    """Error severity levels."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Error categories."""
    # Input validation errors (1xxx)
    VALIDATION = "validation"

    # Limit profile errors (2xxx)
    LIMITS = "limits"

    # Configuration errors (6xxx)
    CONFIGURATION = "configuration"


class ErrorCode(Enum):
    """Specific error codes."""

    # Validation (1xxx)
    VAL_INVALID_VEHICLE = 1001
    VAL_PAYLOAD = 1002

    # Limits (2xxx)
    LIM_INVALID_PROFILE = 2001

    # System (6xxx)
    SYS_CONFIG = 6001


CODE_CATEGORIES = {
    ErrorCode.VAL_INVALID_VEHICLE: ErrorCategory.VALIDATION,
    ErrorCode.VAL_PAYLOAD: ErrorCategory.VALIDATION,
    ErrorCode.LIM_INVALID_PROFILE: ErrorCategory.LIMITS,
    ErrorCode.SYS_CONFIG: ErrorCategory.CONFIGURATION,
}


@dataclass(frozen=True)
class ValidationIssue:
    """A single problem found while validating an input structure."""

    field: str
    message: str
    value: Any = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "field": self.field,
            "message": self.message,
            "value": self.value,
        }

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


# =============================================================================
# BASE ERROR CLASS
# =============================================================================

class WeighStationError(Exception):
    """
    Base class for weighstation errors.

    Provides structured error information with:
    - Error code for programmatic handling
    - Human-readable message
    - Recovery hint for the caller
    - Detailed context for debugging
    """

    code: ErrorCode = ErrorCode.VAL_INVALID_VEHICLE
    category: ErrorCategory = ErrorCategory.VALIDATION
    severity: ErrorSeverity = ErrorSeverity.ERROR

    def __init__(
        self,
        message: str = "",
        *,
        recovery_hint: str = "",
        details: Optional[Dict[str, Any]] = None,
        **kwargs,
    ):
        self.message = message or self.__class__.__doc__ or "Weighstation error"
        self.recovery_hint = recovery_hint
        self.details = details or {}
        self.details.update(kwargs)

        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for API responses."""
        details = dict(self.details)
        if "issues" in details:
            details["issues"] = [i.to_dict() for i in details["issues"]]
        return {
            "code": self.code.value,
            "category": self.category.value,
            "severity": self.severity.value,
            "message": self.message,
            "recovery_hint": self.recovery_hint,
            "details": details,
        }

    def __str__(self) -> str:
        parts = [f"[{self.code.name}] {self.message}"]
        if self.recovery_hint:
            parts.append(f"Hint: {self.recovery_hint}")
        return " ".join(parts)


# =============================================================================
# SPECIFIC ERROR TYPES
# =============================================================================

class InvalidConfigurationError(WeighStationError):
    """Vehicle or limit configuration is structurally invalid."""

    code = ErrorCode.VAL_INVALID_VEHICLE
    category = ErrorCategory.VALIDATION
    severity = ErrorSeverity.ERROR

    def __init__(
        self,
        issues: List[ValidationIssue],
        subject: str = "vehicle configuration",
        code: Optional[ErrorCode] = None,
        **kwargs,
    ):
        issue_count = len(issues)
        message = f"Invalid {subject} with {issue_count} issue(s)"
        if issues:
            message += f": {issues[0]}"
            if issue_count > 1:
                message += f" (+{issue_count - 1} more)"

        if code is not None:
            self.code = code
            self.category = CODE_CATEGORIES[code]

        super().__init__(
            message=message,
            recovery_hint="Correct the listed fields and evaluate again.",
            issues=list(issues),
            issue_count=issue_count,
            **kwargs,
        )

    @property
    def issues(self) -> List[ValidationIssue]:
        return self.details["issues"]


class ConfigurationLoadError(WeighStationError):
    """Configuration file could not be loaded."""

    code = ErrorCode.SYS_CONFIG
    category = ErrorCategory.CONFIGURATION
    severity = ErrorSeverity.ERROR

    def __init__(
        self,
        path: str,
        reason: str,
        **kwargs,
    ):
        message = f"Could not load configuration from {path}: {reason}"
        super().__init__(
            message=message,
            recovery_hint="Check that the file exists and contains a JSON object.",
            path=path,
            reason=reason,
            **kwargs,
        )


def error_response(error: WeighStationError) -> Dict[str, Any]:
    """
    Convert WeighStationError to response format.

    Returns structured error response suitable for JSON serialization.
    """
    return {
        "error": error.to_dict(),
    }
