"""
Weight Compliance Data Model

Vehicle configuration inputs and compliance result structures.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Union
import math

from ..errors import InvalidConfigurationError, ValidationIssue
from .enums import ComplianceStatus, VehicleType, ViolationType
from .utils import determinize_dict

# Default spacing between axles when none is measured (feet)
DEFAULT_AXLE_SPACING_FT = 4.5

_RECOMMENDATIONS = {
    ViolationType.SINGLE_AXLE: "Redistribute load to reduce weight on this axle",
    ViolationType.TANDEM_AXLE: "Redistribute load to reduce weight on these axles",
    ViolationType.TRIDEM_AXLE: "Redistribute load to reduce weight on these axles",
    ViolationType.GROSS_WEIGHT: "Reduce load to comply with the gross weight limit",
    ViolationType.BRIDGE_FORMULA: (
        "Redistribute load or reduce total weight to comply with bridge formula"
    ),
}

_ADVISORY_RECOMMENDATIONS = {
    ViolationType.SINGLE_AXLE: "Consider redistributing load to reduce weight on this axle",
    ViolationType.TANDEM_AXLE: "Consider redistributing load to reduce weight on these axles",
    ViolationType.TRIDEM_AXLE: "Consider redistributing load to reduce weight on these axles",
    ViolationType.GROSS_WEIGHT: "Consider reducing load to ensure compliance with the gross weight limit",
    ViolationType.BRIDGE_FORMULA: (
        "Consider redistributing load or reducing total weight to ensure compliance "
        "with bridge formula"
    ),
}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


# =============================================================================
# INPUTS
# =============================================================================

@dataclass(frozen=True)
class AxleConfig:
    """Axle layout of a vehicle, front to rear."""

    axle_count: int
    axle_spacing: Sequence[float] = ()   # feet between consecutive axles
    axle_weights: Sequence[float] = ()   # pounds on each axle

    def __post_init__(self):
        # Freeze caller-owned lists
        object.__setattr__(self, "axle_spacing", tuple(self.axle_spacing))
        object.__setattr__(self, "axle_weights", tuple(self.axle_weights))

    @property
    def wheelbase(self) -> float:
        """Distance between first and last axle (sum of spacings)."""
        return float(sum(self.axle_spacing))

    @property
    def total_axle_weight(self) -> float:
        return float(sum(self.axle_weights))

    def validation_issues(self) -> List[ValidationIssue]:
        """Collect every structural problem in this axle configuration."""
        issues: List[ValidationIssue] = []

        count = self.axle_count
        if isinstance(count, bool) or not isinstance(count, int):
            issues.append(ValidationIssue("axles.axle_count", "must be an integer", count))
            return issues
        if count < 1:
            issues.append(ValidationIssue("axles.axle_count", "must be at least 1", count))
            return issues

        if len(self.axle_weights) != count:
            issues.append(ValidationIssue(
                "axles.axle_weights",
                f"expected {count} entries, got {len(self.axle_weights)}",
                list(self.axle_weights),
            ))
        if len(self.axle_spacing) != count - 1:
            issues.append(ValidationIssue(
                "axles.axle_spacing",
                f"expected {count - 1} entries, got {len(self.axle_spacing)}",
                list(self.axle_spacing),
            ))

        for i, weight in enumerate(self.axle_weights):
            if not _is_number(weight) or not math.isfinite(weight):
                issues.append(ValidationIssue(f"axles.axle_weights[{i}]", "must be a finite number", weight))
            elif weight < 0:
                issues.append(ValidationIssue(f"axles.axle_weights[{i}]", "must not be negative", weight))

        for i, spacing in enumerate(self.axle_spacing):
            if not _is_number(spacing) or not math.isfinite(spacing):
                issues.append(ValidationIssue(f"axles.axle_spacing[{i}]", "must be a finite number", spacing))
            elif spacing <= 0:
                issues.append(ValidationIssue(f"axles.axle_spacing[{i}]", "must be greater than zero", spacing))

        return issues

    def to_dict(self) -> Dict[str, Any]:
        return {
            "axle_count": self.axle_count,
            "axle_spacing": list(self.axle_spacing),
            "axle_weights": list(self.axle_weights),
        }


@dataclass(frozen=True)
class VehicleConfig:
    """Vehicle presented for a compliance check."""

    axles: AxleConfig
    gross_weight: float
    total_length: float
    type: VehicleType = VehicleType.OTHER

    def __post_init__(self):
        if not isinstance(self.type, VehicleType):
            object.__setattr__(self, "type", VehicleType.parse(self.type))

    @property
    def axle_count(self) -> int:
        return self.axles.axle_count

    @classmethod
    def uniform(
        cls,
        axle_count: int,
        gross_weight: float,
        vehicle_type: Union[str, VehicleType] = VehicleType.SEMI,
        spacing: float = DEFAULT_AXLE_SPACING_FT,
    ) -> "VehicleConfig":
        """
        Build a vehicle with gross weight spread evenly over its axles.

        Every axle gap uses the same spacing and total length equals the
        wheelbase.
        """
        spacings = [spacing] * max(axle_count - 1, 0)
        weights = [gross_weight / axle_count] * axle_count if axle_count > 0 else []
        return cls(
            type=VehicleType.parse(vehicle_type),
            axles=AxleConfig(
                axle_count=axle_count,
                axle_spacing=spacings,
                axle_weights=weights,
            ),
            total_length=sum(spacings),
            gross_weight=gross_weight,
        )

    def validation_issues(self) -> List[ValidationIssue]:
        """Collect every structural problem in this vehicle configuration."""
        issues = self.axles.validation_issues()

        for name in ("gross_weight", "total_length"):
            value = getattr(self, name)
            if not _is_number(value) or not math.isfinite(value):
                issues.append(ValidationIssue(name, "must be a finite number", value))
            elif value < 0:
                issues.append(ValidationIssue(name, "must not be negative", value))

        return issues

    def validate(self) -> "VehicleConfig":
        """
        Check the configuration before evaluation.

        Returns:
            self, for chaining

        Raises:
            InvalidConfigurationError: listing every problem found
        """
        issues = self.validation_issues()
        if issues:
            raise InvalidConfigurationError(issues)
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "axles": self.axles.to_dict(),
            "total_length": self.total_length,
            "gross_weight": self.gross_weight,
        }


# =============================================================================
# RESULTS
# =============================================================================

@dataclass(frozen=True)
class Violation:
    """A check whose actual weight exceeds its limit."""

    type: ViolationType
    actual: float
    limit: float
    over_weight: float
    axle_index: Optional[int] = None

    @property
    def recommendation(self) -> str:
        return _RECOMMENDATIONS[self.type]

    @property
    def description(self) -> str:
        subject = _describe_subject(self.type, self.axle_index)
        return (
            f"{subject} weight of {self.actual:,.0f} lbs exceeds "
            f"limit of {self.limit:,.0f} lbs by {self.over_weight:,.0f} lbs"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "actual": self.actual,
            "limit": self.limit,
            "over_weight": self.over_weight,
            "axle_index": self.axle_index,
            "description": self.description,
            "recommendation": self.recommendation,
        }


@dataclass(frozen=True)
class Advisory:
    """A passing check that is close to its limit."""

    type: ViolationType
    actual: float
    limit: float
    margin: float
    axle_index: Optional[int] = None

    @property
    def recommendation(self) -> str:
        return _ADVISORY_RECOMMENDATIONS[self.type]

    @property
    def description(self) -> str:
        subject = _describe_subject(self.type, self.axle_index)
        return (
            f"{subject} weight of {self.actual:,.0f} lbs is approaching "
            f"limit of {self.limit:,.0f} lbs"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "actual": self.actual,
            "limit": self.limit,
            "margin": self.margin,
            "axle_index": self.axle_index,
            "description": self.description,
            "recommendation": self.recommendation,
        }


_VEHICLE_SUBJECTS = {
    ViolationType.GROSS_WEIGHT: "Gross vehicle",
    ViolationType.BRIDGE_FORMULA: "Bridge formula span",
}


def _describe_subject(violation_type: ViolationType, axle_index: Optional[int]) -> str:
    if axle_index is None or not violation_type.is_axle_group:
        return _VEHICLE_SUBJECTS.get(violation_type, violation_type.value)
    first = axle_index + 1
    last = axle_index + violation_type.group_size
    if first == last:
        return f"Axle {first}"
    return f"{violation_type.value} group (axles {first}-{last})"


@dataclass
class ComplianceDetails:
    """Axle-level violations separated from whole-vehicle flags."""

    axle_violations: List[Violation] = field(default_factory=list)
    gross_violation: bool = False
    bridge_formula_violation: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "axle_violations": [v.to_dict() for v in self.axle_violations],
            "gross_violation": self.gross_violation,
            "bridge_formula_violation": self.bridge_formula_violation,
        }


@dataclass
class ComplianceResult:
    """Complete outcome of one compliance evaluation."""

    is_compliant: bool
    violations: List[Violation]
    max_allowed_weight: float
    over_weight: float
    details: ComplianceDetails = field(default_factory=ComplianceDetails)

    advisories: List[Advisory] = field(default_factory=list)
    jurisdiction: str = ""

    @property
    def status(self) -> ComplianceStatus:
        """
        Status string stored on weigh-ticket records.

        Any violation is Non-Compliant. Otherwise an advisory, or gross
        weight above max_allowed_weight, is Warning.
        """
        if not self.is_compliant:
            return ComplianceStatus.NON_COMPLIANT
        if self.advisories or self.over_weight > 0:
            return ComplianceStatus.WARNING
        return ComplianceStatus.COMPLIANT

    def violations_of(self, violation_type: ViolationType) -> List[Violation]:
        return [v for v in self.violations if v.type == violation_type]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a determinized dictionary."""
        return determinize_dict({
            "is_compliant": self.is_compliant,
            "status": self.status.value,
            "jurisdiction": self.jurisdiction,
            "violations": [v.to_dict() for v in self.violations],
            "advisories": [a.to_dict() for a in self.advisories],
            "max_allowed_weight": self.max_allowed_weight,
            "over_weight": self.over_weight,
            "details": self.details.to_dict(),
        })
