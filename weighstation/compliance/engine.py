"""
Weight Compliance Engine

Evaluates a vehicle configuration against a jurisdiction's weight limits.

Evaluation order (also the order of reported violations):
  1. Single axles, by index
  2. Tandem groups
  3. Tridem groups
  4. Gross vehicle weight
  5. Bridge formula over the full wheelbase
"""

from __future__ import annotations
from typing import List, Optional
import logging
import math

from ..errors import ErrorCode, InvalidConfigurationError, ValidationIssue
from .axle_groups import analyze_axle_groups
from .bridge import bridge_formula_max
from .enums import ViolationType
from .limits import LIMIT_REGISTRY, LimitRegistry, WeightLimits
from .schema import (
    Advisory,
    ComplianceDetails,
    ComplianceResult,
    VehicleConfig,
    Violation,
)

logger = logging.getLogger(__name__)

DEFAULT_WARNING_RATIO = 0.95


def validate_warning_ratio(ratio: float, field: str = "warning_ratio") -> float:
    """
    Check that a warning ratio lies in (0, 1].

    Raises:
        InvalidConfigurationError: with code SYS_CONFIG
    """
    if isinstance(ratio, bool) or not isinstance(ratio, (int, float)) or not 0 < ratio <= 1:
        raise InvalidConfigurationError(
            [ValidationIssue(field, "must be a number in (0, 1]", ratio)],
            subject="compliance configuration",
            code=ErrorCode.SYS_CONFIG,
        )
    return ratio


class ComplianceEngine:
    """
    Central weight compliance evaluation engine.

    Stateless between calls: the registry is read-only and every call
    builds a fresh ComplianceResult.
    """

    def __init__(
        self,
        registry: Optional[LimitRegistry] = None,
        warning_ratio: float = DEFAULT_WARNING_RATIO,
    ):
        """
        Initialize compliance engine.

        Args:
            registry: Limit registry (defaults to LIMIT_REGISTRY)
            warning_ratio: Fraction of a limit above which a passing check is
                reported as an advisory

        Raises:
            InvalidConfigurationError: if warning_ratio is outside (0, 1]
        """
        self.registry = registry or LIMIT_REGISTRY
        self.warning_ratio = validate_warning_ratio(warning_ratio)

    def evaluate(self, vehicle: VehicleConfig, limits: WeightLimits) -> ComplianceResult:
        """
        Evaluate a vehicle against the given limits.

        Args:
            vehicle: Vehicle configuration
            limits: Jurisdiction weight limits

        Returns:
            ComplianceResult with every violation found

        Raises:
            InvalidConfigurationError: if the vehicle is structurally invalid
        """
        vehicle.validate()

        axles = vehicle.axles
        gross_weight = vehicle.gross_weight
        logger.debug(
            f"Evaluating {vehicle.type.value} vehicle: {axles.axle_count} axles, "
            f"gross={gross_weight:.0f} against {limits.code} limits"
        )

        violations: List[Violation] = []
        advisories: List[Advisory] = []
        details = ComplianceDetails()

        # Axle and axle-group checks
        for check in analyze_axle_groups(axles, limits):
            if check.exceeded:
                violation = self._violation(check.type, check.actual, check.limit, check.axle_index)
                violations.append(violation)
                details.axle_violations.append(violation)
            else:
                self._advise(advisories, check.type, check.actual, check.limit, check.axle_index)

        # Gross vehicle weight
        if gross_weight > limits.gross_vehicle:
            violations.append(self._violation(
                ViolationType.GROSS_WEIGHT, gross_weight, limits.gross_vehicle,
            ))
            details.gross_violation = True
        else:
            self._advise(advisories, ViolationType.GROSS_WEIGHT, gross_weight, limits.gross_vehicle)

        # Bridge formula over the measured wheelbase
        if limits.bridge_formula_enabled and axles.axle_count >= 2:
            bridge_limit = bridge_formula_max(axles.wheelbase, axles.axle_count, limits)
            if gross_weight > bridge_limit:
                violations.append(self._violation(
                    ViolationType.BRIDGE_FORMULA, gross_weight, bridge_limit,
                ))
                details.bridge_formula_violation = True
            else:
                self._advise(advisories, ViolationType.BRIDGE_FORMULA, gross_weight, bridge_limit)

        # Overall maximum uses the vehicle's stated length, not the wheelbase
        max_allowed_weight = min(
            limits.gross_vehicle,
            bridge_formula_max(vehicle.total_length, axles.axle_count, limits)
            if limits.bridge_formula_enabled else math.inf,
        )
        over_weight = max(0, gross_weight - max_allowed_weight)

        result = ComplianceResult(
            is_compliant=len(violations) == 0,
            violations=violations,
            max_allowed_weight=max_allowed_weight,
            over_weight=over_weight,
            details=details,
            advisories=advisories,
            jurisdiction=limits.code,
        )

        logger.info(
            f"Compliance evaluation complete ({limits.code}): {len(violations)} violation(s), "
            f"{len(advisories)} advisory(ies), max_allowed={max_allowed_weight:.0f}, "
            f"status={result.status.value}"
        )
        return result

    def evaluate_jurisdiction(
        self,
        vehicle: VehicleConfig,
        jurisdiction_code: Optional[str] = None,
    ) -> ComplianceResult:
        """Evaluate against a jurisdiction, falling back to federal limits."""
        return self.evaluate(vehicle, self.registry.lookup(jurisdiction_code))

    def evaluate_federal(self, vehicle: VehicleConfig) -> ComplianceResult:
        """Convenience method to evaluate against federal limits."""
        return self.evaluate(vehicle, self.registry.federal)

    def _violation(
        self,
        violation_type: ViolationType,
        actual: float,
        limit: float,
        axle_index: Optional[int] = None,
    ) -> Violation:
        return Violation(
            type=violation_type,
            actual=actual,
            limit=limit,
            over_weight=actual - limit,
            axle_index=axle_index,
        )

    def _advise(
        self,
        advisories: List[Advisory],
        violation_type: ViolationType,
        actual: float,
        limit: float,
        axle_index: Optional[int] = None,
    ) -> None:
        if actual > limit * self.warning_ratio:
            advisories.append(Advisory(
                type=violation_type,
                actual=actual,
                limit=limit,
                margin=limit - actual,
                axle_index=axle_index,
            ))


# Default engine used by the module-level entry points
_ENGINE = ComplianceEngine()


def check_compliance(vehicle: VehicleConfig, limits: WeightLimits) -> ComplianceResult:
    """Check a vehicle against explicit weight limits."""
    return _ENGINE.evaluate(vehicle, limits)


def check_federal_compliance(vehicle: VehicleConfig) -> ComplianceResult:
    """Check a vehicle against federal weight limits."""
    return _ENGINE.evaluate_federal(vehicle)


def check_state_compliance(vehicle: VehicleConfig, jurisdiction_code: str) -> ComplianceResult:
    """
    Check a vehicle against a state's weight limits.

    Unknown state codes use the federal limits.
    """
    return _ENGINE.evaluate_jurisdiction(vehicle, jurisdiction_code)
