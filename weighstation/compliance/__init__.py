"""
Weight Compliance Module

Evaluates truck axle configurations against federal and state weight
limits: single, tandem and tridem axle limits, gross vehicle weight and
the federal bridge formula.
"""

from .enums import (
    VehicleType,
    ViolationType,
    ComplianceStatus,
)

from .limits import (
    WeightLimits,
    LimitRegistry,
    FEDERAL,
    FEDERAL_CODE,
    STATE_WEIGHT_LIMITS,
    JURISDICTION_NAMES,
    LIMIT_REGISTRY,
    lookup,
)

from .schema import (
    AxleConfig,
    VehicleConfig,
    Violation,
    Advisory,
    ComplianceDetails,
    ComplianceResult,
    DEFAULT_AXLE_SPACING_FT,
)

from .axle_groups import (
    AxleGroupCheck,
    GROUP_SPACING_THRESHOLD_FT,
    analyze_axle_groups,
    find_tandem_groups,
    find_tridem_groups,
)

from .bridge import bridge_formula_max

from .engine import (
    ComplianceEngine,
    DEFAULT_WARNING_RATIO,
    validate_warning_ratio,
    check_compliance,
    check_federal_compliance,
    check_state_compliance,
)

from .payloads import (
    AxleConfigPayload,
    VehicleConfigPayload,
    parse_vehicle_payload,
    parse_ticket,
)

from .utils import determinize_dict, parse_weight, parse_weight_reading

__all__ = [
    # Enumerations
    "VehicleType",
    "ViolationType",
    "ComplianceStatus",

    # Limit Registry
    "WeightLimits",
    "LimitRegistry",
    "FEDERAL",
    "FEDERAL_CODE",
    "STATE_WEIGHT_LIMITS",
    "JURISDICTION_NAMES",
    "LIMIT_REGISTRY",
    "lookup",

    # Data Model
    "AxleConfig",
    "VehicleConfig",
    "Violation",
    "Advisory",
    "ComplianceDetails",
    "ComplianceResult",
    "DEFAULT_AXLE_SPACING_FT",

    # Axle Groups
    "AxleGroupCheck",
    "GROUP_SPACING_THRESHOLD_FT",
    "analyze_axle_groups",
    "find_tandem_groups",
    "find_tridem_groups",

    # Bridge Formula
    "bridge_formula_max",

    # Engine
    "ComplianceEngine",
    "DEFAULT_WARNING_RATIO",
    "validate_warning_ratio",
    "check_compliance",
    "check_federal_compliance",
    "check_state_compliance",

    # Payloads
    "AxleConfigPayload",
    "VehicleConfigPayload",
    "parse_vehicle_payload",
    "parse_ticket",

    # Utilities
    "determinize_dict",
    "parse_weight",
    "parse_weight_reading",
]
