"""
Weight Limit Registry

Jurisdiction weight-limit profiles (pounds):
- Federal profile (23 CFR 658.17)
- Per-state profiles keyed by two-letter code

Profiles are built once at import and never mutated. Unknown or omitted
jurisdiction codes resolve to the federal profile.
"""

from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, List, Mapping, Optional
import logging
import math

from ..errors import ErrorCode, InvalidConfigurationError, ValidationIssue

logger = logging.getLogger(__name__)


FEDERAL_CODE = "US"

# Aliases that name the federal profile explicitly
FEDERAL_ALIASES = frozenset({"US", "FED", "FEDERAL"})


@dataclass(frozen=True)
class WeightLimits:
    """Weight limits for one jurisdiction."""

    single_axle: float
    tandem_axle: float
    tridem_axle: float
    gross_vehicle: float
    bridge_formula_enabled: bool = True

    code: str = FEDERAL_CODE
    name: str = "Federal"

    def __post_init__(self):
        issues = []
        for field_name in ("single_axle", "tandem_axle", "tridem_axle", "gross_vehicle"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                issues.append(ValidationIssue(field_name, "must be a number", value))
            elif not math.isfinite(value) or value <= 0:
                issues.append(ValidationIssue(field_name, "must be a positive finite weight", value))
        if issues:
            raise InvalidConfigurationError(
                issues,
                subject=f"weight limits for {self.code}",
                code=ErrorCode.LIM_INVALID_PROFILE,
            )

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "code": self.code,
            "name": self.name,
            "single_axle": self.single_axle,
            "tandem_axle": self.tandem_axle,
            "tridem_axle": self.tridem_axle,
            "gross_vehicle": self.gross_vehicle,
            "bridge_formula_enabled": self.bridge_formula_enabled,
        }


# =============================================================================
# PROFILES
# =============================================================================

FEDERAL = WeightLimits(
    single_axle=20000,
    tandem_axle=34000,
    tridem_axle=42000,
    gross_vehicle=80000,
    bridge_formula_enabled=True,
    code=FEDERAL_CODE,
    name="Federal",
)

STATE_WEIGHT_LIMITS: Mapping[str, WeightLimits] = MappingProxyType({
    "CA": WeightLimits(
        single_axle=20000,
        tandem_axle=34000,
        tridem_axle=42000,
        gross_vehicle=80000,
        code="CA",
        name="California",
    ),
    "TX": WeightLimits(
        single_axle=20000,
        tandem_axle=34000,
        tridem_axle=42000,
        gross_vehicle=80000,
        code="TX",
        name="Texas",
    ),
    "NY": WeightLimits(
        single_axle=22400,
        tandem_axle=36000,
        tridem_axle=42000,
        gross_vehicle=80000,
        code="NY",
        name="New York",
    ),
    "FL": WeightLimits(
        single_axle=22000,
        tandem_axle=44000,
        tridem_axle=66000,
        gross_vehicle=80000,
        code="FL",
        name="Florida",
    ),
})

JURISDICTION_NAMES: Mapping[str, str] = MappingProxyType({
    FEDERAL_CODE: FEDERAL.name,
    **{code: limits.name for code, limits in STATE_WEIGHT_LIMITS.items()},
})


def normalize_code(jurisdiction_code: Optional[str]) -> Optional[str]:
    """Normalize a jurisdiction code (strip, upper-case); None for blank input."""
    if jurisdiction_code is None:
        return None
    code = str(jurisdiction_code).strip().upper()
    return code or None


# =============================================================================
# REGISTRY
# =============================================================================

class LimitRegistry:
    """
    Read-only lookup of jurisdiction weight limits.

    The federal profile is always present and is the fallback for any
    code the registry does not know.
    """

    def __init__(
        self,
        federal: WeightLimits = FEDERAL,
        jurisdictions: Optional[Mapping[str, WeightLimits]] = None,
    ):
        table = jurisdictions if jurisdictions is not None else STATE_WEIGHT_LIMITS
        self._federal = federal
        self._table: Mapping[str, WeightLimits] = MappingProxyType({
            normalize_code(code): limits for code, limits in table.items()
        })

    @property
    def federal(self) -> WeightLimits:
        return self._federal

    def lookup(self, jurisdiction_code: Optional[str] = None) -> WeightLimits:
        """
        Get limits for a jurisdiction.

        Args:
            jurisdiction_code: Two-letter code (case-insensitive). None, blank,
                a federal alias or an unknown code return the federal profile.

        Returns:
            WeightLimits for the jurisdiction
        """
        code = normalize_code(jurisdiction_code)
        if code is None or code in FEDERAL_ALIASES:
            return self._federal

        limits = self._table.get(code)
        if limits is None:
            logger.debug(f"Unknown jurisdiction {code!r}, using federal limits")
            return self._federal
        return limits

    def codes(self) -> List[str]:
        """Known jurisdiction codes (federal first, then states sorted)."""
        return [FEDERAL_CODE] + sorted(self._table)

    def name_for(self, jurisdiction_code: Optional[str]) -> str:
        """Display name for a code; unknown codes are returned unchanged."""
        code = normalize_code(jurisdiction_code)
        if code is None or code in FEDERAL_ALIASES:
            return self._federal.name
        limits = self._table.get(code)
        return limits.name if limits is not None else code

    def __contains__(self, jurisdiction_code: object) -> bool:
        if not isinstance(jurisdiction_code, str):
            return False
        code = normalize_code(jurisdiction_code)
        return code in FEDERAL_ALIASES or code in self._table

    def __iter__(self) -> Iterator[WeightLimits]:
        yield self._federal
        for code in sorted(self._table):
            yield self._table[code]

    def __len__(self) -> int:
        return len(self._table) + 1


LIMIT_REGISTRY = LimitRegistry()


def lookup(jurisdiction_code: Optional[str] = None) -> WeightLimits:
    """Get limits for a jurisdiction from the default registry."""
    return LIMIT_REGISTRY.lookup(jurisdiction_code)
