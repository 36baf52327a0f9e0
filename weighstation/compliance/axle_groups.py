"""
Axle Group Analyzer

Builds the ordered list of axle-level weight checks for a vehicle:
single axles, tandem pairs and tridem triples.

Groups are formed per starting axle, independently. Overlapping groups
are all checked, so one heavy axle can appear in several group checks.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List
import logging

from .enums import ViolationType
from .limits import WeightLimits
from .schema import AxleConfig

logger = logging.getLogger(__name__)

# Axles spaced within this span (feet) are weighed as one group
GROUP_SPACING_THRESHOLD_FT = 8.0


@dataclass(frozen=True)
class AxleGroupCheck:
    """One axle or axle group compared against its grouped limit."""

    type: ViolationType
    axle_index: int      # first axle of the group
    actual: float
    limit: float

    @property
    def axle_indices(self) -> List[int]:
        return list(range(self.axle_index, self.axle_index + self.type.group_size))

    @property
    def exceeded(self) -> bool:
        return self.actual > self.limit

    @property
    def over_weight(self) -> float:
        return max(0.0, self.actual - self.limit)

    @property
    def utilization(self) -> float:
        """Actual weight as a fraction of the limit."""
        return self.actual / self.limit


def find_tandem_groups(axles: AxleConfig) -> List[int]:
    """Starting indices of axle pairs spaced within the group threshold."""
    spacing = axles.axle_spacing
    return [
        i for i in range(axles.axle_count - 1)
        if spacing[i] <= GROUP_SPACING_THRESHOLD_FT
    ]


def find_tridem_groups(axles: AxleConfig) -> List[int]:
    """Starting indices of axle triples whose two gaps fit within the threshold."""
    spacing = axles.axle_spacing
    return [
        i for i in range(axles.axle_count - 2)
        if spacing[i] + spacing[i + 1] <= GROUP_SPACING_THRESHOLD_FT
    ]


def analyze_axle_groups(axles: AxleConfig, limits: WeightLimits) -> List[AxleGroupCheck]:
    """
    Produce every axle-level check for a validated axle configuration.

    Args:
        axles: Axle layout (lengths already validated)
        limits: Jurisdiction limits

    Returns:
        Checks ordered single (by axle), then tandem, then tridem
    """
    weights = axles.axle_weights
    checks: List[AxleGroupCheck] = []

    for i, weight in enumerate(weights):
        checks.append(AxleGroupCheck(
            type=ViolationType.SINGLE_AXLE,
            axle_index=i,
            actual=weight,
            limit=limits.single_axle,
        ))

    for i in find_tandem_groups(axles):
        checks.append(AxleGroupCheck(
            type=ViolationType.TANDEM_AXLE,
            axle_index=i,
            actual=weights[i] + weights[i + 1],
            limit=limits.tandem_axle,
        ))

    for i in find_tridem_groups(axles):
        checks.append(AxleGroupCheck(
            type=ViolationType.TRIDEM_AXLE,
            axle_index=i,
            actual=weights[i] + weights[i + 1] + weights[i + 2],
            limit=limits.tridem_axle,
        ))

    logger.debug(
        f"Axle groups for {axles.axle_count} axles: "
        f"{sum(1 for c in checks if c.type == ViolationType.TANDEM_AXLE)} tandem, "
        f"{sum(1 for c in checks if c.type == ViolationType.TRIDEM_AXLE)} tridem"
    )
    return checks
