"""
Federal Bridge Formula

W = 500 * (L*N / (N - 1) + 12*N + 36)

W: maximum weight in pounds over any group of two or more consecutive axles
L: distance in feet between the outer axles of the group
N: number of axles in the group
"""

from __future__ import annotations

from .limits import FEDERAL, WeightLimits

BRIDGE_FORMULA_FACTOR = 500.0
BRIDGE_FORMULA_AXLE_TERM = 12.0
BRIDGE_FORMULA_CONSTANT = 36.0


def bridge_formula_max(
    length: float,
    axle_count: int,
    limits: WeightLimits = FEDERAL,
) -> float:
    """
    Maximum weight allowed over an axle group by the bridge formula.

    Args:
        length: Span between outer axles of the group (feet)
        axle_count: Number of axles in the group
        limits: Profile supplying the single-axle limit for groups of fewer
            than two axles

    Returns:
        Maximum weight in pounds
    """
    if axle_count < 2:
        return limits.single_axle

    n = axle_count
    return BRIDGE_FORMULA_FACTOR * (
        (length * n) / (n - 1) + BRIDGE_FORMULA_AXLE_TERM * n + BRIDGE_FORMULA_CONSTANT
    )
