"""
weighstation Test Configuration and Fixtures

Shared vehicle configurations used by unit and integration tests.
"""

import pytest

from weighstation.compliance import AxleConfig, VehicleConfig, VehicleType


WEIGHSTATION_ENV_VARS = (
    "WEIGHSTATION_ENVIRONMENT",
    "WEIGHSTATION_DEBUG",
    "WEIGHSTATION_JURISDICTION",
    "WEIGHSTATION_WARNING_RATIO",
    "WEIGHSTATION_LOG_LEVEL",
    "WEIGHSTATION_LOG_FORMAT",
    "WEIGHSTATION_LOG_FILE",
    "WEIGHSTATION_JSON_LOGS",
)


def make_vehicle(weights, spacing, gross_weight=None, total_length=None, vehicle_type=VehicleType.SEMI):
    """
    Build a VehicleConfig from axle weights and spacings.

    Gross weight defaults to the axle sum and total length to the wheelbase.
    """
    return VehicleConfig(
        type=vehicle_type,
        axles=AxleConfig(
            axle_count=len(weights),
            axle_spacing=spacing,
            axle_weights=weights,
        ),
        gross_weight=sum(weights) if gross_weight is None else gross_weight,
        total_length=sum(spacing) if total_length is None else total_length,
    )


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep WEIGHSTATION_* variables from the host out of tests."""
    for name in WEIGHSTATION_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def standard_semi():
    """5-axle tractor-semitrailer at 80,000 lbs with typical spacings."""
    return make_vehicle(
        weights=[12000, 17000, 17000, 17000, 17000],
        spacing=[18, 4.25, 33, 4.25],
    )


@pytest.fixture
def tight_five_axle():
    """5-axle layout with every axle 4 ft apart."""
    return make_vehicle(
        weights=[12000, 17000, 17000, 17000, 17000],
        spacing=[4, 4, 4, 4],
        gross_weight=80000,
    )


@pytest.fixture
def overloaded_steer():
    """2-axle straight truck with 25,000 lbs on the front axle."""
    return make_vehicle(
        weights=[25000, 5000],
        spacing=[20],
        vehicle_type=VehicleType.STRAIGHT_TRUCK,
    )


@pytest.fixture
def build_vehicle():
    """Factory fixture wrapping make_vehicle."""
    return make_vehicle
