"""
Unit tests for compliance enumerations.
"""

import pytest

from weighstation.compliance import ComplianceStatus, VehicleType, ViolationType


class TestVehicleType:
    """Test VehicleType parsing."""

    def test_values(self):
        assert VehicleType.SEMI.value == "semi"
        assert VehicleType.STRAIGHT_TRUCK.value == "straight_truck"
        assert VehicleType.OTHER.value == "other"

    @pytest.mark.parametrize("label,expected", [
        ("semi", VehicleType.SEMI),
        ("STRAIGHT_TRUCK", VehicleType.STRAIGHT_TRUCK),
        ("straight-truck", VehicleType.STRAIGHT_TRUCK),
        ("5-Axle Semi", VehicleType.SEMI),
        ("3-Axle Straight Truck", VehicleType.STRAIGHT_TRUCK),
        ("Tractor Trailer", VehicleType.SEMI),
        ("Tanker", VehicleType.TANKER),
        ("Dump Truck", VehicleType.DUMP),
        ("flatbed", VehicleType.FLATBED),
        ("Box Van", VehicleType.OTHER),
        ("", VehicleType.OTHER),
    ])
    def test_parse_labels(self, label, expected):
        assert VehicleType.parse(label) is expected

    def test_parse_member_passthrough(self):
        assert VehicleType.parse(VehicleType.DUMP) is VehicleType.DUMP


class TestViolationType:
    """Test ViolationType properties."""

    def test_display_values(self):
        assert ViolationType.SINGLE_AXLE.value == "Single Axle"
        assert ViolationType.BRIDGE_FORMULA.value == "Bridge Formula"

    @pytest.mark.parametrize("violation_type,size", [
        (ViolationType.SINGLE_AXLE, 1),
        (ViolationType.TANDEM_AXLE, 2),
        (ViolationType.TRIDEM_AXLE, 3),
        (ViolationType.GROSS_WEIGHT, 0),
        (ViolationType.BRIDGE_FORMULA, 0),
    ])
    def test_group_size(self, violation_type, size):
        assert violation_type.group_size == size
        assert violation_type.is_axle_group is (size > 0)


class TestComplianceStatus:
    def test_values(self):
        assert ComplianceStatus.COMPLIANT.value == "Compliant"
        assert ComplianceStatus.WARNING.value == "Warning"
        assert ComplianceStatus.NON_COMPLIANT.value == "Non-Compliant"
