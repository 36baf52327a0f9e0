"""
Weight Compliance Enumerations

Closed variant types for vehicles, violations and derived status.
"""

from enum import Enum
from typing import Union


class VehicleType(Enum):
    """Commercial vehicle body types."""
    SEMI = "semi"
    STRAIGHT_TRUCK = "straight_truck"
    DUMP = "dump"
    TANKER = "tanker"
    FLATBED = "flatbed"
    OTHER = "other"

    @classmethod
    def parse(cls, label: Union[str, "VehicleType"]) -> "VehicleType":
        """
        Resolve a vehicle type from an enum value or a display label.

        Display labels such as "5-Axle Semi" or "3-Axle Straight Truck" are
        matched by keyword. Unrecognised labels map to OTHER.
        """
        if isinstance(label, cls):
            return label

        text = str(label).strip().lower().replace("-", " ").replace("_", " ")
        for member in cls:
            if text == member.value.replace("_", " "):
                return member

        for keyword, member in _VEHICLE_KEYWORDS:
            if keyword in text:
                return member
        return cls.OTHER


# Checked in order
_VEHICLE_KEYWORDS = (
    ("straight", VehicleType.STRAIGHT_TRUCK),
    ("semi", VehicleType.SEMI),
    ("tractor", VehicleType.SEMI),
    ("dump", VehicleType.DUMP),
    ("tank", VehicleType.TANKER),
    ("flatbed", VehicleType.FLATBED),
)


class ViolationType(Enum):
    """Kinds of weight-limit checks."""
    SINGLE_AXLE = "Single Axle"
    TANDEM_AXLE = "Tandem Axle"
    TRIDEM_AXLE = "Tridem Axle"
    GROSS_WEIGHT = "Gross Weight"
    BRIDGE_FORMULA = "Bridge Formula"

    @property
    def is_axle_group(self) -> bool:
        """True for checks tied to a specific axle or axle group."""
        return self in (
            ViolationType.SINGLE_AXLE,
            ViolationType.TANDEM_AXLE,
            ViolationType.TRIDEM_AXLE,
        )

    @property
    def group_size(self) -> int:
        """Number of axles covered by the check (0 for whole-vehicle checks)."""
        return _GROUP_SIZES[self]


_GROUP_SIZES = {
    ViolationType.SINGLE_AXLE: 1,
    ViolationType.TANDEM_AXLE: 2,
    ViolationType.TRIDEM_AXLE: 3,
    ViolationType.GROSS_WEIGHT: 0,
    ViolationType.BRIDGE_FORMULA: 0,
}


class ComplianceStatus(Enum):
    """Derived status stored with weigh-ticket records."""
    COMPLIANT = "Compliant"
    WARNING = "Warning"
    NON_COMPLIANT = "Non-Compliant"
