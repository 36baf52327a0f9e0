"""
Weigh-Ticket Payload Models

Pydantic request models that turn loosely typed weigh-ticket data into a
VehicleConfig. Accepts snake_case or camelCase keys and weight readings
given as numbers or strings such as "32,500 lbs". Negative or unparseable
readings are rejected.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError as PydanticValidationError,
    field_validator,
)

from ..errors import ErrorCode, InvalidConfigurationError, ValidationIssue
from .enums import VehicleType
from .schema import AxleConfig, VehicleConfig
from .utils import parse_weight_reading


def _parse_weight_field(value: Any) -> Any:
    # Numbers pass through to pydantic; strings are ticket readings
    if isinstance(value, str):
        return parse_weight_reading(value)
    return value


class AxleConfigPayload(BaseModel):
    """Axle layout as received from a client."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    axle_count: Optional[int] = Field(
        None, alias="axleCount", description="Number of axles; defaults to len(axle_weights)"
    )
    axle_spacing: List[float] = Field(
        default_factory=list, alias="axleSpacing", description="Feet between consecutive axles"
    )
    axle_weights: List[float] = Field(
        ..., alias="axleWeights", description="Pounds on each axle, front to rear"
    )

    @field_validator("axle_weights", mode="before")
    @classmethod
    def parse_axle_weights(cls, v):
        if isinstance(v, (list, tuple)):
            return [_parse_weight_field(item) for item in v]
        return v

    def to_axle_config(self) -> AxleConfig:
        count = self.axle_count if self.axle_count is not None else len(self.axle_weights)
        return AxleConfig(
            axle_count=count,
            axle_spacing=self.axle_spacing,
            axle_weights=self.axle_weights,
        )


class VehicleConfigPayload(BaseModel):
    """Vehicle configuration as received from a client."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    type: str = Field("other", description="Vehicle type or display label")
    axles: AxleConfigPayload
    total_length: Optional[float] = Field(
        None, alias="totalLength", description="Overall length in feet; defaults to wheelbase"
    )
    gross_weight: Optional[float] = Field(
        None, alias="grossWeight", description="Gross weight in pounds; defaults to axle sum"
    )
    jurisdiction: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("jurisdiction", "stateCode", "state_code"),
        description="Jurisdiction code; omitted means federal",
    )

    @field_validator("gross_weight", mode="before")
    @classmethod
    def parse_gross_weight(cls, v):
        return _parse_weight_field(v)

    def to_vehicle_config(self) -> VehicleConfig:
        axles = self.axles.to_axle_config()
        gross_weight = self.gross_weight
        if gross_weight is None:
            gross_weight = sum(self.axles.axle_weights)
        total_length = self.total_length
        if total_length is None:
            total_length = sum(self.axles.axle_spacing)
        return VehicleConfig(
            type=VehicleType.parse(self.type),
            axles=axles,
            total_length=total_length,
            gross_weight=gross_weight,
        )


def parse_vehicle_payload(data: Dict[str, Any]) -> VehicleConfig:
    """
    Parse and validate a vehicle payload.

    Args:
        data: Mapping decoded from JSON

    Returns:
        Validated VehicleConfig

    Raises:
        InvalidConfigurationError: on schema errors or structural problems
    """
    payload = _validate_payload(data)
    return payload.to_vehicle_config().validate()


def _validate_payload(data: Dict[str, Any]) -> VehicleConfigPayload:
    try:
        return VehicleConfigPayload.model_validate(data)
    except PydanticValidationError as e:
        issues = [
            ValidationIssue(
                field=".".join(str(part) for part in err["loc"]) or "payload",
                message=err["msg"],
                value=err.get("input"),
            )
            for err in e.errors()
        ]
        raise InvalidConfigurationError(
            issues,
            subject="vehicle payload",
            code=ErrorCode.VAL_PAYLOAD,
        ) from e


def parse_ticket(data: Dict[str, Any]) -> Tuple[VehicleConfig, Optional[str]]:
    """Parse a payload into a validated vehicle and its jurisdiction code."""
    payload = _validate_payload(data)
    return payload.to_vehicle_config().validate(), payload.jurisdiction
