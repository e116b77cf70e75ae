"""
Device DTOs - Application Layer

This module defines Data Transfer Objects (DTOs) for the derived device
view. They carry the parameters of ``list_devices`` in and the paginated
device list out of the application layer.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

from src.domain.entities.device import Device, DevicePage, DeviceState


class ListDevicesParamsDTO(BaseModel):
    """Parameters of the ``list_devices`` method."""

    room: Optional[str] = Field(
        default=None, description="Only return devices in this room"
    )
    limit: int = Field(default=100, ge=0, description="Page size")
    offset: int = Field(default=0, ge=0, description="Page start")

    @field_validator("room")
    @classmethod
    def _blank_room_is_no_filter(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        return value or None


class DeviceStateDTO(BaseModel):
    """DTO for a state attached to a device."""

    id: str = Field(description="State identifier")
    role: str = Field(description="State role, empty when not declared")
    type: str = Field(description="Declared value type")
    unit: Optional[str] = Field(default=None, description="Unit of the value")
    value: Any = Field(default=None, description="Current value")
    ack: Optional[bool] = Field(default=None, description="Acknowledged flag")
    ts: Optional[int] = Field(default=None, description="Last update (ms)")
    lc: Optional[int] = Field(
        default=None, description="Last change (ms), only when it differs from ts"
    )
    error: Optional[str] = Field(
        default=None, description="Reason the live value could not be read"
    )

    @classmethod
    def from_domain(cls, state: DeviceState) -> "DeviceStateDTO":
        return cls(
            id=state.id,
            role=state.role,
            type=state.type,
            unit=state.unit,
            value=state.value,
            ack=state.ack,
            ts=state.ts,
            lc=state.lc,
            error=state.error,
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": "zigbee.0.00158d0001a2b3c4.temperature",
                "role": "value.temperature",
                "type": "number",
                "unit": "°C",
                "value": 22.6,
                "ack": True,
                "ts": 1718000000000,
            }
        }
    }


class DeviceDTO(BaseModel):
    """DTO for a logical device."""

    id: str = Field(description="Synthetic device identifier")
    name: str = Field(description="Display name")
    room: Optional[str] = Field(default=None, description="Room display name")
    type: str = Field(description="Classified device type")
    vendor: Optional[str] = Field(default=None, description="Vendor")
    model: Optional[str] = Field(default=None, description="Model")
    roles: List[str] = Field(default_factory=list, description="Roles of states")
    states: List[DeviceStateDTO] = Field(
        default_factory=list, description="Attached states"
    )
    tags: List[str] = Field(default_factory=list, description="Source adapter tags")

    @classmethod
    def from_domain(cls, device: Device) -> "DeviceDTO":
        return cls(
            id=device.id,
            name=device.name,
            room=device.room,
            type=device.type,
            vendor=device.vendor,
            model=device.model,
            roles=list(device.roles),
            states=[DeviceStateDTO.from_domain(state) for state in device.states],
            tags=list(device.tags),
        )


class DeviceListDTO(BaseModel):
    """DTO for the paginated device list."""

    total: int = Field(description="Number of devices after the room filter")
    devices: List[DeviceDTO] = Field(
        default_factory=list, description="Devices of the requested page"
    )

    @classmethod
    def from_domain(cls, page: DevicePage) -> "DeviceListDTO":
        return cls(
            total=page.total,
            devices=[DeviceDTO.from_domain(device) for device in page.devices],
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "total": 1,
                "devices": [
                    {
                        "id": "device:zigbee.0.dev1",
                        "name": "Living room sensor",
                        "room": "Living room",
                        "type": "temperature",
                        "roles": ["value.temperature", "value.humidity"],
                        "states": [
                            {
                                "id": "zigbee.0.dev1.temperature",
                                "role": "value.temperature",
                                "type": "number",
                                "unit": "°C",
                                "value": 22.6,
                                "ack": True,
                                "ts": 1718000000000,
                            }
                        ],
                        "tags": ["zigbee"],
                    }
                ],
            }
        }
    }
