"""DTOs for reading and writing individual states."""

from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator


class GetStatesParamsDTO(BaseModel):
    """Parameters of the ``get_states`` method."""

    ids: List[str] = Field(
        ..., min_length=1, description="State identifiers, in response order"
    )

    @field_validator("ids")
    @classmethod
    def _ids_not_blank(cls, value: List[str]) -> List[str]:
        if any(not item.strip() for item in value):
            raise ValueError("State ids must be non-empty strings")
        return value


class StateValueDTO(BaseModel):
    """Live value of one requested state."""

    id: str = Field(description="State identifier")
    val: Any = Field(default=None, description="Current value, null when absent")
    ack: bool = Field(default=False, description="Acknowledged flag")
    ts: Optional[int] = Field(default=None, description="Last update (ms)")
    lc: Optional[int] = Field(default=None, description="Last change (ms)")
    from_: Optional[str] = Field(
        default=None, alias="from", description="Writer of the value"
    )
    q: Optional[int] = Field(default=None, description="Quality code")
    error: Optional[str] = Field(
        default=None, description="Reason the value could not be read"
    )

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "id": "zigbee.0.dev1.temperature",
                "val": 22.6,
                "ack": True,
                "ts": 1718000000000,
                "lc": 1717990000000,
                "from": "system.adapter.zigbee.0",
                "q": 0,
                "error": None,
            }
        },
    }


class StatesResponseDTO(BaseModel):
    """One record per requested id, in request order."""

    states: List[StateValueDTO] = Field(default_factory=list)


class SetStateParamsDTO(BaseModel):
    """Parameters of the ``set_state`` method."""

    id: str = Field(..., min_length=1, description="State identifier")
    value: Any = Field(..., description="Value to write")
    ack: bool = Field(default=False, description="Write as acknowledged")


class SetStateResultDTO(BaseModel):
    """Echo of a successful write."""

    id: str
    value: Any = None
    ack: bool = False
