"""DTOs for object search and enumeration listings."""

from typing import List, Optional

from pydantic import BaseModel, Field


class SearchObjectsParamsDTO(BaseModel):
    """Parameters of the ``search_objects`` method."""

    query: Optional[str] = Field(
        default=None, description="Case-insensitive identifier substring"
    )
    role: Optional[str] = Field(default=None, description="Exact state role")
    room: Optional[str] = Field(default=None, description="Room name")
    limit: int = Field(default=100, ge=1, description="Maximum number of results")


class ObjectSummaryDTO(BaseModel):
    """A state entry matching a search."""

    id: str
    name: str
    role: Optional[str] = None
    type: Optional[str] = None
    unit: Optional[str] = None


class SearchObjectsResponseDTO(BaseModel):
    count: int = Field(description="Number of returned objects")
    objects: List[ObjectSummaryDTO] = Field(default_factory=list)


class EnumerationDTO(BaseModel):
    """A room or function enumeration."""

    id: str
    name: str
    members: List[str] = Field(default_factory=list)

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": "enum.rooms.living_room",
                "name": "Living room",
                "members": ["zigbee.0.dev1"],
            }
        }
    }


class EnumerationsResponseDTO(BaseModel):
    items: List[EnumerationDTO] = Field(default_factory=list)
