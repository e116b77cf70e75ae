"""Domain services: name resolution and enumeration membership."""

from .enum_resolver import (
    EnumResolver,
    FunctionResolver,
    RoomResolver,
    covers,
    is_group_in_members,
)
from .naming import resolve_name

__all__ = [
    "EnumResolver",
    "FunctionResolver",
    "RoomResolver",
    "covers",
    "is_group_in_members",
    "resolve_name",
]
