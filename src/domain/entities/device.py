"""Derived device view entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

UNKNOWN_DEVICE_TYPE = "unknown"


@dataclass(slots=True)
class DeviceControl:
    """One typed control returned by a classifier for a grouping entry."""

    type: str
    state_ids: List[str] = field(default_factory=list)


@dataclass(slots=True)
class DeviceState:
    """A state point attached to a device, with its live value merged in."""

    id: str
    role: str
    type: str
    unit: Optional[str] = None
    value: Any = None
    ack: Optional[bool] = None
    ts: Optional[int] = None
    lc: Optional[int] = None
    error: Optional[str] = None


@dataclass(slots=True)
class Device:
    """A logical device inferred from a channel or device entry."""

    id: str
    name: str
    type: str
    room: Optional[str] = None
    vendor: Optional[str] = None
    model: Optional[str] = None
    roles: List[str] = field(default_factory=list)
    states: List[DeviceState] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)


@dataclass(slots=True)
class DevicePage:
    """A paginated slice of the room-filtered device list."""

    total: int
    devices: List[Device] = field(default_factory=list)
