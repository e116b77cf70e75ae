"""
Domain Entities Package

This package contains the core domain entities: the raw object namespace,
the derived device view and the host/instance value objects.
"""

from .device import (
    UNKNOWN_DEVICE_TYPE,
    Device,
    DeviceControl,
    DevicePage,
    DeviceState,
)
from .errors import (
    DomainError,
    ExternalStoreError,
    ParameterValidationError,
    SnapshotConflictError,
    UnknownMethodError,
)
from .host import AdapterInstance, HostEntry, LogEntry, PlatformMetrics, SystemInfo
from .objects import (
    GROUPING_KINDS,
    LiveValue,
    LocalizedMap,
    LocalizedName,
    ObjectCommon,
    ObjectEntry,
    ObjectKind,
    PlainName,
    Snapshot,
)

__all__ = [
    "UNKNOWN_DEVICE_TYPE",
    "Device",
    "DeviceControl",
    "DevicePage",
    "DeviceState",
    "DomainError",
    "ExternalStoreError",
    "ParameterValidationError",
    "SnapshotConflictError",
    "UnknownMethodError",
    "AdapterInstance",
    "HostEntry",
    "LogEntry",
    "PlatformMetrics",
    "SystemInfo",
    "GROUPING_KINDS",
    "LiveValue",
    "LocalizedMap",
    "LocalizedName",
    "ObjectCommon",
    "ObjectEntry",
    "ObjectKind",
    "PlainName",
    "Snapshot",
]
