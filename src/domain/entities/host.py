"""
Host and adapter instance entities.

Value objects for the operational side of the object store: adapter
instances with their liveness, hosts, log records and the aggregated
system information of the machine running the gateway.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class AdapterInstance:
    """An adapter instance and its auxiliary liveness states."""

    id: str
    name: str
    title: Optional[str] = None
    version: Optional[str] = None
    enabled: bool = False
    host: Optional[str] = None
    mode: Optional[str] = None
    alive: bool = False
    connected: bool = False
    uptime: float = 0


@dataclass(slots=True)
class HostEntry:
    """A controller host registered in the object store."""

    id: str
    name: str
    version: Optional[str] = None
    platform: Optional[str] = None
    alive: bool = False


@dataclass(slots=True)
class LogEntry:
    """A normalized host log record."""

    ts: Optional[int]
    level: str
    source: str
    message: str
    host: Optional[str] = None


@dataclass(slots=True)
class PlatformMetrics:
    """Metrics of the machine and process the gateway runs on."""

    hostname: str
    platform: str
    python: str
    cpu_load: float
    mem_total_mb: int
    mem_used_mb: int
    uptime_sec: int


@dataclass(slots=True)
class SystemInfo:
    """Aggregated view returned by the system info operation."""

    controller_version: str
    metrics: PlatformMetrics
    instances: int
