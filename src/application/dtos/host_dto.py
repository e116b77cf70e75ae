"""DTOs for adapter instances, hosts, logs and system information."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Set

from pydantic import BaseModel, Field, field_validator

from src.domain.entities.host import AdapterInstance, HostEntry, LogEntry, SystemInfo


class AdapterInstanceDTO(BaseModel):
    """Serializable representation of an adapter instance."""

    id: str = Field(description="Instance object identifier")
    name: str = Field(description="Instance name, e.g. zigbee.0")
    title: Optional[str] = Field(default=None, description="Adapter title")
    version: Optional[str] = Field(default=None, description="Installed version")
    enabled: bool = Field(default=False, description="Instance enabled flag")
    host: Optional[str] = Field(default=None, description="Host running it")
    mode: Optional[str] = Field(default=None, description="Run mode")
    alive: bool = Field(default=False, description="Process alive")
    connected: bool = Field(default=False, description="Connected to its device")
    uptime: float = Field(default=0, description="Uptime in seconds")

    @classmethod
    def from_domain(cls, instance: AdapterInstance) -> "AdapterInstanceDTO":
        return cls(
            id=instance.id,
            name=instance.name,
            title=instance.title,
            version=instance.version,
            enabled=instance.enabled,
            host=instance.host,
            mode=instance.mode,
            alive=instance.alive,
            connected=instance.connected,
            uptime=instance.uptime,
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": "system.adapter.zigbee.0",
                "name": "zigbee.0",
                "title": "Zigbee",
                "version": "1.10.3",
                "enabled": True,
                "host": "iobroker-pi",
                "mode": "daemon",
                "alive": True,
                "connected": True,
                "uptime": 86400,
            }
        }
    }


class AdaptersResponseDTO(BaseModel):
    adapters: List[AdapterInstanceDTO] = Field(default_factory=list)


class HostDTO(BaseModel):
    id: str
    name: str
    version: Optional[str] = None
    platform: Optional[str] = None
    alive: bool = False

    @classmethod
    def from_domain(cls, host: HostEntry) -> "HostDTO":
        return cls(
            id=host.id,
            name=host.name,
            version=host.version,
            platform=host.platform,
            alive=host.alive,
        )


class HostsResponseDTO(BaseModel):
    hosts: List[HostDTO] = Field(default_factory=list)


class MemoryDTO(BaseModel):
    total_mb: int = Field(description="Total memory in MB")
    used_mb: int = Field(description="Used memory in MB")


class SystemInfoDTO(BaseModel):
    """DTO representing the ``system_info`` payload."""

    js_controller: str = Field(description="Installed controller version")
    hostname: str = Field(description="Hostname of the gateway machine")
    platform: str = Field(description="Operating system platform")
    python: str = Field(description="Python interpreter version")
    cpu_load: float = Field(description="1 minute load average")
    mem: MemoryDTO
    uptime_sec: int = Field(description="Gateway process uptime in seconds")
    instances: int = Field(description="Number of registered adapter instances")

    @classmethod
    def from_domain(cls, info: SystemInfo) -> "SystemInfoDTO":
        return cls(
            js_controller=info.controller_version,
            hostname=info.metrics.hostname,
            platform=info.metrics.platform,
            python=info.metrics.python,
            cpu_load=info.metrics.cpu_load,
            mem=MemoryDTO(
                total_mb=info.metrics.mem_total_mb,
                used_mb=info.metrics.mem_used_mb,
            ),
            uptime_sec=info.metrics.uptime_sec,
            instances=info.instances,
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "js_controller": "6.0.11",
                "hostname": "iobroker-pi",
                "platform": "linux",
                "python": "3.12.3",
                "cpu_load": 0.42,
                "mem": {"total_mb": 3794, "used_mb": 1210},
                "uptime_sec": 5400,
                "instances": 17,
            }
        }
    }


class GetLogsParamsDTO(BaseModel):
    """Parameters of the ``get_logs`` method."""

    level: Optional[List[str]] = Field(
        default=None, description="Severities to keep (debug, info, warn, error)"
    )
    from_ts: Optional[int] = Field(
        default=None, ge=0, description="Only records at or after this ms timestamp"
    )
    limit: int = Field(default=200, ge=1, description="Records requested from host")
    adapter: Optional[str] = Field(
        default=None, description="Only records from this adapter or instance"
    )

    @field_validator("level", mode="before")
    @classmethod
    def _single_level_as_list(cls, value):
        if isinstance(value, str):
            return [value]
        return value

    def level_set(self) -> Optional[Set[str]]:
        if not self.level:
            return None
        return {item.lower() for item in self.level}


class LogEntryDTO(BaseModel):
    ts: Optional[int] = None
    level: str
    source: str
    message: str
    host: Optional[str] = None

    @classmethod
    def from_domain(cls, entry: LogEntry) -> "LogEntryDTO":
        return cls(
            ts=entry.ts,
            level=entry.level,
            source=entry.source,
            message=entry.message,
            host=entry.host,
        )


class LogsResponseDTO(BaseModel):
    count: int
    logs: List[LogEntryDTO] = Field(default_factory=list)


class GatewayInfoDTO(BaseModel):
    """DTO representing metadata returned by ``/api/info``."""

    name: str = Field(description="Gateway name")
    description: str = Field(description="Gateway description")
    version: str = Field(description="Gateway version")
    environment: str = Field(description="Current deployment environment")
    started_at: datetime = Field(description="Process start timestamp")
    uptime_seconds: float = Field(description="Uptime in seconds")
    controller_host: str = Field(description="Controller host queried for logs")
    store_url: str = Field(description="Object store URL, credentials removed")
    capabilities: List[str] = Field(
        default_factory=list, description="Methods accepted by the dispatcher"
    )
