"""Use cases for adapter instances, hosts, logs and system information."""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from typing import Any, List, Optional
from urllib.parse import urlsplit, urlunsplit

from src.application.dtos.host_dto import (
    AdapterInstanceDTO,
    AdaptersResponseDTO,
    GatewayInfoDTO,
    GetLogsParamsDTO,
    HostDTO,
    HostsResponseDTO,
    LogEntryDTO,
    LogsResponseDTO,
    SystemInfoDTO,
)
from src.application.models import GatewayInfo
from src.domain.entities.host import AdapterInstance, HostEntry, LogEntry, SystemInfo
from src.domain.entities.objects import ObjectEntry, ObjectKind
from src.domain.gateways.object_store_gateway import IObjectStoreGateway
from src.domain.ports.host_metrics import IHostMetricsProvider
from src.domain.services.naming import resolve_name
from src.shared import ADAPTER_INSTANCE_PREFIX, HOST_PREFIX, get_logger

logger = get_logger(__name__)

UNKNOWN_VERSION = "unknown"


async def _read_value(
    gateway: IObjectStoreGateway, state_id: str, default: Any
) -> Any:
    """Value of an auxiliary state, ``default`` when absent or unreadable."""
    try:
        live = await gateway.get_state(state_id)
    except Exception as exc:
        logger.debug("instances.aux_state_failed", state_id=state_id, error=str(exc))
        return default
    if live is None or live.val is None:
        return default
    return live.val


def _as_bool(value: Any) -> bool:
    return bool(value)


def _as_number(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0


class ListAdaptersUseCase:
    """Lists adapter instances with their liveness states."""

    def __init__(self, object_store_gateway: IObjectStoreGateway) -> None:
        self._gateway = object_store_gateway

    async def execute(self) -> AdaptersResponseDTO:
        objects = await self._gateway.get_objects(
            f"{ADAPTER_INSTANCE_PREFIX}*", ObjectKind.INSTANCE
        )
        entries = [
            entry for entry in objects.values() if entry.kind == ObjectKind.INSTANCE
        ]
        instances = await asyncio.gather(*(self._instance(entry) for entry in entries))

        logger.info("instances.listed", count=len(instances))
        return AdaptersResponseDTO(
            adapters=[AdapterInstanceDTO.from_domain(item) for item in instances]
        )

    async def _instance(self, entry: ObjectEntry) -> AdapterInstance:
        alive, connected, uptime = await asyncio.gather(
            _read_value(self._gateway, f"{entry.id}.alive", False),
            _read_value(self._gateway, f"{entry.id}.connected", False),
            _read_value(self._gateway, f"{entry.id}.uptime", 0),
        )
        common = entry.common
        return AdapterInstance(
            id=entry.id,
            name=entry.id[len(ADAPTER_INSTANCE_PREFIX) :]
            if entry.id.startswith(ADAPTER_INSTANCE_PREFIX)
            else entry.id,
            title=common.get_str("title"),
            version=common.get_str("version"),
            enabled=bool(common.raw.get("enabled", False)),
            host=common.get_str("host"),
            mode=common.get_str("mode"),
            alive=_as_bool(alive),
            connected=_as_bool(connected),
            uptime=_as_number(uptime),
        )


class ListHostsUseCase:
    """Lists controller hosts registered in the store."""

    def __init__(self, object_store_gateway: IObjectStoreGateway) -> None:
        self._gateway = object_store_gateway

    async def execute(self) -> HostsResponseDTO:
        objects = await self._gateway.get_objects(f"{HOST_PREFIX}*", ObjectKind.HOST)
        entries = [entry for entry in objects.values() if entry.kind == ObjectKind.HOST]
        alive_flags = await asyncio.gather(
            *(
                _read_value(self._gateway, f"{entry.id}.alive", False)
                for entry in entries
            )
        )
        hosts = [
            HostEntry(
                id=entry.id,
                name=entry.common.get_str("hostname")
                or resolve_name(entry.common.name, entry.id),
                version=entry.common.get_str("installedVersion"),
                platform=entry.common.get_str("platform"),
                alive=_as_bool(alive),
            )
            for entry, alive in zip(entries, alive_flags)
        ]
        return HostsResponseDTO(hosts=[HostDTO.from_domain(host) for host in hosts])


class SystemInfoUseCase:
    """Aggregates controller, platform and instance information.

    Unlike the listing use cases there is no partial result: any failing
    sub-fetch fails the whole call.
    """

    def __init__(
        self,
        object_store_gateway: IObjectStoreGateway,
        host_metrics: IHostMetricsProvider,
        gateway_info: GatewayInfo,
    ) -> None:
        self._gateway = object_store_gateway
        self._host_metrics = host_metrics
        self._info = gateway_info

    async def execute(self) -> SystemInfoDTO:
        host_object, instances, metrics = await asyncio.gather(
            self._gateway.get_object(f"{HOST_PREFIX}{self._info.controller_host}"),
            self._gateway.get_objects(
                f"{ADAPTER_INSTANCE_PREFIX}*", ObjectKind.INSTANCE
            ),
            self._host_metrics.collect(),
        )

        version = UNKNOWN_VERSION
        if host_object is not None:
            version = host_object.common.get_str("installedVersion") or UNKNOWN_VERSION

        info = SystemInfo(
            controller_version=version,
            metrics=metrics,
            instances=sum(
                1 for entry in instances.values() if entry.kind == ObjectKind.INSTANCE
            ),
        )
        return SystemInfoDTO.from_domain(info)


class GetLogsUseCase:
    """Reads the controller host log and filters it client-side."""

    def __init__(
        self, object_store_gateway: IObjectStoreGateway, gateway_info: GatewayInfo
    ) -> None:
        self._gateway = object_store_gateway
        self._info = gateway_info

    async def execute(self, params: GetLogsParamsDTO) -> LogsResponseDTO:
        records = await self._gateway.query_logs(
            self._info.controller_host, params.limit
        )
        levels = params.level_set()
        logs = [
            LogEntryDTO.from_domain(record)
            for record in records
            if self._keep(record, params, levels)
        ]
        logger.debug(
            "logs.fetched", received=len(records), returned=len(logs), levels=levels
        )
        return LogsResponseDTO(count=len(logs), logs=logs)

    def _keep(
        self, record: LogEntry, params: GetLogsParamsDTO, levels: Optional[set]
    ) -> bool:
        if levels is not None and record.level.lower() not in levels:
            return False
        if params.from_ts is not None and (record.ts or 0) < params.from_ts:
            return False
        if params.adapter:
            source = record.source or ""
            if source != params.adapter and not source.startswith(
                f"{params.adapter}."
            ):
                return False
        return True


class GetGatewayInfoUseCase:
    """Describes this gateway: version, environment, uptime and store."""

    def __init__(self, gateway_info: GatewayInfo, methods: List[str]) -> None:
        self._info = gateway_info
        self._methods = methods

    def execute(self, started_at: Optional[datetime]) -> GatewayInfoDTO:
        now = datetime.now(timezone.utc)
        started = started_at or now
        return GatewayInfoDTO(
            name=self._info.title,
            description=self._info.description,
            version=self._info.version,
            environment=self._info.environment,
            started_at=started,
            uptime_seconds=max(0.0, (now - started).total_seconds()),
            controller_host=self._info.controller_host,
            store_url=self._redact_url(self._info.store_url),
            capabilities=list(self._methods),
        )

    def _redact_url(self, url: str) -> str:
        if not url:
            return url

        parsed = urlsplit(url)
        if parsed.username or parsed.password:
            hostname = parsed.hostname or ""
            port_part = f":{parsed.port}" if parsed.port else ""
            netloc = f"{hostname}{port_part}"
            return urlunsplit(
                (parsed.scheme, netloc, parsed.path, parsed.query, parsed.fragment)
            )

        return url
