"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer: method
parameters, operation payloads and the dispatch envelope.
"""

from .device_dto import (
    DeviceDTO,
    DeviceListDTO,
    DeviceStateDTO,
    ListDevicesParamsDTO,
)
from .envelope_dto import DispatchRequestDTO, EnvelopeDTO
from .host_dto import (
    AdapterInstanceDTO,
    AdaptersResponseDTO,
    GatewayInfoDTO,
    GetLogsParamsDTO,
    HostDTO,
    HostsResponseDTO,
    LogEntryDTO,
    LogsResponseDTO,
    MemoryDTO,
    SystemInfoDTO,
)
from .object_dto import (
    EnumerationDTO,
    EnumerationsResponseDTO,
    ObjectSummaryDTO,
    SearchObjectsParamsDTO,
    SearchObjectsResponseDTO,
)
from .state_dto import (
    GetStatesParamsDTO,
    SetStateParamsDTO,
    SetStateResultDTO,
    StatesResponseDTO,
    StateValueDTO,
)

__all__ = [
    "DeviceDTO",
    "DeviceListDTO",
    "DeviceStateDTO",
    "ListDevicesParamsDTO",
    "DispatchRequestDTO",
    "EnvelopeDTO",
    "AdapterInstanceDTO",
    "AdaptersResponseDTO",
    "GatewayInfoDTO",
    "GetLogsParamsDTO",
    "HostDTO",
    "HostsResponseDTO",
    "LogEntryDTO",
    "LogsResponseDTO",
    "MemoryDTO",
    "SystemInfoDTO",
    "EnumerationDTO",
    "EnumerationsResponseDTO",
    "ObjectSummaryDTO",
    "SearchObjectsParamsDTO",
    "SearchObjectsResponseDTO",
    "GetStatesParamsDTO",
    "SetStateParamsDTO",
    "SetStateResultDTO",
    "StatesResponseDTO",
    "StateValueDTO",
]
