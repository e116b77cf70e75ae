"""
Use Cases Package - Application Layer

This package contains the use cases behind every dispatchable method.
Use cases orchestrate the flow of data between the object store gateway,
the domain services and the DTOs returned to the transports.
"""

from .device_use_cases import ListDevicesUseCase
from .host_use_cases import (
    GetGatewayInfoUseCase,
    GetLogsUseCase,
    ListAdaptersUseCase,
    ListHostsUseCase,
    SystemInfoUseCase,
)
from .object_use_cases import (
    ListFunctionsUseCase,
    ListRoomsUseCase,
    SearchObjectsUseCase,
)
from .state_use_cases import GetStatesUseCase, SetStateUseCase

__all__ = [
    "ListDevicesUseCase",
    "GetStatesUseCase",
    "SetStateUseCase",
    "SearchObjectsUseCase",
    "ListRoomsUseCase",
    "ListFunctionsUseCase",
    "ListAdaptersUseCase",
    "ListHostsUseCase",
    "SystemInfoUseCase",
    "GetLogsUseCase",
    "GetGatewayInfoUseCase",
]
