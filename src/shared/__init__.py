"""
Shared module - Cross-cutting concerns / Shared Layer

This module provides shared utilities, constants, and enums that are used
across multiple layers of the application.

Its primary responsibilities include:
- Defining cross-layer constants (environment names, log levels and
  the reserved namespaces of the object store)
- Structured logging setup shared by the API process and tests

Following Clean Architecture principles:
- Shared module contains only *cross-cutting concerns*
- It must not depend on Infrastructure or Frameworks
"""

from .consts import (
    ADAPTER_INSTANCE_PREFIX,
    DEVICE_ID_PREFIX,
    FUNCTION_ENUM_PREFIX,
    HOST_PREFIX,
    ROOM_ENUM_PREFIX,
    EnumEnvironment,
    EnumLogLevel,
)
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "ADAPTER_INSTANCE_PREFIX",
    "DEVICE_ID_PREFIX",
    "FUNCTION_ENUM_PREFIX",
    "HOST_PREFIX",
    "ROOM_ENUM_PREFIX",
    "EnumEnvironment",
    "EnumLogLevel",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
