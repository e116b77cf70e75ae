"""Application-level configuration models."""

from .system_info import GatewayInfo

__all__ = ["GatewayInfo"]
