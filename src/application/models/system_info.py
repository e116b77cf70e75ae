"""Lightweight settings structures consumed by the application layer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GatewayInfo:
    """Subset of configuration required by the host and info use cases."""

    title: str
    description: str
    version: str
    environment: str
    controller_host: str
    store_url: str
