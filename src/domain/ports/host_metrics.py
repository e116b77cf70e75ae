"""Domain port for metrics of the machine running the gateway."""

from __future__ import annotations

from typing import Protocol

from src.domain.entities.host import PlatformMetrics


class IHostMetricsProvider(Protocol):
    """Interface for reading local platform and process metrics."""

    async def collect(self) -> PlatformMetrics:
        """Collect hostname, platform, load, memory and process uptime."""
        ...
