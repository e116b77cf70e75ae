"""Infrastructure implementation for local platform metrics."""

from __future__ import annotations

import asyncio
import platform
import socket
import sys
import time

import psutil

from src.domain.entities.host import PlatformMetrics
from src.domain.ports.host_metrics import IHostMetricsProvider

_BYTES_PER_MB = 1024 * 1024


class HostMetricsService(IHostMetricsProvider):
    """Collect metrics of the machine and process running the gateway."""

    def __init__(self, process: psutil.Process | None = None) -> None:
        self._process = process or psutil.Process()

    async def collect(self) -> PlatformMetrics:
        """Gather metrics off the event loop; psutil calls may block."""

        return await asyncio.to_thread(self._collect_sync)

    def _collect_sync(self) -> PlatformMetrics:
        load_1m, _, _ = psutil.getloadavg()
        memory = psutil.virtual_memory()
        uptime = time.time() - self._process.create_time()

        return PlatformMetrics(
            hostname=socket.gethostname(),
            platform=sys.platform,
            python=platform.python_version(),
            cpu_load=round(load_1m, 2),
            mem_total_mb=round(memory.total / _BYTES_PER_MB),
            mem_used_mb=round((memory.total - memory.available) / _BYTES_PER_MB),
            uptime_sec=max(0, int(uptime)),
        )
