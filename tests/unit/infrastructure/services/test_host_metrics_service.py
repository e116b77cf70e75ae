from types import SimpleNamespace

import pytest

from src.infrastructure.services import host_metrics_service
from src.infrastructure.services.host_metrics_service import HostMetricsService


class _StubProcess:
    def __init__(self, created: float) -> None:
        self._created = created

    def create_time(self) -> float:
        return self._created


@pytest.mark.asyncio
async def test_collect_reports_load_memory_and_uptime(monkeypatch) -> None:
    monkeypatch.setattr(
        host_metrics_service.psutil, "getloadavg", lambda: (0.456, 0.3, 0.2)
    )
    monkeypatch.setattr(
        host_metrics_service.psutil,
        "virtual_memory",
        lambda: SimpleNamespace(total=8 * 1024**3, available=5 * 1024**3),
    )
    monkeypatch.setattr(host_metrics_service.time, "time", lambda: 1_000.0)
    monkeypatch.setattr(host_metrics_service.socket, "gethostname", lambda: "gw-01")

    metrics = await HostMetricsService(process=_StubProcess(created=880.0)).collect()

    assert metrics.hostname == "gw-01"
    assert metrics.cpu_load == 0.46
    assert metrics.mem_total_mb == 8192
    assert metrics.mem_used_mb == 3072
    assert metrics.uptime_sec == 120
    assert metrics.python


@pytest.mark.asyncio
async def test_uptime_never_negative(monkeypatch) -> None:
    monkeypatch.setattr(host_metrics_service.time, "time", lambda: 10.0)

    metrics = await HostMetricsService(process=_StubProcess(created=50.0)).collect()

    assert metrics.uptime_sec == 0


@pytest.mark.asyncio
async def test_memory_is_rounded_to_whole_megabytes(monkeypatch) -> None:
    megabyte = 1024 * 1024
    monkeypatch.setattr(
        host_metrics_service.psutil,
        "virtual_memory",
        lambda: SimpleNamespace(
            total=int(2.6 * megabyte), available=int(1.2 * megabyte)
        ),
    )

    metrics = await HostMetricsService(process=_StubProcess(created=0.0)).collect()

    assert metrics.mem_total_mb == 3
    assert metrics.mem_used_mb == 1
