from __future__ import annotations

import json
import logging
from dataclasses import dataclass

import structlog

from src.shared.logging import (
    _build_renderer,
    configure_logging,
    get_logger,
    update_logging_from_settings,
)


def test_configure_logging_sets_root_handlers(tmp_path) -> None:
    log_file = tmp_path / "gateway.log"
    configure_logging(level="DEBUG", file_path=str(log_file), environment="development")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(handler, logging.FileHandler) for handler in root.handlers)

    logger = get_logger(__name__)
    logger.info("structured log test", device_id="device:zigbee.0.dev1")


def test_http_client_loggers_stay_quiet_at_debug() -> None:
    configure_logging(level="DEBUG", environment="development")

    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("httpcore").level == logging.WARNING


def test_production_renders_json() -> None:
    assert isinstance(_build_renderer("production"), structlog.processors.JSONRenderer)
    assert isinstance(_build_renderer("development"), structlog.dev.ConsoleRenderer)


@dataclass
class _LoggingSettings:
    level: str = "WARNING"
    format: str = "%(message)s"
    file_path: str | None = None


@dataclass
class _Settings:
    logging: _LoggingSettings
    environment: str = "production"


def test_update_logging_from_settings_applies_configuration() -> None:
    settings = _Settings(logging=_LoggingSettings(level="ERROR"))

    update_logging_from_settings(settings)

    root_logger = logging.getLogger()
    assert root_logger.level == logging.ERROR


def test_stdlib_records_render_through_formatter(tmp_path, capsys) -> None:
    log_file = tmp_path / "stdlib.log"
    configure_logging(level="INFO", file_path=str(log_file), environment="production")

    logging.getLogger("uvicorn").warning("server started on %s", 8000)

    lines = [line for line in log_file.read_text().splitlines() if line]
    record = json.loads(lines[-1])
    assert record["event"] == "server started on 8000"
    assert record["logger"] == "uvicorn"
    assert record["level"] == "warning"
    assert "Logging error" not in capsys.readouterr().err
