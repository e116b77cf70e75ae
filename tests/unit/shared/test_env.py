from __future__ import annotations

import logging
import os

import pytest

from src.shared.env import load_secret_file_variables


def _unset(monkeypatch: pytest.MonkeyPatch, key: str) -> None:
    monkeypatch.delenv(key, raising=False)


def test_password_file_is_exposed_as_plain_variable(tmp_path, monkeypatch):
    secret_file = tmp_path / "iobroker_password"
    secret_file.write_text("hunter2\n", encoding="utf-8")

    monkeypatch.setenv("IOBROKER_PASSWORD_FILE", str(secret_file))
    _unset(monkeypatch, "IOBROKER_PASSWORD")

    load_secret_file_variables()

    assert os.environ["IOBROKER_PASSWORD"] == "hunter2"


def test_missing_secret_file_is_logged(monkeypatch, caplog):
    monkeypatch.setenv("IOBROKER_USERNAME_FILE", "/tmp/no-such-secret")
    _unset(monkeypatch, "IOBROKER_USERNAME")

    with caplog.at_level(logging.WARNING):
        load_secret_file_variables()

    assert any(record.message == "env.secret_file.missing" for record in caplog.records)
    assert "IOBROKER_USERNAME" not in os.environ


def test_undecodable_secret_file_is_logged(tmp_path, monkeypatch, caplog):
    binary_file = tmp_path / "binary.bin"
    binary_file.write_bytes(b"\xff\xfe\xfd")

    monkeypatch.setenv("BINARY_SECRET_FILE", str(binary_file))
    _unset(monkeypatch, "BINARY_SECRET")

    with caplog.at_level(logging.WARNING):
        load_secret_file_variables()

    assert any(
        record.message == "env.secret_file.decode_failed" for record in caplog.records
    )


def test_unreadable_secret_file_is_logged(monkeypatch, caplog):
    def _raise_os_error(self, *args, **kwargs):
        raise OSError("permission denied")

    monkeypatch.setenv("BROKEN_SECRET_FILE", "/tmp/any")
    _unset(monkeypatch, "BROKEN_SECRET")
    monkeypatch.setattr("src.shared.env.Path.read_text", _raise_os_error, raising=False)

    with caplog.at_level(logging.WARNING):
        load_secret_file_variables()

    assert any(
        record.message == "env.secret_file.load_failed" for record in caplog.records
    )


def test_existing_value_wins_over_file(monkeypatch):
    monkeypatch.setenv("IOBROKER_PASSWORD", "present")
    monkeypatch.setenv("IOBROKER_PASSWORD_FILE", "/tmp/ignored")

    load_secret_file_variables()

    assert os.environ["IOBROKER_PASSWORD"] == "present"


def test_log_file_is_not_treated_as_secret(tmp_path, monkeypatch):
    log_target = tmp_path / "gateway.log"
    log_target.write_text("previous run\n", encoding="utf-8")
    monkeypatch.setenv("LOG_FILE", str(log_target))
    _unset(monkeypatch, "LOG")

    load_secret_file_variables()

    assert "LOG" not in os.environ
