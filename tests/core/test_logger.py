"""Tests for loguru sink setup."""

import pytest
from loguru import logger

from overload.config.settings import Settings
from overload.core.logger import setup_logger


@pytest.fixture(autouse=True)
def _restore_console_sink():
    yield
    setup_logger(level="INFO", log_file="")


def test_console_only_when_no_log_file(monkeypatch) -> None:
    monkeypatch.delenv("LOG_FILE", raising=False)

    assert setup_logger(config=Settings(_env_file=None)) is None


def test_log_file_from_settings(tmp_path, monkeypatch) -> None:
    log_file = tmp_path / "logs" / "relay.log"
    monkeypatch.setenv("LOG_FILE", str(log_file))
    monkeypatch.setenv("LOG_LEVEL", "warning")

    path = setup_logger(config=Settings(_env_file=None))
    logger.info("below threshold")
    logger.warning("relay started with {braces} intact")
    logger.remove()

    assert path == log_file
    text = log_file.read_text(encoding="utf-8")
    assert "relay started with {braces} intact" in text
    assert "below threshold" not in text


def test_explicit_arguments_override_settings(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "ignored.log"))
    log_file = tmp_path / "cli.log"

    path = setup_logger(level="debug", log_file=str(log_file), config=Settings(_env_file=None))
    logger.debug("explicit sink")
    logger.remove()

    assert path == log_file
    assert "explicit sink" in log_file.read_text(encoding="utf-8")
    assert not (tmp_path / "ignored.log").exists()
