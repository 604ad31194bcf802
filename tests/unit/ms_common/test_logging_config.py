"""Tests for structlog-backed logging configuration."""

from __future__ import annotations

import logging

import pytest

from ms_common.logging import configure_logging


pytestmark = pytest.mark.unit_common


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_default_level_is_warning(restore_root_logger, monkeypatch) -> None:
    monkeypatch.delenv("MS_LOG_LEVEL", raising=False)
    configure_logging(force=True)
    assert restore_root_logger.level == logging.WARNING


def test_debug_flag_wins(restore_root_logger, monkeypatch) -> None:
    monkeypatch.setenv("MS_LOG_LEVEL", "ERROR")
    configure_logging(debug=True, force=True)
    assert restore_root_logger.level == logging.DEBUG


def test_env_level_and_unknown_name(restore_root_logger, monkeypatch) -> None:
    monkeypatch.setenv("MS_LOG_LEVEL", "info")
    configure_logging(force=True)
    assert restore_root_logger.level == logging.INFO
    monkeypatch.setenv("MS_LOG_LEVEL", "chatty")
    configure_logging(force=True)
    assert restore_root_logger.level == logging.WARNING


def test_log_file_handler(restore_root_logger, monkeypatch, tmp_path) -> None:
    monkeypatch.delenv("MS_LOG_FILE", raising=False)
    target = tmp_path / "menu.log"
    configure_logging(level="INFO", log_file=str(target), json=True, force=True)
    logging.getLogger("ms_menu.test").info("hello file")
    for handler in restore_root_logger.handlers:
        handler.flush()
    content = target.read_text()
    assert "hello file" in content
    assert '"level": "info"' in content


def test_json_log_carries_record_extras(restore_root_logger, monkeypatch, tmp_path) -> None:
    monkeypatch.delenv("MS_LOG_LEVEL", raising=False)
    target = tmp_path / "menu.log"
    configure_logging(log_file=str(target), json=True, force=True)
    logging.getLogger("ms_menu.test").warning(
        "menu failed", extra={"error_type": "UsageError", "error_context": {"labels": 2}}
    )
    for handler in restore_root_logger.handlers:
        handler.flush()
    content = target.read_text()
    assert '"error_type": "UsageError"' in content
    assert '"labels": 2' in content
