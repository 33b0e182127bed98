"""Tests for Settings and configure_logging."""
from __future__ import annotations

import logging

import pytest

from simplekvstore.config import LOGGER_NAME, Settings, configure_logging
from simplekvstore.store.kv_store import Store


@pytest.fixture
def clean_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    logger.handlers.clear()
    yield logger
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


def test_defaults(monkeypatch):
    monkeypatch.delenv("SIMPLEKVSTORE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("SIMPLEKVSTORE_DEBUG", raising=False)
    cfg = Settings()
    assert cfg.LOG_LEVEL == "WARNING"
    assert cfg.DEBUG is False
    assert cfg.effective_level == logging.WARNING


def test_env_level(monkeypatch):
    monkeypatch.setenv("SIMPLEKVSTORE_LOG_LEVEL", "info")
    monkeypatch.delenv("SIMPLEKVSTORE_DEBUG", raising=False)
    assert Settings().effective_level == logging.INFO


def test_debug_flag_wins(monkeypatch):
    monkeypatch.setenv("SIMPLEKVSTORE_LOG_LEVEL", "ERROR")
    monkeypatch.setenv("SIMPLEKVSTORE_DEBUG", "TRUE")
    assert Settings().effective_level == logging.DEBUG


def test_unknown_level_raises():
    with pytest.raises(ValueError, match="unknown log level"):
        _ = Settings(LOG_LEVEL="LOUD", DEBUG=False).effective_level


def test_configure_logging_uses_settings(clean_logger):
    logger = configure_logging(cfg=Settings(LOG_LEVEL="ERROR", DEBUG=False))
    assert logger is clean_logger
    assert logger.level == logging.ERROR
    assert len(logger.handlers) == 1


def test_configure_logging_explicit_level_and_no_duplicate_handlers(clean_logger):
    configure_logging(logging.INFO)
    configure_logging(logging.DEBUG)
    assert clean_logger.level == logging.DEBUG
    assert len(clean_logger.handlers) == 1


def test_store_logs_misses_at_debug(clean_logger, caplog):
    store = Store()
    with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
        store.get("nope")
        store.set("k", "1")
        store.set("k", "2")
    messages = [r.getMessage() for r in caplog.records]
    assert "lookup miss for key 'nope'" in messages
    assert "overwrote key 'k'" in messages


def test_env_settings_do_not_reach_the_store(monkeypatch, clean_logger):
    """Env vars only matter once configure_logging() is called."""
    monkeypatch.setenv("SIMPLEKVSTORE_DEBUG", "true")
    monkeypatch.setenv("SIMPLEKVSTORE_LOG_LEVEL", "DEBUG")
    level_before = clean_logger.level

    store = Store()
    store.set("k", "v")
    assert store.get("k").unwrap().value == "v"
    assert store.get_with_prefix("") == store.get_all()

    assert clean_logger.level == level_before
    assert clean_logger.handlers == []
