"""
Settings and logging setup tests.
"""
import logging

import structlog

from jsonspec.core.config import Settings, get_settings
from jsonspec.core.logging import LoggerRegistry, bind_context, clear_context, configure_logging


def test_defaults(monkeypatch):
    for name in ["JSONSPEC_LOG_LEVEL", "JSONSPEC_LOG_JSON", "JSONSPEC_SCHEMA_CACHE_SIZE"]:
        monkeypatch.delenv(name, raising=False)
    config = Settings(_env_file=None)
    assert config.LOG_LEVEL == "INFO"
    assert config.LOG_JSON is False
    assert config.SCHEMA_CACHE_SIZE == 256


def test_environment_prefix(monkeypatch):
    monkeypatch.setenv("JSONSPEC_LOG_JSON", "true")
    monkeypatch.setenv("JSONSPEC_SCHEMA_CACHE_SIZE", "16")
    config = Settings(_env_file=None)
    assert config.LOG_JSON is True
    assert config.SCHEMA_CACHE_SIZE == 16


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_configure_logging_sets_level():
    try:
        configure_logging(level="DEBUG", json_logs=True)
        assert logging.getLogger().level == logging.DEBUG
    finally:
        configure_logging(level="WARNING", json_logs=False)
    assert logging.getLogger().level == logging.WARNING


def test_registry_reuses_loggers():
    assert LoggerRegistry.get("schema") is LoggerRegistry.get("schema")


def test_bound_context():
    clear_context()
    try:
        bind_context(request="r-1")
        assert structlog.contextvars.get_contextvars() == {"request": "r-1"}
    finally:
        clear_context()
    assert structlog.contextvars.get_contextvars() == {}
