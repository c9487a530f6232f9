"""Structured Logging for jsonspec

- Colored, human-readable console output for development
- JSON structured output for services
- Context propagation through contextvars

The library never configures logging on import; applications call
configure_logging() once at startup.
"""
import logging
import sys

import structlog
from structlog.types import EventDict, Processor

from jsonspec.core.config import settings

SERVICE_NAME = "jsonspec"
SERVICE_VERSION = "0.1.0"


def _add_service_info(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Processor that adds library metadata."""
    event_dict.setdefault("service", SERVICE_NAME)
    event_dict.setdefault("version", SERVICE_VERSION)
    return event_dict


def get_shared_processors() -> list[Processor]:
    """Processors used in both console and JSON configurations."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _add_service_info,
    ]


def configure_logging(
    level: str | None = None,
    json_logs: bool | None = None,
) -> None:
    """Configure the logging system.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Defaults to settings.LOG_LEVEL.
        json_logs: If True, output JSON. If False, colored console output. Defaults to settings.LOG_JSON.
    """
    level = level if level is not None else settings.LOG_LEVEL
    json_logs = json_logs if json_logs is not None else settings.LOG_JSON
    log_level = getattr(logging, level.upper(), logging.INFO)

    shared_processors = get_shared_processors()

    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.plain_traceback,
        )

    # Formatter for stdlib logger (handles logs from third-party libs)
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(log_level)


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__ from the calling module)
    """
    return structlog.get_logger(name)


def bind_context(**kwargs) -> None:
    """Bind key-value pairs to the current logging context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()


class LoggerRegistry:
    """Registry of pre-configured loggers for the engine stages."""

    _loggers: dict[str, structlog.stdlib.BoundLogger] = {}

    @classmethod
    def get(cls, name: str) -> structlog.stdlib.BoundLogger:
        """Get or create a logger for the given stage."""
        if name not in cls._loggers:
            cls._loggers[name] = get_logger(f"{SERVICE_NAME}.{name}")
        return cls._loggers[name]


def schema_logger() -> structlog.stdlib.BoundLogger:
    """Logger for schema derivation and tag parsing."""
    return LoggerRegistry.get("schema")


def validation_logger() -> structlog.stdlib.BoundLogger:
    """Logger for decoding and validation."""
    return LoggerRegistry.get("validation")


def loader_logger() -> structlog.stdlib.BoundLogger:
    """Logger for loading typed values."""
    return LoggerRegistry.get("loader")
