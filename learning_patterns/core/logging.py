"""Structured logging for the assessment service.

Events render as JSON lines, or through the console renderer when
``OTEL_LOG_RECORD_FORMAT=console``. Each event carries the service name,
the environment and whatever correlation context the request has bound.
"""

import logging
import sys

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from learning_patterns.core.config import Settings, get_settings

QUIET_LOGGERS = ("uvicorn.access", "opentelemetry")


def service_fields(settings: Settings) -> Processor:
    service = settings.observability.service_name
    env = settings.app.env.value

    def add_service_fields(_logger: WrappedLogger, _method: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("service", service)
        event_dict.setdefault("env", env)
        return event_dict

    return add_service_fields


def select_renderer(log_format: str) -> Processor:
    if log_format.strip().lower() == "console":
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.JSONRenderer()


def setup_logging(settings: Settings | None = None) -> None:
    """Configure stdlib logging and structlog from settings."""
    settings = settings or get_settings()
    level = logging.getLevelNamesMapping()[settings.app.log_level.value]

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            service_fields(settings),
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            select_renderer(settings.observability.log_record_format),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
