"""Structured logging configuration using structlog.

The retry engine only ever calls structlog.get_logger(); nothing is
configured on import. Applications that want its events rendered call
configure_logging() once at startup. Every event logged inside an
execution carries that execution's ``retry_execution_id`` through
structlog's contextvars, so interleaved concurrent executions can be told
apart.
"""

import logging
import sys
from typing import Optional

import structlog
from structlog.types import EventDict, WrappedLogger

from retry_backoff.config import Settings, settings as global_settings


def app_context_processor(app_settings: Settings):
    """Build a processor stamping events with the application name and version."""

    def add_app_context(
        logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> EventDict:
        event_dict["app"] = app_settings.APP_NAME
        event_dict["app_version"] = app_settings.APP_VERSION
        return event_dict

    return add_app_context


def configure_logging(
    log_level: Optional[str] = None,
    environment: Optional[str] = None,
    app_settings: Optional[Settings] = None,
) -> None:
    """Configure structlog for structured logging.

    Args:
        log_level: Logging level name; settings.LOG_LEVEL if None
        environment: "production" for JSON lines, anything else for console
            output; settings.ENVIRONMENT if None
        app_settings: Settings to read fallbacks from (global settings if None)

    Unknown level names fall back to INFO.
    """
    app_settings = app_settings or global_settings
    log_level = log_level or app_settings.LOG_LEVEL
    environment = environment or app_settings.ENVIRONMENT
    log_level_int = getattr(logging, log_level.upper(), logging.INFO)
    if not isinstance(log_level_int, int):
        log_level_int = logging.INFO

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        app_context_processor(app_settings),
    ]

    is_production = environment.lower() == "production"

    if is_production:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        # ConsoleRenderer formats exc_info itself
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        foreign_pre_chain=shared_processors,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    handler.setLevel(log_level_int)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level_int)

    structlog.get_logger(__name__).debug(
        "Logging configured",
        log_level=logging.getLevelName(log_level_int),
        environment=environment,
        renderer="json" if is_production else "console",
    )
