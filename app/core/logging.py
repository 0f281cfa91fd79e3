"""
Glovebox API - Logging
structlog on top of the standard library logger
"""

import logging
import sys

import structlog

from app.core.config import settings

# Chatty third-party loggers
MODULE_LOG_LEVELS = {
    "httpx": "WARNING",
    "httpcore": "WARNING",
    "hpack": "WARNING",
    "uvicorn.access": "WARNING",
}


def configure_logging(log_level: str = None, json_logs: bool = None) -> None:
    """
    Configure stdlib logging and structlog.

    Args:
        log_level: Root level name. Defaults to settings.LOG_LEVEL.
        json_logs: Render JSON lines instead of console output.
            Defaults to settings.LOG_JSON.
    """
    level_name = (log_level or settings.LOG_LEVEL).upper()
    level = getattr(logging, level_name, logging.INFO)
    if json_logs is None:
        json_logs = settings.LOG_JSON

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
        force=True,
    )
    for name, module_level in MODULE_LOG_LEVELS.items():
        logging.getLogger(name).setLevel(module_level)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]
    if json_logs:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )
