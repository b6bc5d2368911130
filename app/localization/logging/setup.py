"""Structlog loggers for the localization package.

Module loggers wrap stdlib loggers under the ``localization`` namespace, so
the host application's logging configuration decides what is emitted.
Nothing is configured at import; hosts that want structlog rendering call
``configure_logging()`` once at startup.

Usage:
    from localization.logging import configure_logging, get_module_logger

    # Opt in at application startup
    configure_logging(log_level="DEBUG")

    # In a module
    logger = get_module_logger()
    logger.info("event_name", key="value")
"""

import inspect
import logging
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from localization.configuration import get_settings

PACKAGE_LOGGER = "localization"


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog rendering for the package loggers.

    Events are rendered to a single string (console in development, JSON in
    production) and handed to the stdlib ``localization`` logger. The root
    logger only gets a handler when the host has not configured one.

    Args:
        log_level: Level for the package logger (DEBUG, INFO, WARNING, etc).
            Defaults to settings.LOG_LEVEL.
        is_production: JSON output when True. Defaults to
            settings.is_production.

    Returns:
        Logger bound to the package namespace
    """
    if log_level is None or is_production is None:
        settings = get_settings()
        log_level = log_level or settings.LOG_LEVEL
        if is_production is None:
            is_production = settings.is_production

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if is_production:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=BoundLogger,
        cache_logger_on_first_use=True,
    )

    # No-op when the host already installed root handlers
    logging.basicConfig(format="%(message)s")
    logging.getLogger(PACKAGE_LOGGER).setLevel(
        getattr(logging, log_level.upper(), logging.INFO)
    )

    return structlog.stdlib.get_logger(PACKAGE_LOGGER)


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling module with full path context.

    Binds ``component`` and ``module_path`` from the calling module. The
    logger is lazy, so the structlog configuration in effect at the first
    log call applies rather than the one at import.

    Example:
        # In localization/i18n/selector.py
        logger = get_module_logger()
        # context: {"component": "selector", "module_path": "localization.i18n..."}
    """
    module_name = PACKAGE_LOGGER
    current_frame = inspect.currentframe()
    frame = current_frame.f_back if current_frame is not None else None
    module = inspect.getmodule(frame) if frame is not None else None
    if module:
        module_name = module.__name__

    return structlog.wrap_logger(
        logging.getLogger(module_name),
        wrapper_class=BoundLogger,
        component=module_name.split(".")[-1],
        module_path=module_name,
    )
