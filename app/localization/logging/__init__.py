"""Structured logging for the localization package.

Public API:
    - configure_logging(): Opt-in structlog rendering for the package loggers
    - get_module_logger(): Get a logger for the calling module
"""

from localization.logging.setup import (
    PACKAGE_LOGGER,
    configure_logging,
    get_module_logger,
)

__all__ = [
    "PACKAGE_LOGGER",
    "configure_logging",
    "get_module_logger",
]
