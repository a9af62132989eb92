"""Structured logging for localekit.

Exports:
    configure_logging: Opt-in logging setup for applications
    get_logger: Get logger with name
    get_module_logger: Get logger for calling module
    logger: Package-level logger instance
"""

from localekit.logging.setup import (
    configure_logging,
    get_logger,
    get_module_logger,
    logger,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "get_module_logger",
    "logger",
]
