"""Structlog configuration and logger setup.

Loggers returned here are lazy structlog proxies: they pick up whatever
configuration is active when they first log. Importing localekit never
configures logging; applications call configure_logging() themselves or
keep their own structlog setup.

Usage:
    from localekit.logging import configure_logging, get_module_logger

    # Optional, at application startup
    configure_logging()

    # Get a logger for your module
    logger = get_module_logger()
    logger.info("event_name", key="value")
"""

import logging
import sys
import inspect
import structlog
from structlog.stdlib import BoundLogger
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from localekit.configuration import Settings


def _is_test_environment() -> bool:
    """Detect if running in a test environment."""
    return "pytest" in sys.modules


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
    settings: Optional["Settings"] = None,
) -> BoundLogger:
    """Configure structlog and the standard library root logger.

    Sets up call-site context, exception formatting and context variable
    merging. Under pytest all output is suppressed.

    Args:
        log_level: Override for the log level (DEBUG, INFO, WARNING, etc).
            Defaults to settings.LOG_LEVEL.
        is_production: Override for production mode, which selects JSON
            instead of console output. Defaults to settings.is_production.
        settings: Settings to read defaults from (default: the
            localekit.configuration singleton, loaded on first use).

    Returns:
        Configured logger instance
    """
    if _is_test_environment():
        logging.root.setLevel(logging.CRITICAL + 1)

        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        logging.basicConfig(
            format="%(message)s",
            level=logging.CRITICAL + 1,
            force=True,
        )
        return structlog.stdlib.get_logger()

    if settings is None:
        from localekit.configuration import settings as default_settings

        settings = default_settings

    prod_mode = is_production if is_production is not None else settings.is_production

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

    if prod_mode:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    effective_log_level = log_level or settings.LOG_LEVEL
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, effective_log_level.upper(), logging.INFO),
    )

    return structlog.stdlib.get_logger()


# Package-level logger; resolves against the active structlog configuration
logger: BoundLogger = structlog.get_logger()


def _caller_module_name() -> Optional[str]:
    # frame of the function that called get_logger / get_module_logger
    frame = inspect.currentframe()
    for _ in range(2):
        if frame is None:
            return None
        frame = frame.f_back
    if frame is None:
        return None
    module = inspect.getmodule(frame)
    return module.__name__ if module else None


def get_logger(name: Optional[str] = None) -> BoundLogger:
    """Get a logger bound to a name (default: the calling module)."""
    return structlog.get_logger(
        logger_name=name or _caller_module_name() or "unknown"
    )


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling module with full path context.

    Binds ``component`` (last dotted segment) and ``module_path``.

    Example:
        # In localekit/i18n/renderer.py
        logger = get_module_logger()
        # context: {"component": "renderer", "module_path": "localekit.i18n.renderer"}
    """
    module_name = _caller_module_name()
    if module_name is None:
        return structlog.get_logger(component="unknown")
    return structlog.get_logger(
        component=module_name.split(".")[-1],
        module_path=module_name,
    )
