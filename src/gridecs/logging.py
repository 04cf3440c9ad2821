"""Structured logging for gridecs.

Loggers are structlog wrappers around standard library loggers, so library
events follow the host's logging setup. Until something enables the
``gridecs`` logger (configure_logging() or the host's own handlers), the
debug events emitted by the library are dropped.

Usage:
    from gridecs.logging import configure_logging, get_logger

    configure_logging()  # reads GRIDECS_LOG_* environment variables
    log = get_logger(__name__)
    log.debug("entity_created", entity=3)
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog
from structlog.processors import JSONRenderer, TimeStamper, add_log_level
from structlog.stdlib import add_logger_name

if TYPE_CHECKING:
    from gridecs.config import LoggingSettings

ROOT_LOGGER = "gridecs"


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Configure structlog and the ``gridecs`` stdlib logger.

    Args:
        settings: Logging settings. Loaded from the environment if omitted.
    """
    if settings is None:
        from gridecs.config import LoggingSettings

        settings = LoggingSettings()

    renderer: Any = JSONRenderer() if settings.json_output else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            add_log_level,
            add_logger_name,
            TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root = logging.getLogger(ROOT_LOGGER)
    root.handlers[:] = [handler]
    root.setLevel(settings.level)
    root.propagate = False


def get_logger(name: str) -> Any:
    """Get a structured logger backed by the stdlib logger of the same name.

    Processors are resolved from structlog's configuration at call time, so
    module-level loggers pick up a later configure_logging().
    """
    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )
