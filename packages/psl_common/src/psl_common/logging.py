"""Structured logging setup."""

import logging
import sys
from typing import Optional
import structlog


def setup_logging(
    level: str = "INFO",
    component: Optional[str] = None,
    json_format: bool = True,
) -> structlog.BoundLogger:
    """
    Configure structlog for the suffix classifier.

    Called when the default suffix list is first built, with the level from
    ``PSL_LOG_LEVEL`` or the settings file. Per-domain classification events
    are logged at DEBUG, so the default INFO level keeps queries quiet.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        component: Bound to every event of the returned logger; also adds
            call-site fields
        json_format: If True, output JSON logs; otherwise, console format

    Returns:
        Configured logger instance
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if component:
        processors.append(
            structlog.processors.CallsiteParameterAdder(
                {
                    structlog.processors.CallsiteParameter.MODULE,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                    structlog.processors.CallsiteParameter.LINENO,
                }
            )
        )

    processors.append(
        structlog.processors.JSONRenderer() if json_format else structlog.dev.ConsoleRenderer()
    )

    # Module-level loggers are created at import time and must pick up a
    # later reconfiguration, so they are never cached.
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )

    logger = structlog.get_logger()
    return logger.bind(component=component) if component else logger
