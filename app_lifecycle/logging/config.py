"""
Centralized logging configuration for lifecycle tracking.

Uses structlog on top of the standard library logging module. Trackers log
through the loggers returned here so every transition record carries the
same fields regardless of how the host application renders them.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the host process.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a structlog logger instance.

    Args:
        name: Logger name (typically __name__)
    """
    return structlog.get_logger(name)


def get_state_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound with lifecycle tracker context.

    Args:
        name: Logger name (typically __name__)

    Returns:
        structlog logger carrying subsystem and audit_trail fields
    """
    logger = get_logger(name)

    return logger.bind(
        subsystem="lifecycle_tracker",
        audit_trail=True
    )


def log_state_transition(
    logger: FilteringBoundLogger,
    tracker: str,
    from_value: str,
    to_value: str,
    trigger: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a committed raw lifecycle value change.

    Args:
        logger: Structlog logger instance
        tracker: Name of the tracker that changed
        from_value: Raw value before the change
        to_value: Raw value after the change
        trigger: What caused the change ("synthetic" or "source")
        context: Additional context data
    """
    bound_logger = logger.bind(
        tracker=tracker,
        from_value=from_value,
        to_value=to_value,
        trigger=trigger,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("state_transition")
