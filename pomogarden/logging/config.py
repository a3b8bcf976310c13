"""
Centralized logging configuration for the pomodoro core.

This module provides standardized logging configuration using structlog
for all components. Session transitions and garden growth events are
logged through the helpers below so that every completed session leaves
the same structured record.
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
    Configure structlog for the entire application.

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
    # basicConfig is a no-op once handlers exist; the level still has to follow the call
    logging.getLogger().setLevel(log_level)

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
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_session_logger(name: str) -> FilteringBoundLogger:
    """Get a logger bound to the session clock subsystem."""
    return get_logger(name).bind(subsystem="session_clock")


def get_garden_logger(name: str) -> FilteringBoundLogger:
    """Get a logger bound to the garden subsystem."""
    return get_logger(name).bind(subsystem="garden")


def log_session_transition(
    logger: FilteringBoundLogger,
    from_session: str,
    to_session: str,
    remaining_seconds: int,
    grows_garden: bool,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a session completion transition with standardized format.

    Args:
        logger: Structlog logger instance
        from_session: Session type that just completed
        to_session: Session type now loaded on the clock
        remaining_seconds: Countdown value of the new session
        grows_garden: Whether the completion records a growth event
        context: Additional context data
    """
    bound_logger = logger.bind(
        from_session=from_session,
        to_session=to_session,
        remaining_seconds=remaining_seconds,
        grows_garden=grows_garden,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("Session completed")


def log_growth_event(
    logger: FilteringBoundLogger,
    policy: str,
    applied: bool,
    total_growth: int,
    plot_id: Optional[str] = None,
    stage: Optional[int] = None
) -> None:
    """
    Log a garden growth event.

    A growth event that could not be applied (every plot fully grown) is
    logged at debug level since it is an expected steady state.
    """
    bound_logger = logger.bind(
        policy=policy,
        applied=applied,
        total_growth=total_growth,
    )
    if plot_id is not None:
        bound_logger = bound_logger.bind(plot_id=plot_id, stage=stage)

    if applied:
        bound_logger.info("Garden grew")
    else:
        bound_logger.debug("Garden fully grown, growth skipped")
