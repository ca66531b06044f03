"""
Centralized logging configuration for quote_app.

All components log through structlog using this configuration so the proxy,
the fetch client and the session coordinator share one format.
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
        format="%(message)s"
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
    """
    return structlog.get_logger(name)


def get_fetch_logger(name: str) -> FilteringBoundLogger:
    """Logger bound for provider requests."""
    return get_logger(name).bind(subsystem="fetch")


def get_state_logger(name: str) -> FilteringBoundLogger:
    """Logger bound for fetch lifecycle transitions."""
    return get_logger(name).bind(subsystem="state_machine")


def log_state_transition(
    logger: FilteringBoundLogger,
    symbol: Optional[str],
    request_id: int,
    from_state: str,
    to_state: str,
    trigger: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a fetch lifecycle transition with standardized format.

    Args:
        logger: Structlog logger instance
        symbol: Ticker symbol the fetch is for
        request_id: Identifier of the fetch that transitioned
        from_state: Current phase
        to_state: Target phase
        trigger: What triggered the transition
        context: Additional context data
    """
    bound_logger = logger.bind(
        symbol=symbol,
        request_id=request_id,
        from_state=from_state,
        to_state=to_state,
        trigger=trigger,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("State transition")


def log_stale_result(
    logger: FilteringBoundLogger,
    symbol: Optional[str],
    request_id: int,
    current_request_id: int,
    trigger: str
) -> None:
    """Log a fetch result that arrived after a newer fetch superseded it."""
    logger.bind(
        symbol=symbol,
        request_id=request_id,
        current_request_id=current_request_id,
        trigger=trigger,
    ).debug("Ignoring stale fetch result")
