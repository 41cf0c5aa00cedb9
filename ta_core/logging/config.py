"""
Centralized logging configuration for the technical analysis engine.

All modules log through structlog; calling configure_logging() once at
application start decides whether events render for a console or as JSON
lines. The engine itself never configures logging on import.
"""
import logging
import sys
from typing import TYPE_CHECKING, Any, Optional

import structlog
from structlog.types import FilteringBoundLogger

if TYPE_CHECKING:
    from ..models.indicators import IndicatorAnalysis


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
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

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


def get_analysis_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the analysis subsystem.

    Signal decisions logged through it can be filtered out of the general
    application stream by the ``subsystem`` key.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger with analysis context bound
    """
    return get_logger(name).bind(subsystem="analysis")


def log_signal_decision(
    logger: FilteringBoundLogger,
    coin_id: Optional[str],
    analysis: "IndicatorAnalysis",
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a synthesized signal with standardized fields.

    Args:
        logger: Structlog logger instance
        coin_id: Coin the signal was computed for (None for ad-hoc series)
        analysis: Classified indicator analysis
        context: Additional context data
    """
    bound_logger = logger.bind(
        coin_id=coin_id,
        rsi_analysis=analysis.rsi_analysis.value,
        trend_analysis=analysis.trend_analysis.value,
        macd_analysis=analysis.macd_analysis.value,
        score=analysis.score,
        overall_signal=analysis.overall_signal.value,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("signal_synthesized")
