"""
Structured logging setup for the event type resolution service.
Provides JSON-formatted logs with consistent fields for production monitoring.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.stdlib import LoggerFactory


def setup_logging(log_level: str = "INFO") -> None:
    """
    Configure structured logging with JSON output for production.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            _add_request_context,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
    )

    # Suppress noisy third-party loggers
    logging.getLogger("psycopg").setLevel(logging.WARNING)
    logging.getLogger("psycopg.pool").setLevel(logging.WARNING)


def _add_request_context(logger, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Merge context bound with structlog.contextvars (team_id, event_type_id)."""
    return structlog.contextvars.merge_contextvars(logger, method_name, event_dict)


def get_logger(name: str = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def log_validation_failure(step: str, error: Exception, **context: Any) -> None:
    """Log a rejected event type draft with consistent fields."""
    logger = get_logger("event_types.validation")

    log_data = {
        "step": step,
        "error": str(error),
        "error_type": type(error).__name__,
        **context,
    }

    error_code = getattr(error, "error_code", None)
    if error_code:
        log_data["error_code"] = error_code

    logger.warning("Event type draft rejected", **log_data)
