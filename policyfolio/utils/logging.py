# policyfolio/utils/logging.py
"""
Logging configuration for Policyfolio.

Provides centralized logging setup with:
- Level taken from settings.log_level unless overridden
- Text (human) or JSON (aggregation) output
- Correlation ID on every record (see policyfolio.utils.context)

Usage:
    from policyfolio.utils import setup_logging

    setup_logging()                      # settings-driven
    setup_logging(level="DEBUG")         # local debugging
    setup_logging(log_format="json")     # batch jobs shipping to a log store

Log Levels used by the engine:
    DEBUG   - Per-subscription valuation detail, recovered degenerate inputs
    INFO    - Service construction, subscription lifecycle events
    WARNING - Subscriptions skipped during aggregation
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from policyfolio.config import settings
from policyfolio.utils.context import get_correlation_id

DEFAULT_TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(correlation_id)s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

NO_CORRELATION_ID = "no-correlation-id"

# Attributes every LogRecord carries; anything else came in via ``extra=``
_STANDARD_ATTRS = frozenset({
    "name", "msg", "args", "created", "filename", "funcName",
    "levelname", "levelno", "lineno", "module", "msecs",
    "pathname", "process", "processName", "relativeCreated",
    "stack_info", "exc_info", "exc_text", "thread", "threadName",
    "correlation_id", "message", "taskName",
})


class CorrelationIdFilter(logging.Filter):
    """Stamp each record with the current correlation ID."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or NO_CORRELATION_ID
        return True


class JsonFormatter(logging.Formatter):
    """
    Single-line JSON formatter.

    Output format:
    {
        "timestamp": "2024-06-30T10:30:00.123000+00:00",
        "level": "WARNING",
        "logger": "policyfolio.services.portfolio.aggregator",
        "correlation_id": "stmt-2024-06",
        "message": "Skipping subscription SUBAB12CD...",
        "extra": {"subscription_id": "SUBAB12CD..."}
    }

    Decimal and date values passed through ``extra`` are rendered with str().
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "correlation_id": getattr(record, "correlation_id", NO_CORRELATION_ID),
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        extra = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _STANDARD_ATTRS
        }
        if extra:
            log_entry["extra"] = extra

        return json.dumps(log_entry, default=str)


def setup_logging(
        level: str | None = None,
        log_format: str | None = None,
) -> None:
    """
    Configure the root logger.

    Replaces any existing root handlers, so calling it twice is safe.

    Args:
        level: Log level name. Defaults to settings.log_level.
        log_format: 'text' or 'json'. Defaults to settings.log_format.

    Raises:
        ValueError: If level is not a known log level name
    """
    level_name = level or settings.log_level
    log_level = _get_log_level(level_name)
    format_type = (log_format or settings.log_format).lower()

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(fmt=DEFAULT_TEXT_FORMAT, datefmt=DEFAULT_DATE_FORMAT)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    handler.addFilter(CorrelationIdFilter())

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    logging.getLogger(__name__).info(
        "Logging configured: level=%s, format=%s", level_name.upper(), format_type
    )


def _get_log_level(level_str: str) -> int:
    """
    Convert a level name to its logging constant.

    Raises:
        ValueError: If level_str is not a valid log level
    """
    level_mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "WARN": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }

    normalized = level_str.upper().strip()
    if normalized not in level_mapping:
        raise ValueError(
            f"Invalid log level: '{level_str}'. "
            f"Valid levels are: {', '.join(level_mapping)}"
        )
    return level_mapping[normalized]


def get_logger(name: str) -> logging.Logger:
    """Return a standard logger; correlation IDs are added by the handler filter."""
    return logging.getLogger(name)
