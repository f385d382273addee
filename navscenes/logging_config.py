"""
Logging configuration for navscenes.

Provides JSON or text logs with a trace_id field so the steps of one
navigation tree can be correlated.

Environment Variables:
    NAVSCENES_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: WARNING
    NAVSCENES_LOG_FORMAT: Log format (json, text) - default: text

Usage:
    from navscenes.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__, trace_id="checkout-flow")
    logger.info("Replaying trace")
"""

import logging
import os
import sys
from typing import Optional, TextIO

from pythonjsonlogger.json import JsonFormatter

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


class TraceIDFilter(logging.Filter):
    """
    Logging filter that adds trace_id to all log records.

    Ensures all logs have a trace_id field, even if not set via LoggerAdapter.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "trace_id"):
            record.trace_id = "N/A"  # type: ignore
        return True


def setup_logging(
    level: Optional[str] = None,
    fmt: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure the root logger with a single stream handler (stdout by default).

    Explicit arguments win over NAVSCENES_LOG_LEVEL / NAVSCENES_LOG_FORMAT.
    Unknown levels fall back to WARNING, unknown formats to text.
    """
    log_level = (level or os.getenv("NAVSCENES_LOG_LEVEL", "WARNING")).upper()
    log_format = (fmt or os.getenv("NAVSCENES_LOG_FORMAT", "text")).lower()
    resolved = LEVELS.get(log_level, logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(resolved)
    handler.addFilter(TraceIDFilter())

    if log_format == "json":
        formatter: logging.Formatter = JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(trace_id)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s [trace_id=%(trace_id)s]",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str, trace_id: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get a logger with optional trace_id for correlation.

    Args:
        name: Logger name (typically __name__)
        trace_id: Trace ID for correlating logs (typically a trace file or tree name)
    """
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, {"trace_id": trace_id or "N/A"})
