"""
Structured logging configuration for rootreplay.

Provides JSON or text logs with a trace_id field for correlating all lines
produced while replaying one game.

Environment Variables:
    ROOTREPLAY_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: INFO
    ROOTREPLAY_LOG_FORMAT: Log format (json, text) - default: text

Usage:
    from rootreplay.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__, trace_id="game-12345")
    logger.info("Replaying game")
"""

import logging
import os
import sys
from typing import Optional

from pythonjsonlogger import jsonlogger

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

    Ensures every record has a trace_id field, even if not logged via
    get_logger().
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "trace_id"):
            record.trace_id = "N/A"  # type: ignore
        return True


def setup_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """
    Configure root logger.

    Explicit arguments win over ROOTREPLAY_LOG_LEVEL / ROOTREPLAY_LOG_FORMAT.
    Output goes to stderr so command output on stdout stays parseable.
    """
    level_name = (level or os.getenv("ROOTREPLAY_LOG_LEVEL", "INFO")).upper()
    fmt = (log_format or os.getenv("ROOTREPLAY_LOG_FORMAT", "text")).lower()
    log_level = LEVELS.get(level_name, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.addFilter(TraceIDFilter())

    if fmt == "json":
        formatter = jsonlogger.JsonFormatter(
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
        trace_id: Trace ID for correlating logs (typically the game id)

    Returns:
        LoggerAdapter with trace_id in extra fields
    """
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, {"trace_id": trace_id or "N/A"})
