"""Structured logging configuration for qlogview."""

import json
import logging
import logging.config
from datetime import datetime, timezone
from typing import IO, Optional

from qlogview.config import get_log_level


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "context"):
            log_data["context"] = record.context

        return json.dumps(log_data, default=repr)


def setup_logging(log_level: Optional[str] = None, stream: Optional[IO[str]] = None) -> None:
    """
    Setup structured logging for the qlogview loggers.

    Args:
        log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
                   Defaults to QLOGVIEW_LOG_LEVEL env var or WARNING.
        stream: Stream for the console handler. Defaults to stderr.
    """
    if log_level is None:
        log_level = get_log_level()

    console = {
        "class": "logging.StreamHandler",
        "formatter": "json",
    }
    if stream is not None:
        console["stream"] = stream

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": "qlogview.logging_config.JSONFormatter",
            },
        },
        "handlers": {
            "console": console,
        },
        "loggers": {
            "qlogview": {
                "level": log_level.upper(),
                "handlers": ["console"],
                "propagate": False,
            },
        },
    }

    logging.config.dictConfig(logging_config)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
