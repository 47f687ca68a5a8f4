"""
Logging configuration module.

This module provides a configured logger emitting structured JSON records.
Dose tracking logs carry user, schedule and dose identifiers in ``extra``
rather than interpolated into the message, so that downstream tooling can
filter on them.
"""

import json
import logging
import sys
from datetime import datetime

from medminder.core.config import get_settings

_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None)).keys()
) | {"message", "asctime"}


class StructuredJSONFormatter(logging.Formatter):
    """
    Formatter that renders log records as a single JSON object per line.
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format the log record as a JSON string.

        Args:
            record: The log record to format

        Returns:
            Formatted log message as a JSON string
        """
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Fields passed through ``extra=`` land on the record itself
        for key, value in vars(record).items():
            if key not in _RESERVED_ATTRS and key not in log_data:
                log_data[key] = value

        return json.dumps(log_data, default=str)


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: The name for the logger, typically __name__

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        logger.setLevel(getattr(logging, get_settings().LOG_LEVEL))

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(StructuredJSONFormatter())
        logger.addHandler(console_handler)

        # Prevent duplicate output through the root logger
        logger.propagate = False

    return logger
