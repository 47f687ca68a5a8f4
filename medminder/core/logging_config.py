"""
Logging Configuration Module.

This module provides the central logging configuration dictionary for the
application and a helper to apply it.
"""

import logging
import logging.config
from typing import Any

from medminder.core.config import get_settings

LOGGING_CONFIG_BASE: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "[%(asctime)s] [%(levelname)s] [%(name)s] - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
        "detailed": {
            "format": "[%(asctime)s] [%(levelname)s] [%(name)s:%(lineno)d] - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
        "json": {
            "()": "medminder.infrastructure.logging.logger.StructuredJSONFormatter",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
            "stream": "ext://sys.stdout",
        },
    },
    "loggers": {
        "medminder": {
            "handlers": ["console"],
            "propagate": False,
        },
        "sqlalchemy.engine": {
            "level": "WARNING",
            "handlers": ["console"],
            "propagate": False,
        },
    },
}


def get_logging_config(level: str | None = None, formatter: str = "standard") -> dict[str, Any]:
    """
    Build a logging configuration dictionary.

    Args:
        level: Log level for the package logger, defaults to ``LOG_LEVEL`` from settings
        formatter: Name of the formatter used by the console handler

    Returns:
        A dictionary accepted by ``logging.config.dictConfig``
    """
    level = (level or get_settings().LOG_LEVEL).upper()
    config: dict[str, Any] = {
        **LOGGING_CONFIG_BASE,
        "handlers": {
            name: {**handler, "level": level, "formatter": formatter}
            for name, handler in LOGGING_CONFIG_BASE["handlers"].items()
        },
        "loggers": {**LOGGING_CONFIG_BASE["loggers"]},
    }
    config["loggers"]["medminder"] = {**config["loggers"]["medminder"], "level": level}
    return config


def setup_logging(level: str | None = None, formatter: str = "standard") -> None:
    """Apply the logging configuration."""
    logging.config.dictConfig(get_logging_config(level, formatter))
    logging.getLogger(__name__).debug("Logging configured")
