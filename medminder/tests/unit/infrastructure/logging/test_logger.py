"""
Tests for logging configuration.
"""

import json
import logging
import sys

import pytest

from medminder.core.logging_config import get_logging_config, setup_logging
from medminder.infrastructure.logging import StructuredJSONFormatter, get_logger


def _record(**extra):
    record = logging.LogRecord(
        name="medminder.test",
        level=logging.ERROR,
        pathname=__file__,
        lineno=10,
        msg="Failed to persist dose status %s",
        args=("taken",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_emits_json_with_extra_fields():
    payload = json.loads(StructuredJSONFormatter().format(_record(dose_id="s_2024-06-12_08:00")))

    assert payload["level"] == "ERROR"
    assert payload["logger"] == "medminder.test"
    assert payload["message"] == "Failed to persist dose status taken"
    assert payload["dose_id"] == "s_2024-06-12_08:00"
    assert "exception" not in payload


def test_formatter_includes_exception():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = _record()
        record.exc_info = sys.exc_info()

    payload = json.loads(StructuredJSONFormatter().format(record))

    assert "RuntimeError: boom" in payload["exception"]


def test_get_logger_configures_once():
    logger = get_logger("medminder.tests.logger")
    again = get_logger("medminder.tests.logger")

    assert logger is again
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, StructuredJSONFormatter)
    assert logger.propagate is False


def test_logging_config_level_and_formatter():
    config = get_logging_config("debug", formatter="json")

    assert config["handlers"]["console"]["level"] == "DEBUG"
    assert config["handlers"]["console"]["formatter"] == "json"
    assert config["loggers"]["medminder"]["level"] == "DEBUG"


@pytest.fixture
def package_logger():
    """The package logger, restored after the test."""
    logger = logging.getLogger("medminder")
    saved = (logger.level, list(logger.handlers), logger.propagate)
    yield logger
    logger.setLevel(saved[0])
    logger.handlers[:] = saved[1]
    logger.propagate = saved[2]


def test_setup_logging_applies_config(package_logger):
    setup_logging("debug", formatter="json")

    assert package_logger.level == logging.DEBUG
    assert package_logger.propagate is False
    assert len(package_logger.handlers) == 1
    assert isinstance(package_logger.handlers[0].formatter, StructuredJSONFormatter)
