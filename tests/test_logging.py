"""Tests for structured logging functionality."""

from __future__ import annotations

import json
import logging
import logging.handlers
import sys

import pytest

from stewardkeeper.config import BaseConfig
from stewardkeeper.logging_config import JSONFormatter, get_logger, setup_logging


@pytest.fixture(autouse=True)
def _reset_stewardkeeper_logger():
    """Detach handlers added by setup_logging."""
    yield
    logger = logging.getLogger("stewardkeeper")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def test_json_formatter():
    """JSONFormatter emits the standard fields plus extras."""
    formatter = JSONFormatter()

    record = logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname="test.py",
        lineno=42,
        msg="Report built",
        args=(),
        exc_info=None,
    )
    record.module = "test_module"
    record.funcName = "test_function"
    record.slices = 3

    log_data = json.loads(formatter.format(record))

    assert log_data["level"] == "INFO"
    assert log_data["logger"] == "test.logger"
    assert log_data["message"] == "Report built"
    assert log_data["function"] == "test_function"
    assert log_data["line"] == 42
    assert log_data["extra"]["slices"] == 3
    assert "timestamp" in log_data


def test_json_formatter_with_exception():
    formatter = JSONFormatter()

    try:
        raise ValueError("Test error")
    except ValueError:
        exc_info = sys.exc_info()

    record = logging.LogRecord(
        name="test.logger",
        level=logging.ERROR,
        pathname="test.py",
        lineno=42,
        msg="Error occurred",
        args=(),
        exc_info=exc_info,
    )

    log_data = json.loads(formatter.format(record))

    assert log_data["exception"]["type"] == "ValueError"
    assert "Test error" in log_data["exception"]["message"]
    assert log_data["exception"]["traceback"] is not None


def test_setup_logging(tmp_path):
    """Logging setup writes JSON lines to a rotating file."""
    config = BaseConfig()
    config.DATA_DIR = tmp_path
    config.DEV_MODE = True

    logger = setup_logging(config)

    assert logger.name == "stewardkeeper"
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 2  # Console + File

    log_file = tmp_path / "logs" / "stewardkeeper.log"
    assert log_file.exists()

    get_logger("services.reports").warning("Goal missing", extra={"range": "month"})
    for handler in logger.handlers:
        handler.flush()

    lines = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines() if line.strip()]
    assert lines[0]["message"] == "Logging initialized"
    assert lines[-1]["message"] == "Goal missing"
    assert lines[-1]["extra"]["range"] == "month"


def test_get_logger_namespaces():
    assert get_logger("module1").name == "stewardkeeper.module1"
    assert get_logger("stewardkeeper.services.bucketing").name == "stewardkeeper.services.bucketing"


@pytest.mark.parametrize("dev_mode", [True, False])
def test_logging_levels_by_mode(tmp_path, dev_mode):
    config = BaseConfig()
    config.DATA_DIR = tmp_path
    config.DEV_MODE = dev_mode

    logger = setup_logging(config)

    console_handler = next(
        handler
        for handler in logger.handlers
        if isinstance(handler, logging.StreamHandler)
        and not isinstance(handler, logging.handlers.RotatingFileHandler)
    )
    assert console_handler.level == (logging.INFO if dev_mode else logging.WARNING)
