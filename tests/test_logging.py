"""Tests for logging configuration."""

import io
import json
import logging

import pytest

from qlogview.config import get_log_level
from qlogview.logging_config import JSONFormatter, get_logger, setup_logging


@pytest.fixture
def restore_qlogview_logger():
    """Undo setup_logging() so other tests can use caplog."""
    yield
    qlog_logger = logging.getLogger("qlogview")
    for handler in list(qlog_logger.handlers):
        qlog_logger.removeHandler(handler)
    qlog_logger.propagate = True
    qlog_logger.setLevel(logging.NOTSET)


def test_json_formatter_includes_context():
    record = logging.LogRecord(
        name="qlogview.trace.lookup",
        level=logging.WARNING,
        pathname=__file__,
        lineno=10,
        msg="Skipping event %d",
        args=(3,),
        exc_info=None,
    )
    record.context = {"index": 3}

    data = json.loads(JSONFormatter().format(record))

    assert data["level"] == "WARNING"
    assert data["logger"] == "qlogview.trace.lookup"
    assert data["message"] == "Skipping event 3"
    assert data["context"] == {"index": 3}


def test_setup_logging_writes_json(restore_qlogview_logger):
    stream = io.StringIO()

    setup_logging("debug", stream=stream)
    get_logger("qlogview.test").debug("hello %s", "trace")

    line = stream.getvalue().strip().splitlines()[-1]
    assert json.loads(line)["message"] == "hello trace"


def test_log_level_from_env(monkeypatch):
    monkeypatch.setenv("QLOGVIEW_LOG_LEVEL", "info")
    assert get_log_level() == "INFO"

    monkeypatch.delenv("QLOGVIEW_LOG_LEVEL")
    assert get_log_level() == "WARNING"
