"""Tests for the JSON logging configuration."""

import json
import logging

import pytest

from kanowins.logging_config import build_logging_config, configure_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Put back the root logger's handlers and level after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_build_logging_config_level_and_quiet_loggers():
    """The root level follows the argument and AWS SDK loggers stay at WARNING."""
    config = build_logging_config("debug")

    assert config["root"]["level"] == "DEBUG"
    assert config["loggers"]["botocore"] == {"level": "WARNING"}
    assert config["formatters"]["json"]["static_fields"] == {"service": "kanowins"}


def test_configure_logging_emits_json(capsys: pytest.CaptureFixture[str]):
    """Records are written to stdout as JSON with renamed fields and extras."""
    configure_logging("INFO")

    logging.getLogger("kanowins.test").info("Stored win", extra={"win_id": "abc"})

    line = capsys.readouterr().out.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["message"] == "Stored win"
    assert record["severity"] == "INFO"
    assert record["logger"] == "kanowins.test"
    assert record["service"] == "kanowins"
    assert record["win_id"] == "abc"
