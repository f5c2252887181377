"""Tests for logging configuration."""

import json
import logging

from cfwatch.logging_config import JSONFormatter, get_logger, setup_logging


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_format_record(self):
        """Test that a record is rendered as one JSON object."""
        record = logging.LogRecord(
            name="cfwatch.dispatch",
            level=logging.WARNING,
            pathname=__file__,
            lineno=10,
            msg="Failed to handle message on %s",
            args=("dea.stop",),
            exc_info=None,
        )
        data = json.loads(JSONFormatter().format(record))

        assert data["level"] == "WARNING"
        assert data["logger"] == "cfwatch.dispatch"
        assert data["message"] == "Failed to handle message on dea.stop"

    def test_format_exception(self):
        """Test that exception info is included."""
        try:
            raise RuntimeError("hell")
        except RuntimeError:
            import sys

            exc_info = sys.exc_info()

        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom", (), exc_info)
        data = json.loads(JSONFormatter().format(record))
        assert "RuntimeError: hell" in data["exception"]

    def test_context(self):
        """Test that extra context is carried through."""
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", (), None)
        record.context = {"subject": "dea.stop"}
        data = json.loads(JSONFormatter().format(record))
        assert data["context"] == {"subject": "dea.stop"}


def test_get_logger():
    """Test that get_logger returns a named logger."""
    assert get_logger("cfwatch.test").name == "cfwatch.test"


def test_setup_logging_writes_json_file(tmp_path):
    """Test that setup_logging logs JSON lines to the given file."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    log_file = tmp_path / "logs" / "cfwatch.log"

    try:
        setup_logging("DEBUG", str(log_file))
        get_logger("cfwatch.test").info("watching %s", "myapp")
    finally:
        for handler in root.handlers:
            if handler not in saved_handlers:
                handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)

    entry = json.loads(log_file.read_text().splitlines()[-1])
    assert entry["message"] == "watching myapp"
    assert entry["level"] == "INFO"


def test_setup_logging_defaults_to_working_directory(monkeypatch, tmp_path):
    """Test that without LOG_FILE the log goes under the current directory."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LOG_FILE", raising=False)
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level

    try:
        setup_logging("INFO")
        get_logger("cfwatch.test").info("watching %s", "myapp")
    finally:
        for handler in root.handlers:
            if handler not in saved_handlers:
                handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)

    log_file = tmp_path / "04_logs" / "cfwatch.log"
    assert json.loads(log_file.read_text().splitlines()[-1])["message"] == "watching myapp"
