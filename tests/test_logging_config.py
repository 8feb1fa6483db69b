# =============================================================================
# tests/test_logging_config.py - Logging Setup Tests
# =============================================================================

import json
import logging
import sys

from app.logging_config import JsonFormatter, configure_logging, reset_logging


def _read_lines(path):
    if not path.exists():
        return []
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines() if line]


def _our_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, "_stub_server_handler", False)]


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_creates_log_directory(self, make_settings, tmp_path):
        settings = make_settings(LOG_DIR=str(tmp_path / "nested" / "logs"))

        configure_logging(settings)

        assert (tmp_path / "nested" / "logs").is_dir()

    def test_installs_three_handlers(self, make_settings):
        configure_logging(make_settings())

        assert len(_our_handlers()) == 3

    def test_reconfigure_replaces_handlers(self, make_settings):
        configure_logging(make_settings())
        configure_logging(make_settings())

        assert len(_our_handlers()) == 3

    def test_reset_leaves_foreign_handlers(self, make_settings):
        foreign = logging.NullHandler()
        root = logging.getLogger()
        root.addHandler(foreign)
        try:
            configure_logging(make_settings())
            reset_logging()

            assert foreign in root.handlers
            assert _our_handlers() == []
        finally:
            root.removeHandler(foreign)

    def test_root_level_follows_environment(self, make_settings):
        configure_logging(make_settings(NODE_ENV="production"))
        assert logging.getLogger().level == logging.INFO

        configure_logging(make_settings(NODE_ENV="development"))
        assert logging.getLogger().level == logging.DEBUG

    def test_error_file_only_gets_errors(self, make_settings):
        settings = make_settings()
        configure_logging(settings)
        logger = logging.getLogger("tests.logging")

        logger.info("just info")
        logger.error("something broke")

        errors = _read_lines(settings.error_log_path)
        combined = _read_lines(settings.combined_log_path)

        assert [e["message"] for e in errors] == ["something broke"]
        messages = [e["message"] for e in combined]
        assert "just info" in messages
        assert "something broke" in messages

    def test_request_payload_written_to_file(self, make_settings):
        settings = make_settings()
        configure_logging(settings)
        payload = {"method": "GET", "path": "/api/health", "statusCode": 200}

        logging.getLogger("tests.logging").info("request", extra={"request": payload})

        entries = [e for e in _read_lines(settings.combined_log_path) if "request" in e]
        assert entries[-1]["request"] == payload


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def _record(self, **kwargs):
        record = logging.LogRecord(
            name="tests",
            level=logging.ERROR,
            pathname=__file__,
            lineno=1,
            msg="failed %s",
            args=("hard",),
            exc_info=kwargs.pop("exc_info", None),
        )
        for key, value in kwargs.items():
            setattr(record, key, value)
        return record

    def test_basic_fields(self):
        entry = json.loads(JsonFormatter().format(self._record()))

        assert entry["message"] == "failed hard"
        assert entry["level"] == "error"
        assert entry["logger"] == "tests"
        assert entry["timestamp"].endswith("Z")
        assert "request" not in entry

    def test_includes_exception(self):
        try:
            raise ValueError("bad value")
        except ValueError:
            record = self._record(exc_info=sys.exc_info())

        entry = json.loads(JsonFormatter().format(record))

        assert "ValueError: bad value" in entry["exception"]
