"""Tests for xrbase.logging_config."""
import json
import logging

from xrbase.logging_config import JsonFormatter, get_logger, setup_logging, setup_logging_from_config


def test_setup_logging_console_only():
    logger = setup_logging("xrbase-test-console", log_level="debug")

    assert logger.level == logging.DEBUG
    assert logger.propagate is False
    assert len(logger.handlers) == 1


def test_setup_logging_is_idempotent():
    setup_logging("xrbase-test-idem")
    logger = setup_logging("xrbase-test-idem")

    assert len(logger.handlers) == 1


def test_setup_logging_writes_file(tmp_path):
    logger = setup_logging("xrbase-test-file", log_to_file=True, log_dir=tmp_path)

    logger.info("hello file")
    for handler in logger.handlers:
        handler.flush()

    log_file = tmp_path / "xrbase-test-file" / "xrbase-test-file.log"
    assert log_file.exists()
    content = log_file.read_text(encoding="utf-8")
    assert "hello file" in content
    assert "system" in content

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()


def test_json_formatter_adds_fields():
    formatter = JsonFormatter('%(asctime)s %(levelname)s %(name)s %(message)s')
    record = logging.LogRecord("xrbase.test", logging.WARNING, "mod.py", 12, "careful", None, None)

    payload = json.loads(formatter.format(record))

    assert payload["message"] == "careful"
    assert payload["level"] == "WARNING"
    assert payload["file"] == "mod.py:12"
    assert payload["request_id"] == "system"
    assert "@timestamp" in payload


def test_get_logger_with_request_id():
    adapter = get_logger("xrbase.test.adapter", request_id="req-1")

    assert isinstance(adapter, logging.LoggerAdapter)
    assert adapter.extra == {"request_id": "req-1"}
    assert get_logger("xrbase.test.plain") is logging.getLogger("xrbase.test.plain")


def test_setup_logging_from_config(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("LOG_TO_FILE", "false")
    monkeypatch.setenv("LOG_JSON", "true")

    logger = setup_logging_from_config("xrbase-test-config")

    assert logger.level == logging.WARNING
    assert isinstance(logger.handlers[0].formatter, JsonFormatter)
