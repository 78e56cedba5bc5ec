"""
Tests for logger setup
"""

import logging

from enom_client.utils import logger as logger_module
from enom_client.utils.logger import get_logger, setup_logger


def test_console_logger_is_configured_once():
    first = setup_logger("enom-test-console", level="INFO")
    second = setup_logger("enom-test-console", level="DEBUG")

    assert first is second
    assert len(second.handlers) == 1
    assert second.level == logging.DEBUG
    assert second.handlers[0].level == logging.DEBUG


def test_file_logging(tmp_path, monkeypatch):
    monkeypatch.setattr(logger_module, "LOGS_DIR", tmp_path / "logs")

    log = get_logger("enom-test-file", log_file="enom_{date}.log")
    log.info("raw response")
    for handler in log.handlers:
        handler.flush()

    files = list((tmp_path / "logs").glob("enom_*.log"))
    assert len(files) == 1
    assert "{date}" not in files[0].name
    assert "raw response" in files[0].read_text(encoding="utf-8")

    for handler in list(log.handlers):
        handler.close()
        log.removeHandler(handler)


def test_child_record_is_written_once(capsys):
    setup_logger("enom-test-parent")
    child = setup_logger("enom-test-parent.child")

    child.error("Availability check failed")

    out = capsys.readouterr().out
    assert out.count("Availability check failed") == 1
    assert child.propagate is False
