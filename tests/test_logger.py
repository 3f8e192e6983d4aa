import io
import logging

import pytest
from purefn.logger.logger import resolve_level, setup_logger


def test_resolve_level_explicit():
    assert resolve_level("debug") == logging.DEBUG


def test_resolve_level_env_fallback(monkeypatch):
    monkeypatch.setenv("PUREFN_LOG_LEVEL", "ERROR")
    assert resolve_level() == logging.ERROR


def test_resolve_level_unknown():
    with pytest.raises(ValueError, match="Unknown log level"):
        resolve_level("chatty")


def test_setup_logger_configures_once():
    stream = io.StringIO()
    log = setup_logger("purefn.test_once", level="INFO", stream=stream)
    again = setup_logger("purefn.test_once", level="DEBUG")
    assert again is log
    assert len(log.handlers) == 1
    assert log.level == logging.INFO
    assert log.propagate is False

    log.info("hello")
    assert "purefn.test_once - INFO - hello" in stream.getvalue()


def test_resolve_level_falls_back_to_log_level(monkeypatch):
    monkeypatch.delenv("PUREFN_LOG_LEVEL", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "warning")
    assert resolve_level() == logging.WARNING


def test_resolve_level_prefers_project_variable(monkeypatch):
    monkeypatch.setenv("PUREFN_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    assert resolve_level() == logging.DEBUG


def test_resolve_level_defaults_to_info(monkeypatch):
    monkeypatch.delenv("PUREFN_LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    assert resolve_level() == logging.INFO
