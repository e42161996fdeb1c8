from __future__ import annotations

import logging

import orjson
import pytest

from termtimer.config import load_config
from termtimer.logging_config import JsonFormatter, configure_logging


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("TERMTIMER_LOG_JSON", raising=False)
    config = load_config()
    assert config.logging.level == "WARNING"
    assert config.logging.json is True


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("TERMTIMER_LOG_JSON", "off")
    config = load_config()
    assert config.logging.level == "DEBUG"
    assert config.logging.json is False


def test_invalid_level_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(ValueError, match="LOG_LEVEL"):
        load_config()


def test_json_formatter_includes_extras() -> None:
    record = logging.makeLogRecord(
        {"name": "termtimer.test", "levelname": "INFO", "msg": "Timer finished", "ticks": 4, "clock": object()}
    )
    payload = orjson.loads(JsonFormatter().format(record))
    assert payload["message"] == "Timer finished"
    assert payload["logger"] == "termtimer.test"
    assert payload["ticks"] == 4
    assert payload["clock"].startswith("<object")
    assert "args" not in payload


def test_configure_logging_replaces_root_handlers() -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        configure_logging("INFO", json=False)
        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert not isinstance(root.handlers[0].formatter, JsonFormatter)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_json_formatter_handles_awkward_extras() -> None:
    record = logging.makeLogRecord(
        {"name": "termtimer.test", "levelname": "DEBUG", "msg": "Parsed", "counts": {1: "a"}, "logger": "spoofed"}
    )
    payload = orjson.loads(JsonFormatter().format(record))
    assert payload["counts"] == {"1": "a"}
    assert payload["logger"] == "termtimer.test"
