from __future__ import annotations

import logging
from typing import Any

import orjson

PLAIN_FORMAT = "%(levelname)s:%(name)s:%(message)s"
TIME_FORMAT = "%Y-%m-%dT%H:%M:%S%z"

# attributes every LogRecord carries; anything else came in through ``extra``
_RECORD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {
        key: value
        for key, value in record.__dict__.items()
        if not key.startswith("_") and key not in _RECORD_ATTRS
    }


class JsonFormatter(logging.Formatter):
    """One orjson object per record; unserializable extras fall back to ``repr``."""

    def format(self, record: logging.LogRecord) -> str:
        payload = _extra_fields(record)
        payload.update(
            level=record.levelname,
            message=record.getMessage(),
            logger=record.name,
            time=self.formatTime(record, datefmt=TIME_FORMAT),
        )
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return orjson.dumps(payload, default=repr, option=orjson.OPT_NON_STR_KEYS).decode()


def configure_logging(level: str = "WARNING", *, json: bool = True) -> None:
    logging.captureWarnings(True)
    root = logging.getLogger()
    root.setLevel(level)
    # stdout belongs to the timer line
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter() if json else logging.Formatter(PLAIN_FORMAT))
    root.handlers.clear()
    root.addHandler(handler)
