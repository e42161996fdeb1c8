from __future__ import annotations

from dataclasses import dataclass, field
import logging
import os

from dotenv import load_dotenv

load_dotenv()


def _get_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_level(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Invalid log level for {name}: {value}")
    return level


@dataclass(slots=True)
class LoggingConfig:
    level: str = "WARNING"
    json: bool = True


@dataclass(slots=True)
class AppConfig:
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config() -> AppConfig:
    # below WARNING by default so log lines never interleave with the timer line
    return AppConfig(
        logging=LoggingConfig(
            level=_get_level("LOG_LEVEL", "WARNING"),
            json=_get_bool("TERMTIMER_LOG_JSON", True),
        ),
    )
