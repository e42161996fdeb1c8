from __future__ import annotations

import math
import re
from typing import Iterable

NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)", re.ASCII)
DEFAULT_UNIT = "s"

UNIT_SECONDS: dict[str, float] = {
    "ms": 1 / 1000,
    "s": 1.0,
    "m": 60.0,
    "h": 60.0 * 60.0,
    "d": 60.0 * 60.0 * 24.0,
}


class DurationParseError(ValueError):
    message = "Invalid duration"

    def __init__(self, token: str) -> None:
        super().__init__(self.message)
        self.token = token


class InvalidNumberError(DurationParseError):
    message = "Invalid number format"


class InvalidUnitError(DurationParseError):
    message = "Invalid unit format"


def split_token(token: str) -> tuple[str, str]:
    """Split ``NUMBER[UNIT]`` at the first alphabetic character."""
    for index, char in enumerate(token):
        if char.isalpha():
            return token[:index], token[index:]
    return token, DEFAULT_UNIT


def parse_number(text: str) -> float:
    if not NUMBER_PATTERN.fullmatch(text):
        raise ValueError(f"Not a number: {text!r}")
    return float(text)


def parse_token(token: str) -> float:
    value, unit = split_token(token)
    try:
        number = parse_number(value)
    except ValueError:
        raise InvalidNumberError(token) from None
    multiplier = UNIT_SECONDS.get(unit)
    if multiplier is None:
        raise InvalidUnitError(token)
    seconds = number * multiplier
    if not math.isfinite(seconds):
        raise InvalidNumberError(token)
    return seconds


def parse_durations(tokens: Iterable[str]) -> float:
    """Sum duration tokens into total seconds.

    Tokens are processed in order and the first bad token aborts the whole
    parse. Negative tokens subtract; the sum never drops below zero. Values
    too large for a float are rejected as invalid numbers.
    """
    total = 0.0
    for token in tokens:
        total += parse_token(token)
        if not math.isfinite(total):
            raise InvalidNumberError(token)
    return max(total, 0.0)
