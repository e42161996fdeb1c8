"""termtimer - terminal countdown / count-up timer."""

from .display.loop import DisplayLoop
from .util.timeformat import format_duration
from .util.timeparse import (
    DurationParseError,
    InvalidNumberError,
    InvalidUnitError,
    parse_durations,
)

__all__ = [
    "DisplayLoop",
    "DurationParseError",
    "InvalidNumberError",
    "InvalidUnitError",
    "format_duration",
    "parse_durations",
]
