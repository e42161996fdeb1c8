from __future__ import annotations

NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MILLI = 1_000_000

SECONDS_PER_DAY = 60 * 60 * 24
SECONDS_PER_HOUR = 60 * 60
SECONDS_PER_MINUTE = 60


def to_nanos(seconds: float) -> int:
    # rounded like a nanosecond duration, never negative
    return max(round(seconds * NANOS_PER_SECOND), 0)


def format_duration(seconds: float) -> str:
    nanos = to_nanos(seconds)
    remaining = nanos // NANOS_PER_SECOND
    milliseconds = (nanos // NANOS_PER_MILLI) % 1000

    days, remaining = divmod(remaining, SECONDS_PER_DAY)
    hours, remaining = divmod(remaining, SECONDS_PER_HOUR)
    minutes, secs = divmod(remaining, SECONDS_PER_MINUTE)

    parts: list[str] = []
    if days > 0:
        parts.append(f"{days}d")
    parts.append(f"{hours:02d}h {minutes:02d}m {secs:02d}s {milliseconds:03d}ms")
    return " ".join(parts)
