from __future__ import annotations

import logging
import math
import time
from typing import Callable

from ..util.timeformat import format_duration
from .terminal import Terminal

LOGGER = logging.getLogger(__name__)

TICK_SECONDS = 0.01
SEPARATOR = " | "


class DisplayLoop:
    """Repaint elapsed and/or remaining time every tick until ``total`` has passed."""

    def __init__(
        self,
        *,
        total: float,
        ascending: bool = False,
        descending: bool = False,
        terminal: Terminal | None = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if not math.isfinite(total) or total < 0:
            raise ValueError("total must be a finite, non-negative number of seconds")
        self._total = total
        self._ascending = ascending
        self._descending = descending
        self._terminal = terminal if terminal is not None else Terminal()
        self._clock = clock
        self._sleep = sleep

    @property
    def total(self) -> float:
        return self._total

    def render(self, elapsed: float) -> str:
        parts: list[str] = []
        if self._ascending:
            parts.append(format_duration(elapsed))
        if self._descending:
            parts.append(format_duration(self._total - elapsed))
        return SEPARATOR.join(parts)

    def run(self) -> int:
        start = self._clock()
        ticks = 0
        LOGGER.debug(
            "Timer started",
            extra={"total": self._total, "ascending": self._ascending, "descending": self._descending},
        )
        while True:
            elapsed = self._clock() - start
            if elapsed >= self._total:
                break
            self._terminal.repaint(self.render(elapsed))
            ticks += 1
            self._sleep(TICK_SECONDS)

        self._terminal.finish(format_duration(self._total))
        LOGGER.debug("Timer finished", extra={"total": self._total, "ticks": ticks})
        return ticks
