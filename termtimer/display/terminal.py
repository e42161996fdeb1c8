from __future__ import annotations

import sys
from typing import TextIO

# erase the whole line, then carriage return
CLEAR_LINE = "\x1b[2K\r"


class Terminal:
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout

    def repaint(self, text: str) -> None:
        self._stream.write(CLEAR_LINE + text)
        self._stream.flush()

    def finish(self, text: str) -> None:
        self._stream.write(CLEAR_LINE + text + "\n")
        self._stream.flush()
