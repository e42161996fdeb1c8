from __future__ import annotations

import logging
import signal

LOGGER = logging.getLogger(__name__)


def restore_default_signal_handlers() -> None:
    """Let SIGINT/SIGTERM terminate the process without a traceback or final repaint."""
    for name in ("SIGINT", "SIGTERM"):
        sig = getattr(signal, name, None)
        if sig is None:  # pragma: no cover - platform specific
            continue
        try:
            signal.signal(sig, signal.SIG_DFL)
        except ValueError:  # pragma: no cover - not the main thread
            LOGGER.debug("Cannot reset signal handler", extra={"signal": name})
