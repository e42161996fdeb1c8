from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from .config import load_config
from .display.loop import DisplayLoop
from .display.terminal import Terminal
from .logging_config import configure_logging
from .util.signals import restore_default_signal_handlers
from .util.timeparse import DurationParseError, parse_durations

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termtimer",
        description="A timer program that supports both ascending and descending formats.",
        epilog="Units: ms, s, m, h, d (default s). Several durations are added together.",
    )
    parser.add_argument(
        "-a",
        "--ascending",
        action="store_true",
        help="Print the time in ascending format",
    )
    parser.add_argument(
        "-d",
        "--descending",
        action="store_true",
        help="Print the time in descending format",
    )
    parser.add_argument(
        "times",
        nargs="+",
        metavar="NUMBER[UNIT]",
        help="Timer durations in the format NUMBER[UNIT] (e.g., 10s, 5m)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config()
    configure_logging(config.logging.level, json=config.logging.json)

    try:
        total = parse_durations(args.times)
    except DurationParseError as exc:
        LOGGER.debug("Rejected duration token", extra={"token": exc.token, "reason": exc.message})
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1
    LOGGER.info("Parsed durations", extra={"tokens": list(args.times), "total": total})

    loop = DisplayLoop(
        total=total,
        ascending=args.ascending,
        descending=args.descending,
        terminal=Terminal(sys.stdout),
    )
    try:
        loop.run()
    except OSError as exc:
        LOGGER.exception("Failed to write timer output")
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def run() -> None:
    restore_default_signal_handlers()
    sys.exit(main())


if __name__ == "__main__":
    run()
