#!/usr/bin/env python3
"""
VirtualPets - Main Entry Point

Run:
  python -m vpets

Menu:
  1 feed     2 play     3 speak     4 choose pet     5 exit
  Ctrl-D quits at any prompt.
"""

import argparse
import curses
import locale
import logging
import random
import sys

from .game import SessionController
from .ui import CursesConsole, StreamConsole
from .utils import EXIT_COUNTDOWN_S, TICK_INTERVAL_S

logger = logging.getLogger(__name__)


def setup_logging(log_file: str, level: str) -> None:
    """Log to a file only; the terminal belongs to the game."""
    if not log_file:
        return
    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(threadName)s %(name)s: %(message)s",
    )


def main() -> int:
    """
    Main entry point with argument parsing.

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(description="Keep two virtual pets alive in the terminal.")
    parser.add_argument("--plain", action="store_true", help="line-based console instead of the curses screen")
    parser.add_argument(
        "--interval", type=float, default=TICK_INTERVAL_S, help=f"seconds between decay ticks (default: {TICK_INTERVAL_S})"
    )
    parser.add_argument(
        "--countdown", type=int, default=EXIT_COUNTDOWN_S, help=f"exit countdown in seconds (default: {EXIT_COUNTDOWN_S})"
    )
    parser.add_argument("--seed", type=int, default=None, help="seed the random number generator")
    parser.add_argument("--log-file", default="", help="write a debug log to this file")
    parser.add_argument("--log-level", default="INFO", help="log level for --log-file (default: INFO)")
    args = parser.parse_args()

    setup_logging(args.log_file, args.log_level)
    interval = max(0.1, float(args.interval))
    countdown = max(0, int(args.countdown))
    rng = random.Random(args.seed)
    logger.info("Starting (interval=%.2fs, seed=%s)", interval, args.seed)

    def play(console) -> int:
        return SessionController(console, rng=rng, interval=interval, countdown=countdown).run()

    try:
        if args.plain or not sys.stdin.isatty():
            return play(StreamConsole())

        # Wide characters in names need the user's locale before curses starts
        try:
            locale.setlocale(locale.LC_ALL, "")
        except locale.Error:
            logger.warning("Could not set the locale, keeping the default")

        def play_curses(stdscr: "curses._CursesWindow") -> int:
            console = CursesConsole(stdscr)
            console.init_curses()
            return play(console)

        return curses.wrapper(play_curses)
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 0


if __name__ == "__main__":
    sys.exit(main())
