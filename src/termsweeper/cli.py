"""
Terminal Minesweeper - command line entry point.

Usage:
    termsweeper [--difficulty {beginner,intermediate,expert}]
                [--log-file PATH] [--log-level LEVEL]
"""
import argparse
import logging
import sys
from typing import List, Optional

from .config import AppConfig, configure_logging
from .game.difficulty import DIFFICULTIES, get_difficulty
from .scores.leaderboard import format_time
from .ui.app import run
from .ui.prompt import prompt_difficulty


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termsweeper",
        description="Minesweeper in the terminal",
    )
    parser.add_argument(
        "--difficulty",
        choices=list(DIFFICULTIES),
        default=None,
        help="Difficulty preset (prompted for when omitted)",
    )
    parser.add_argument(
        "--poll-interval", type=int, default=16,
        help="Input poll timeout in milliseconds",
    )
    parser.add_argument(
        "--max-time", type=int, default=999,
        help="Largest number of seconds shown on the timer",
    )
    parser.add_argument(
        "--log-file", default=None, help="Write logs to this file",
    )
    parser.add_argument(
        "--log-level", default="WARNING", help="Logging level",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, pick a difficulty and play."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = AppConfig.from_args(args)
    except ValueError as e:
        parser.error(str(e))
    configure_logging(config)

    try:
        if config.difficulty is not None:
            difficulty = get_difficulty(config.difficulty)
        else:
            difficulty = prompt_difficulty()
        session = run(config, difficulty)
    except (KeyboardInterrupt, EOFError):
        print("\nGame interrupted by user")
        return 0

    best = session.best_time
    if best is not None:
        print(f"Best {difficulty.label} time this session: {format_time(best)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
