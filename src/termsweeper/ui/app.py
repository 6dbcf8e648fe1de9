"""
Curses front end: screen setup, the input loop and teardown.
"""
import curses
import logging

from ..config import AppConfig
from ..game.difficulty import Difficulty
from ..session import GameSession
from .controls import command_for_key
from .render import draw, init_colors


logger = logging.getLogger(__name__)


def play(stdscr, session: GameSession, config: AppConfig) -> None:
    """
    Run the command loop until the player quits.

    The input wait times out every ``poll_interval_ms`` so the timer keeps
    ticking on screen.
    """
    curses.curs_set(0)
    stdscr.keypad(True)
    stdscr.timeout(config.poll_interval_ms)
    if curses.has_colors():
        init_colors()

    while True:
        draw(stdscr, session, config)
        key = stdscr.getch()
        if key == -1:
            continue
        command = command_for_key(key)
        if command is None:
            continue
        if not session.dispatch(command):
            break


def run(config: AppConfig, difficulty: Difficulty) -> GameSession:
    """Open the terminal screen, play, and restore the terminal on exit."""
    session = GameSession(difficulty)
    logger.info("Starting %s game", difficulty.name)
    curses.wrapper(play, session, config)
    return session
