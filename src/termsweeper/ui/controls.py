"""Key bindings for the curses front end."""
import curses
from typing import Dict, Optional

from ..session import Command


KEY_BINDINGS: Dict[int, Command] = {
    curses.KEY_UP: Command.MOVE_UP,
    curses.KEY_DOWN: Command.MOVE_DOWN,
    curses.KEY_LEFT: Command.MOVE_LEFT,
    curses.KEY_RIGHT: Command.MOVE_RIGHT,
    ord("k"): Command.MOVE_UP,
    ord("j"): Command.MOVE_DOWN,
    ord("h"): Command.MOVE_LEFT,
    ord("l"): Command.MOVE_RIGHT,
    ord(" "): Command.REVEAL,
    ord("f"): Command.FLAG,
    ord("F"): Command.FLAG,
    ord("r"): Command.RESTART,
    ord("R"): Command.RESTART,
    ord("q"): Command.QUIT,
    ord("Q"): Command.QUIT,
}

HELP_TEXT = "Arrows/hjkl: move  Space: reveal  F: flag  Q: quit"
END_HELP_TEXT = "Press R to play again, Q to quit"


def command_for_key(key: int) -> Optional[Command]:
    """Map a curses key code to a command, or None if unbound."""
    return KEY_BINDINGS.get(key)
