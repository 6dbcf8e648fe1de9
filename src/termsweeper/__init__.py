"""
Terminal Minesweeper.

Core game logic lives in ``termsweeper.game``; the curses front end in
``termsweeper.ui``.
"""
import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
