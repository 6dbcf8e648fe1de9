"""
Command loop state for a terminal Minesweeper session.

A session holds the live game and the leaderboard for the lifetime of
the process. The presentation layer turns key presses into commands and
hands them to ``GameSession.dispatch`` one at a time.
"""
import logging
import random
import time
from enum import Enum, auto
from typing import Optional

from .game.difficulty import Difficulty
from .game.engine import Clock, GameEngine
from .scores.leaderboard import Leaderboard


logger = logging.getLogger(__name__)


class Command(Enum):
    """Discrete player commands."""

    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    REVEAL = auto()
    FLAG = auto()
    RESTART = auto()
    QUIT = auto()


class GameSession:
    """
    Owns the current engine and records victories.

    Attributes:
        difficulty: Preset chosen at startup.
        leaderboard: Best times, shared across restarts.
        engine: The game being played; replaced on restart.
    """

    def __init__(
        self,
        difficulty: Difficulty,
        leaderboard: Optional[Leaderboard] = None,
        clock: Clock = time.monotonic,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.difficulty = difficulty
        self.leaderboard = leaderboard if leaderboard is not None else Leaderboard()
        self.engine = GameEngine.new(difficulty.config, rng, clock)
        self.new_record = False
        self._recorded = False

    def dispatch(self, command: Command) -> bool:
        """
        Apply one command.

        Returns:
            False when the loop should stop, True otherwise.
        """
        if command is Command.QUIT:
            return False
        if command is Command.RESTART:
            self.restart()
            return True

        engine = self.engine
        if command is Command.MOVE_UP:
            engine.move_up()
        elif command is Command.MOVE_DOWN:
            engine.move_down()
        elif command is Command.MOVE_LEFT:
            engine.move_left()
        elif command is Command.MOVE_RIGHT:
            engine.move_right()
        elif command is Command.REVEAL:
            engine.reveal_at_cursor()
        elif command is Command.FLAG:
            engine.toggle_flag_at_cursor()

        self._record_victory()
        return True

    def restart(self) -> bool:
        """
        Start a new game with the same preset.

        Only honored once the current game has ended.
        """
        if not self.engine.is_terminal:
            return False
        self.engine = self.engine.restart()
        self.new_record = False
        self._recorded = False
        logger.info("Restarted %s game", self.difficulty.name)
        return True

    def _record_victory(self) -> None:
        if self.engine.victory and not self._recorded:
            self._recorded = True
            self.new_record = self.leaderboard.update(
                self.difficulty.name, self.engine.elapsed_time()
            )

    @property
    def best_time(self) -> Optional[float]:
        return self.leaderboard.best_time(self.difficulty.name)
