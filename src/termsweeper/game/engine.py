"""
Game engine for the terminal Minesweeper game.

Wraps a Board with the per-game session state: cursor, terminal flags,
timestamps and the flag budget. Every command from the presentation
layer maps onto one method here.
"""
import logging
import random
import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, List, Optional

import numpy as np

from .board import Board, BoardConfig, Position
from .cell import Cell


logger = logging.getLogger(__name__)

Clock = Callable[[], float]


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of a game."""

    READY = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# Engine
# ============================================================================

@dataclass
class GameEngine:
    """
    One game of Minesweeper.

    The engine is created per game and thrown away on restart; use
    ``restart()`` to get a fresh engine for the same board size.

    Attributes:
        board: The grid being played.
        clock: Monotonic time source, in seconds.
    """

    board: Board
    clock: Clock = field(default=time.monotonic, repr=False)
    _cursor_x: int = 0
    _cursor_y: int = 0
    _game_over: bool = False
    _victory: bool = False
    _start_time: Optional[float] = None
    _end_time: Optional[float] = None
    _flags_placed: int = 0
    _exploded: Optional[Position] = None

    @classmethod
    def new(
        cls,
        config: BoardConfig,
        rng: Optional[random.Random] = None,
        clock: Clock = time.monotonic,
    ) -> "GameEngine":
        """Create an engine with a freshly generated board."""
        board = Board(config, rng if rng is not None else random.Random())
        return cls(board, clock)

    def restart(self) -> "GameEngine":
        """Return a fresh engine with the same configuration, rng and clock."""
        return GameEngine.new(self.board.config, self.board.rng, self.clock)

    # ========================================================================
    # Game Actions
    # ========================================================================

    def reveal(self, x: int, y: int) -> bool:
        """
        Reveal the cell at ``(x, y)``.

        A mine ends the game and leaves every other cell untouched. A cell
        with no neighboring mines opens its whole zero region plus the
        numbered border around it.

        Returns:
            True if the board changed, False if the command had no effect.

        Raises:
            IndexError: If the position is outside the board.
        """
        cell = self.board.get_cell(x, y)
        if self.is_terminal:
            return False
        self._start_clock()

        if not cell.is_hidden:
            return False

        if cell.is_mine:
            self._exploded = (x, y)
            self._game_over = True
            self._stop_clock()
            logger.info("Mine hit at (%d, %d) after %.1fs", x, y, self.elapsed_time())
            return True

        self._flood_reveal(x, y)
        self.check_victory()
        return True

    def reveal_at_cursor(self) -> bool:
        """Reveal the cell under the cursor."""
        return self.reveal(self._cursor_x, self._cursor_y)

    def _flood_reveal(self, x: int, y: int) -> None:
        """Reveal from a safe cell, opening zero regions with a worklist."""
        stack: List[Position] = [(x, y)]
        while stack:
            cx, cy = stack.pop()
            cell = self.board.get_cell(cx, cy)
            if not cell.reveal():
                continue
            if cell.neighbor_mines == 0:
                for nx, ny in self.board.neighbors(cx, cy):
                    if self.board.get_cell(nx, ny).is_hidden:
                        stack.append((nx, ny))

    def toggle_flag(self, x: int, y: int) -> bool:
        """
        Flag or unflag the cell at ``(x, y)``.

        A hidden cell is flagged only while flags remain; revealed cells
        are left alone.

        Returns:
            True if the flag was toggled.

        Raises:
            IndexError: If the position is outside the board.
        """
        cell = self.board.get_cell(x, y)
        if self.is_terminal:
            return False
        self._start_clock()

        if cell.is_hidden and self._flags_placed < self.board.num_mines:
            cell.flag()
            self._flags_placed += 1
            return True
        if cell.is_flagged:
            cell.unflag()
            self._flags_placed -= 1
            return True
        return False

    def toggle_flag_at_cursor(self) -> bool:
        """Toggle the flag under the cursor."""
        return self.toggle_flag(self._cursor_x, self._cursor_y)

    def check_victory(self) -> bool:
        """
        Check whether every safe cell has been revealed.

        Flags play no part; the whole board is rescanned each time.
        """
        if self._game_over:
            return False
        if self.board.count_revealed_safe() != self.board.config.safe_cells:
            return False
        if not self._victory:
            self._victory = True
            self._stop_clock()
            logger.info("Board cleared in %.1fs", self.elapsed_time())
        return True

    # ========================================================================
    # Cursor Movement
    # ========================================================================

    def move_up(self) -> bool:
        return self._move(0, -1)

    def move_down(self) -> bool:
        return self._move(0, 1)

    def move_left(self) -> bool:
        return self._move(-1, 0)

    def move_right(self) -> bool:
        return self._move(1, 0)

    def _move(self, dx: int, dy: int) -> bool:
        if self.is_terminal:
            return False
        nx, ny = self._cursor_x + dx, self._cursor_y + dy
        if not self.board.is_valid_position(nx, ny):
            return False
        self._cursor_x, self._cursor_y = nx, ny
        return True

    # ========================================================================
    # Timing
    # ========================================================================

    def _start_clock(self) -> None:
        if self._start_time is None:
            self._start_time = self.clock()

    def _stop_clock(self) -> None:
        if self._end_time is None:
            self._end_time = self.clock()

    def elapsed_time(self) -> float:
        """
        Seconds since the first interaction.

        0 before the game starts, live while it runs, and frozen once the
        game has ended.
        """
        if self._start_time is None:
            return 0.0
        if self._end_time is None:
            return self.clock() - self._start_time
        return self._end_time - self._start_time

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def cursor(self) -> Position:
        """Current cursor position as ``(x, y)``."""
        return self._cursor_x, self._cursor_y

    @property
    def game_over(self) -> bool:
        return self._game_over

    @property
    def victory(self) -> bool:
        return self._victory

    @property
    def is_terminal(self) -> bool:
        """True once the game is lost or won."""
        return self._game_over or self._victory

    @property
    def status(self) -> GameStatus:
        if self._game_over:
            return GameStatus.LOST
        if self._victory:
            return GameStatus.WON
        if self._start_time is None:
            return GameStatus.READY
        return GameStatus.PLAYING

    @property
    def start_time(self) -> Optional[float]:
        return self._start_time

    @property
    def end_time(self) -> Optional[float]:
        return self._end_time

    @property
    def flags_placed(self) -> int:
        return self._flags_placed

    @property
    def flags_remaining(self) -> int:
        """Flag budget left: mines minus flags placed."""
        return self.board.num_mines - self._flags_placed

    @property
    def mines(self) -> int:
        return self.board.num_mines

    @property
    def width(self) -> int:
        return self.board.width

    @property
    def height(self) -> int:
        return self.board.height

    @property
    def exploded(self) -> Optional[Position]:
        """Position of the mine that ended the game, if any."""
        return self._exploded

    def get_cell(self, x: int, y: int) -> Cell:
        return self.board.get_cell(x, y)

    def get_observation(self) -> np.ndarray:
        """Board observation with the exploded mine shown, if any."""
        return self.board.get_observation(self._exploded)
