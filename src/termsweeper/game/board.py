"""
Board module for the terminal Minesweeper game.

Owns the grid of cells, the mine layout and the derived neighbor counts.
Session concerns (cursor, timing, flag budget) live in the engine.
"""
import logging
import random
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell, OBS_MINE


logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 8
    height: int = 8
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.width * self.height - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        """Number of cells on the grid."""
        return self.width * self.height

    @property
    def safe_cells(self) -> int:
        """Number of cells without a mine."""
        return self.total_cells - self.num_mines


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper grid with mines placed at construction time.

    Cells are addressed as ``(x, y)`` where ``x`` is the column and
    ``y`` the row.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: random.Random = field(default_factory=random.Random, repr=False)
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Build the grid, place mines and count neighbors."""
        self._init_grid()
        self._place_mines()
        self._calculate_neighbor_mines()
        logger.debug(
            "Created %dx%d board with %d mines",
            self.config.width, self.config.height, self.config.num_mines,
        )

    @classmethod
    def from_mine_positions(
        cls, config: BoardConfig, positions: Iterable[Position]
    ) -> "Board":
        """
        Build a board with mines at fixed positions.

        Args:
            config: Board dimensions; ``num_mines`` must match the number
                of distinct positions.
            positions: ``(x, y)`` coordinates of the mines.

        Raises:
            ValueError: If the positions do not match ``config.num_mines``.
            IndexError: If a position lies outside the grid.
        """
        mines = set(positions)
        if len(mines) != config.num_mines:
            raise ValueError(
                f"Expected {config.num_mines} mine positions, got {len(mines)}"
            )
        board = cls.__new__(cls)
        board.config = config
        board.rng = random.Random()
        board._init_grid()
        for x, y in mines:
            board._require_position(x, y)
            board._grid[y][x].is_mine = True
        board._calculate_neighbor_mines()
        return board

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell() for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]

    def _place_mines(self) -> None:
        """Place mines by rejection sampling until the count is reached."""
        placed = 0
        while placed < self.config.num_mines:
            x = self.rng.randrange(self.config.width)
            y = self.rng.randrange(self.config.height)
            cell = self._grid[y][x]
            if not cell.is_mine:
                cell.is_mine = True
                placed += 1

    def _calculate_neighbor_mines(self) -> None:
        """Calculate neighbor mine counts for all non-mine cells."""
        for y in range(self.config.height):
            for x in range(self.config.width):
                cell = self._grid[y][x]
                if not cell.is_mine:
                    cell.neighbor_mines = self._count_neighbor_mines(x, y)

    def _count_neighbor_mines(self, x: int, y: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for nx, ny in self.neighbors(x, y):
            if self._grid[ny][nx].is_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities
    # ========================================================================

    def neighbors(self, x: int, y: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            x: Column of center cell.
            y: Row of center cell.

        Returns:
            List of ``(x, y)`` tuples clipped to the grid, no wraparound.
        """
        result = []
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                nx, ny = x + dx, y + dy
                if self.is_valid_position(nx, ny):
                    result.append((nx, ny))
        return result

    def is_valid_position(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.config.width and 0 <= y < self.config.height

    def _require_position(self, x: int, y: int) -> None:
        if not self.is_valid_position(x, y):
            raise IndexError(
                f"Position ({x}, {y}) outside "
                f"{self.config.width}x{self.config.height} board"
            )

    # ========================================================================
    # Accessors
    # ========================================================================

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def num_mines(self) -> int:
        return self.config.num_mines

    def get_cell(self, x: int, y: int) -> Cell:
        """
        Get cell at position.

        Raises:
            IndexError: If the position is outside the grid.
        """
        self._require_position(x, y)
        return self._grid[y][x]

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Iterate over ``(x, y, cell)`` in row-major order."""
        for y, row in enumerate(self._grid):
            for x, cell in enumerate(row):
                yield x, y, cell

    def mine_positions(self) -> List[Position]:
        """Positions of every mine on the board."""
        return [(x, y) for x, y, cell in self.cells() if cell.is_mine]

    def count_revealed_safe(self) -> int:
        """Count revealed cells that are not mines (full rescan)."""
        return sum(
            1 for _, _, cell in self.cells()
            if cell.is_revealed and not cell.is_mine
        )

    def get_observation(self, exploded: Optional[Position] = None) -> np.ndarray:
        """
        Get board state as a numpy array for the renderer.

        Args:
            exploded: Mine position to show as a revealed mine.

        Returns:
            2D int8 array of shape ``(height, width)`` where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with neighbor count
                9 = revealed mine
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for x, y, cell in self.cells():
            obs[y, x] = cell.to_observation()
        if exploded is not None:
            x, y = exploded
            obs[y, x] = OBS_MINE
        return obs
