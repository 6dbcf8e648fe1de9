"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from termsweeper.game import Board, BoardConfig, Cell, GameEngine
from termsweeper.scores import Leaderboard


# ============================================================================
# Clock
# ============================================================================

class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board(rng: random.Random) -> Board:
    """Create a default 8x8 board with 10 mines."""
    return Board(BoardConfig(), rng)


@pytest.fixture
def corner_mine_board() -> Board:
    """3x3 board with a single mine at (2, 2)."""
    return Board.from_mine_positions(BoardConfig(3, 3, 1), [(2, 2)])


@pytest.fixture
def walled_board() -> Board:
    """
    5x5 board with a wall of mines in column 2.

    Columns 0-1 and 3-4 are separate regions.
    """
    mines = [(2, y) for y in range(5)]
    return Board.from_mine_positions(BoardConfig(5, 5, 5), mines)


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for flood-fill testing."""
    return Board(BoardConfig(5, 5, 0))


# ============================================================================
# Engine Fixtures
# ============================================================================

@pytest.fixture
def corner_engine(corner_mine_board: Board, clock: FakeClock) -> GameEngine:
    return GameEngine(corner_mine_board, clock)


@pytest.fixture
def walled_engine(walled_board: Board, clock: FakeClock) -> GameEngine:
    return GameEngine(walled_board, clock)


@pytest.fixture
def default_engine(default_board: Board, clock: FakeClock) -> GameEngine:
    return GameEngine(default_board, clock)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Leaderboard Fixtures
# ============================================================================

@pytest.fixture
def leaderboard() -> Leaderboard:
    return Leaderboard()
