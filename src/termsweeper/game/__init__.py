"""
Minesweeper game module.

Provides the core game logic: cells, the board, difficulty presets and
the engine that applies player commands.
"""
from .cell import Cell, CellState
from .board import Board, BoardConfig
from .difficulty import (
    Difficulty,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    PRESETS,
    get_difficulty,
    from_menu_choice,
)
from .engine import GameEngine, GameStatus

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "Difficulty",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "PRESETS",
    "get_difficulty",
    "from_menu_choice",
    "GameEngine",
    "GameStatus",
]
