"""
Unit tests for Cell class.

Tests cell state management, reveal/flag behavior, and observation conversion.
"""
import pytest
from termsweeper.game import Cell, CellState


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self) -> None:
        """New cell should not be a mine by default."""
        cell = Cell()
        assert cell.is_mine is False

    def test_default_cell_is_hidden(self) -> None:
        """New cell should be hidden by default."""
        cell = Cell()
        assert cell.state == CellState.HIDDEN
        assert cell.is_hidden is True

    def test_default_cell_has_zero_neighbor_mines(self) -> None:
        """New cell should have 0 neighbor mines by default."""
        assert Cell().neighbor_mines == 0


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_hidden_cell(self, hidden_cell: Cell) -> None:
        """Revealing a hidden cell should succeed."""
        assert hidden_cell.reveal() is True
        assert hidden_cell.is_revealed is True

    def test_reveal_twice_fails(self, hidden_cell: Cell) -> None:
        """Second reveal should be rejected."""
        hidden_cell.reveal()
        assert hidden_cell.reveal() is False

    def test_reveal_flagged_cell_fails(self, hidden_cell: Cell) -> None:
        """Flagged cells must be unflagged before revealing."""
        hidden_cell.flag()
        assert hidden_cell.reveal() is False
        assert hidden_cell.is_flagged is True


# ============================================================================
# Cell Flag Tests
# ============================================================================

class TestCellFlag:
    """Test flag and unflag transitions."""

    def test_flag_hidden_cell(self, hidden_cell: Cell) -> None:
        assert hidden_cell.flag() is True
        assert hidden_cell.state == CellState.FLAGGED

    def test_unflag_returns_to_hidden(self, hidden_cell: Cell) -> None:
        hidden_cell.flag()
        assert hidden_cell.unflag() is True
        assert hidden_cell.is_hidden is True

    def test_flag_revealed_cell_fails(self, hidden_cell: Cell) -> None:
        hidden_cell.reveal()
        assert hidden_cell.flag() is False
        assert hidden_cell.is_revealed is True

    def test_unflag_hidden_cell_fails(self, hidden_cell: Cell) -> None:
        assert hidden_cell.unflag() is False


# ============================================================================
# Observation Tests
# ============================================================================

class TestCellObservation:
    """Test conversion to renderer codes."""

    def test_hidden_is_minus_one(self, hidden_cell: Cell) -> None:
        assert hidden_cell.to_observation() == -1

    def test_flagged_is_minus_two(self, mine_cell: Cell) -> None:
        mine_cell.flag()
        assert mine_cell.to_observation() == -2

    @pytest.mark.parametrize("count", [0, 1, 5, 8])
    def test_revealed_shows_count(self, count: int) -> None:
        cell = Cell(neighbor_mines=count)
        cell.reveal()
        assert cell.to_observation() == count

    def test_revealed_mine_is_nine(self, mine_cell: Cell) -> None:
        mine_cell.reveal()
        assert mine_cell.to_observation() == 9
