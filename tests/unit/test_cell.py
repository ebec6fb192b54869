"""
Unit tests for Cell class.

Tests cell state management, reveal/mark behavior, and observation conversion.
"""
import pytest
from minefield import Cell, CellState


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self) -> None:
        """New cell should not be a mine by default."""
        cell = Cell(2, 3)
        assert cell.is_mine is False

    def test_default_cell_is_hidden(self) -> None:
        """New cell should be hidden by default."""
        cell = Cell(2, 3)
        assert cell.state == CellState.HIDDEN
        assert cell.is_hidden is True

    def test_default_cell_has_zero_adjacent_mines(self) -> None:
        """New cell should have 0 adjacent mines by default."""
        cell = Cell(2, 3)
        assert cell.adjacent_mines == 0

    def test_cell_keeps_its_position(self) -> None:
        """Cell should report the coordinates it was created with."""
        cell = Cell(2, 3)
        assert (cell.row, cell.col) == (2, 3)
        assert cell.position == (2, 3)

    def test_cells_hash_by_identity(self) -> None:
        """Two cells at the same position are still distinct objects."""
        assert len({Cell(1, 1), Cell(1, 1)}) == 2


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_hidden_cell_returns_true(self, hidden_cell: Cell) -> None:
        """Revealing a hidden cell should succeed."""
        assert hidden_cell.reveal() is True
        assert hidden_cell.is_revealed is True

    def test_reveal_already_revealed_returns_false(
        self, hidden_cell: Cell
    ) -> None:
        """Revealing an already revealed cell should fail."""
        hidden_cell.reveal()
        assert hidden_cell.reveal() is False

    def test_reveal_marked_cell_returns_false(self, hidden_cell: Cell) -> None:
        """Cannot reveal a marked cell."""
        hidden_cell.toggle_mark()
        assert hidden_cell.reveal() is False
        assert hidden_cell.state == CellState.MARKED


# ============================================================================
# Cell Mark Tests
# ============================================================================

class TestCellMark:
    """Test cell marking behavior."""

    def test_mark_hidden_cell(self, hidden_cell: Cell) -> None:
        """Marking a hidden cell should return MARKED."""
        assert hidden_cell.toggle_mark() == CellState.MARKED
        assert hidden_cell.is_marked is True

    def test_unmark_returns_to_hidden(self, hidden_cell: Cell) -> None:
        """Marking twice should return the cell to hidden."""
        hidden_cell.toggle_mark()
        assert hidden_cell.toggle_mark() == CellState.HIDDEN
        assert hidden_cell.is_hidden is True

    def test_mark_revealed_cell_is_noop(self, hidden_cell: Cell) -> None:
        """Marking a revealed cell leaves it revealed."""
        hidden_cell.reveal()
        assert hidden_cell.toggle_mark() == CellState.REVEALED
        assert hidden_cell.is_revealed is True


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test cell observation values."""

    def test_hidden_cell_observation_is_negative_one(
        self, hidden_cell: Cell
    ) -> None:
        """Hidden cell should return -1 for observation."""
        assert hidden_cell.to_observation() == -1

    def test_marked_cell_observation_is_negative_two(
        self, hidden_cell: Cell
    ) -> None:
        """Marked cell should return -2 for observation."""
        hidden_cell.toggle_mark()
        assert hidden_cell.to_observation() == -2

    @pytest.mark.parametrize("count", range(0, 9))
    def test_revealed_cell_observation_matches_adjacent_count(
        self, count: int
    ) -> None:
        """Revealed cell returns its adjacent mine count."""
        cell = Cell(0, 0, adjacent_mines=count)
        cell.reveal()
        assert cell.to_observation() == count

    def test_revealed_mine_observation_is_nine(self, mine_cell: Cell) -> None:
        """Revealed mine should return 9 for observation."""
        mine_cell.reveal()
        assert mine_cell.to_observation() == 9
