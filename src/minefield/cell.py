"""
Cell module for the Minesweeper engine.

Represents individual cells on the game board with their location,
state (hidden/marked/revealed) and content (mine/number).
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Tuple


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible states of a cell."""

    HIDDEN = auto()
    MARKED = auto()
    REVEALED = auto()


# Observation values
OBS_HIDDEN = -1
OBS_MARKED = -2
OBS_MINE = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass(eq=False)
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Cells compare and hash by identity: a board owns exactly one Cell
    per coordinate, so sets of cells never hold duplicates.

    Attributes:
        row: Row index (0-based), fixed at creation.
        col: Column index (0-based), fixed at creation.
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        state: Current state (hidden, marked, or revealed).
    """

    row: int
    col: int
    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if the cell went from hidden to revealed, False if it
            was already revealed or is marked.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_mark(self) -> CellState:
        """
        Toggle the mark on this cell.

        Returns:
            The resulting state. A revealed cell is left untouched and
            REVEALED is returned.
        """
        if self.state == CellState.HIDDEN:
            self.state = CellState.MARKED
        elif self.state == CellState.MARKED:
            self.state = CellState.HIDDEN
        return self.state

    @property
    def position(self) -> Tuple[int, int]:
        """Get the (row, col) coordinates of this cell."""
        return self.row, self.col

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_marked(self) -> bool:
        """Check if cell is marked."""
        return self.state == CellState.MARKED

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    def to_observation(self) -> int:
        """
        Convert cell to an observation value.

        Returns:
            -1: Hidden cell
            -2: Marked cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.state == CellState.HIDDEN:
            return OBS_HIDDEN
        if self.state == CellState.MARKED:
            return OBS_MARKED
        if self.is_mine:
            return OBS_MINE
        return self.adjacent_mines

    def __repr__(self) -> str:
        content = "M" if self.is_mine else str(self.adjacent_mines)
        return f"Cell({self.row}, {self.col}, {content}, {self.state.name})"
