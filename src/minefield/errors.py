"""
Error types raised by the Minesweeper engine.

Argument errors also derive from the matching builtin so callers can
catch them as ValueError / IndexError.
"""


class BoardError(Exception):
    """Base class for all board errors."""


class InvalidDimensions(BoardError, ValueError):
    """Rows or columns are too small for a board."""


class InvalidMineCount(BoardError, ValueError):
    """Mine count is not positive, leaves no safe cell, or repeats a cell."""


class OutOfBounds(BoardError, IndexError):
    """A (row, col) coordinate lies outside the grid."""

    def __init__(self, row: int, col: int, rows: int, columns: int) -> None:
        super().__init__(
            f"Position ({row}, {col}) out of bounds for {rows}x{columns} board"
        )
        self.row = row
        self.col = col


class CorruptedBoardError(BoardError, AssertionError):
    """Internal bookkeeping went wrong. Never raised for bad input."""
