"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Board, BoardConfig, Cell


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a seeded default 9x9 board with 10 mines."""
    return Board(BoardConfig(9, 9, 10, seed=1234))


@pytest.fixture
def small_board() -> Board:
    """
    A 3x3 board with one mine in the corner.

          M 1 0
          1 1 0
          0 0 0
    """
    return Board.from_mines(3, 3, [(0, 0)])


@pytest.fixture
def bordered_board() -> Board:
    """
    An 8x8 board whose zero region spans both sides of the grid.

        (0,0)        columns
          +----------------->
          |  0 0 1 M 2 M 2 1
          |  0 0 2 2 3 3 M 2
          |  0 0 1 M 1 2 M 2
        r |  0 0 1 1 1 1 1 1
        o |  1 1 0 0 0 0 0 0
        w |  M 3 1 0 1 1 1 0
        s |  M M 1 0 1 M 2 1
          v  2 2 1 0 1 1 2 M
    """
    return Board.from_mines(8, 8, [
        (0, 3), (0, 5), (1, 6), (2, 3), (2, 6),
        (5, 0), (6, 0), (6, 1), (6, 5), (7, 7),
    ])


@pytest.fixture
def column_board() -> Board:
    """
    An 8x8 board with an empty column down the middle.

        (0,0)        columns
          +----------------->
          |  0 1 M 1 0 1 2 2
          |  1 2 1 1 0 1 M M
          |  M 2 1 1 0 1 3 M
        r |  1 2 M 1 0 0 1 1
        o |  0 2 2 3 1 1 0 0
        w |  1 2 M 2 M 1 0 0
        s |  M 2 1 2 2 2 1 0
          v  1 1 0 0 1 M 1 0
    """
    return Board.from_mines(8, 8, [
        (0, 2), (1, 6), (1, 7), (2, 0), (2, 7),
        (3, 2), (5, 2), (5, 4), (6, 0), (7, 5),
    ])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell(0, 0)


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(0, 0, is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
