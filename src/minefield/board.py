"""
Board module for the Minesweeper engine.

Implements the game board with mine placement, cascading reveals,
chording, marking and win/lose detection.
"""
import logging
import random
from collections import deque
from dataclasses import InitVar, dataclass, field
from enum import Enum, auto
from typing import Iterable, Iterator, List, Optional, Set, Tuple

import numpy as np

from .cell import Cell, CellState
from .errors import (
    CorruptedBoardError,
    InvalidDimensions,
    InvalidMineCount,
    OutOfBounds,
)

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

# Rows and columns must both be strictly greater than this
MIN_SIDE = 2


class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        columns: Number of columns.
        num_mines: Total mines to place.
        seed: Seed for the board's random source (None for entropy).
    """

    rows: int = 9
    columns: int = 9
    num_mines: int = 10
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows <= MIN_SIDE or self.columns <= MIN_SIDE:
            raise InvalidDimensions(
                f"Rows and columns must be greater than {MIN_SIDE}, "
                f"got {self.rows}x{self.columns}"
            )
        if self.num_mines <= 0:
            raise InvalidMineCount(
                f"Number of mines must be positive, got {self.num_mines}"
            )
        max_mines = self.total_cells - 1
        if self.num_mines > max_mines:
            raise InvalidMineCount(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.rows * self.columns

    @property
    def safe_cells(self) -> int:
        return self.total_cells - self.num_mines


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Manages the grid of cells, mine placement, revealing logic,
    and win/lose conditions. Mines are placed at construction time,
    either at random or at the given ``mine_positions``.

    The board is not thread-safe; callers serialize ``reveal`` and
    ``mark``.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: Optional[random.Random] = field(default=None, repr=False)
    mine_positions: InitVar[Optional[Iterable[Position]]] = None
    _grid: List[List[Cell]] = field(default_factory=list, init=False, repr=False)
    _hidden_safe_count: int = field(default=0, init=False)
    _exploded: bool = field(default=False, init=False)

    def __post_init__(
        self, mine_positions: Optional[Iterable[Position]]
    ) -> None:
        """Build the grid and place the mines."""
        if self.rng is None:
            self.rng = random.Random(self.config.seed)
        self._init_grid()
        self._hidden_safe_count = self.config.safe_cells
        if mine_positions is None:
            self._place_random_mines()
        else:
            self._place_given_mines(mine_positions)

    @classmethod
    def from_mines(
        cls, rows: int, columns: int, mines: Iterable[Position]
    ) -> "Board":
        """
        Create a board with mines at fixed positions.

        Args:
            rows: Number of rows.
            columns: Number of columns.
            mines: (row, col) positions of every mine.

        Returns:
            A new board, ready to play.
        """
        positions = list(mines)
        config = BoardConfig(rows, columns, len(positions))
        return cls(config, mine_positions=positions)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create grid of hidden, mine-free cells."""
        self._grid = [
            [Cell(row, col) for col in range(self.config.columns)]
            for row in range(self.config.rows)
        ]

    def _place_random_mines(self) -> None:
        """Place mines by sampling positions until enough are distinct."""
        placed = 0
        while placed < self.config.num_mines:
            row = self.rng.randrange(self.config.rows)
            col = self.rng.randrange(self.config.columns)
            if not self._grid[row][col].is_mine:
                self._place_mine(row, col)
                placed += 1
        logger.debug(
            "Placed %d mines on %dx%d board",
            placed, self.config.rows, self.config.columns,
        )

    def _place_given_mines(self, positions: Iterable[Position]) -> None:
        """Place mines at explicit positions."""
        positions = list(positions)
        if len(positions) != self.config.num_mines:
            raise InvalidMineCount(
                f"Expected {self.config.num_mines} mine positions, "
                f"got {len(positions)}"
            )
        for row, col in positions:
            self._validate_position(row, col)
            if self._grid[row][col].is_mine:
                raise InvalidMineCount(f"Duplicate mine at ({row}, {col})")
            self._place_mine(row, col)

    def _place_mine(self, row: int, col: int) -> None:
        """Turn a cell into a mine and bump its neighbors' counts."""
        mine = self._grid[row][col]
        mine.is_mine = True
        for neighbor in self._neighbor_cells(mine):
            if not neighbor.is_mine:
                neighbor.adjacent_mines += 1

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for valid neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self._is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def _neighbor_cells(self, cell: Cell) -> Iterator[Cell]:
        for row, col in self._get_neighbors(cell.row, cell.col):
            yield self._grid[row][col]

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.rows and 0 <= col < self.config.columns

    def _validate_position(self, row: int, col: int) -> None:
        if not self._is_valid_position(row, col):
            raise OutOfBounds(row, col, self.config.rows, self.config.columns)

    def neighbors(self, row: int, col: int) -> List[Cell]:
        """
        Get the cells around a position.

        A corner has 3 neighbors, an edge 5, and an interior cell 8.

        Raises:
            OutOfBounds: If the position is outside the grid.
        """
        self._validate_position(row, col)
        return list(self._neighbor_cells(self._grid[row][col]))

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def mark(self, row: int, col: int) -> CellState:
        """
        Toggle the mark on a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            The cell's resulting state: MARKED or HIDDEN after a toggle,
            REVEALED if the cell was already revealed.

        Raises:
            OutOfBounds: If the position is outside the grid.
        """
        cell = self.cell_at(row, col)
        if not self.is_playing:
            logger.debug("Ignoring mark at (%d, %d): game is over", row, col)
            return cell.state
        return cell.toggle_mark()

    def reveal(self, row: int, col: int) -> Set[Cell]:
        """
        Reveal a cell at the given position.

        A hidden cell is revealed; if it has no adjacent mines its
        neighbors are revealed too, breadth first, stopping at numbered
        cells. Revealing an already revealed cell whose marked neighbors
        cover its number chords: its hidden neighbors are revealed
        instead. A revealed mine ends the game and stops the reveal.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            Cells that became revealed during this call. Empty when the
            cell is marked, when nothing could be chorded, or when the
            game is already over.

        Raises:
            OutOfBounds: If the position is outside the grid.
        """
        cell = self.cell_at(row, col)
        if not self.is_playing:
            logger.debug("Ignoring reveal at (%d, %d): game is over", row, col)
            return set()
        return self._reveal_from(self._reveal_seeds(cell))

    def _reveal_seeds(self, cell: Cell) -> List[Cell]:
        """Pick the cells a reveal starts from."""
        if cell.is_hidden:
            return [cell]
        if cell.is_revealed and self._is_fully_marked(cell):
            seeds = [n for n in self._neighbor_cells(cell) if n.is_hidden]
            if seeds:
                logger.debug(
                    "Chording (%d, %d) onto %d cells",
                    cell.row, cell.col, len(seeds),
                )
            return seeds
        return []

    def _is_fully_marked(self, cell: Cell) -> bool:
        """Check if marked neighbors meet the cell's mine count."""
        return self._count_adjacent_marks(cell) >= cell.adjacent_mines

    def _count_adjacent_marks(self, cell: Cell) -> int:
        """Count marked cells adjacent to a cell."""
        return sum(1 for n in self._neighbor_cells(cell) if n.is_marked)

    def _reveal_from(self, seeds: List[Cell]) -> Set[Cell]:
        """
        Breadth-first reveal over one queue, stopping at the first mine.

        Seeds are revealed when popped; one already reached by the
        cascade is skipped. Neighbors of an empty cell are never mines
        and are revealed as they are queued, so no cell is queued twice
        by the cascade. A mine leaves the rest of the queue untouched.
        """
        opened: Set[Cell] = set()
        queue = deque((seed, True) for seed in seeds)
        while queue:
            cell, is_seed = queue.popleft()
            if is_seed:
                if not self._open(cell, opened):
                    continue
                if cell.is_mine:
                    self._exploded = True
                    logger.debug("Mine revealed at (%d, %d)", cell.row, cell.col)
                    break
            if cell.adjacent_mines > 0:
                continue
            for neighbor in self._neighbor_cells(cell):
                if self._open(neighbor, opened):
                    queue.append((neighbor, False))

        if not self._exploded and self._hidden_safe_count == 0:
            logger.debug("All safe cells revealed")
        return opened

    def _open(self, cell: Cell, opened: Set[Cell]) -> bool:
        """Reveal a hidden cell and record it. Returns False otherwise."""
        if not cell.reveal():
            return False
        if not cell.is_mine:
            self._hidden_safe_count -= 1
        opened.add(cell)
        return True

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def columns(self) -> int:
        return self.config.columns

    @property
    def hidden_safe_count(self) -> int:
        """Number of non-mine cells not yet revealed."""
        return self._hidden_safe_count

    @property
    def has_exploded(self) -> bool:
        """Check if a mine was revealed."""
        return self._exploded

    @property
    def is_won(self) -> bool:
        """
        Check if every non-mine cell is revealed.

        Raises:
            CorruptedBoardError: If the hidden safe cell counter went
                negative.
        """
        if self._hidden_safe_count < 0:
            raise CorruptedBoardError(
                f"Hidden safe cell count is negative: {self._hidden_safe_count}"
            )
        return self._hidden_safe_count == 0

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        if self._exploded:
            return GameState.LOST
        if self.is_won:
            return GameState.WON
        return GameState.PLAYING

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self.game_state == GameState.PLAYING

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._exploded

    @property
    def marked_count(self) -> int:
        """Number of cells currently marked."""
        return sum(1 for cell in self.cells() if cell.is_marked)

    def cell_at(self, row: int, col: int) -> Cell:
        """
        Get cell at position.

        Raises:
            OutOfBounds: If the position is outside the grid.
        """
        self._validate_position(row, col)
        return self._grid[row][col]

    def cells(self) -> Iterator[Cell]:
        """Iterate over all cells in row-major order."""
        for row in self._grid:
            yield from row

    def __iter__(self) -> Iterator[Cell]:
        return self.cells()

    def mines(self) -> List[Cell]:
        """Get every mine cell in row-major order."""
        return [cell for cell in self.cells() if cell.is_mine]

    def wrongly_marked(self) -> List[Cell]:
        """Get marked cells that are not mines, in row-major order."""
        return [
            cell for cell in self.cells()
            if cell.is_marked and not cell.is_mine
        ]

    def hidden_cells(self) -> List[Position]:
        """
        Get positions of cells that can still be revealed.

        Returns:
            List of (row, col) positions of hidden cells.
        """
        return [cell.position for cell in self.cells() if cell.is_hidden]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = marked
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.config.rows, self.config.columns), dtype=np.int8)
        for cell in self.cells():
            obs[cell.row, cell.col] = cell.to_observation()
        return obs

    def solution(self) -> str:
        """Render the whole board, ignoring cell state. Mines show as M."""
        lines = []
        for row in self._grid:
            lines.append(" ".join(
                "M" if cell.is_mine else str(cell.adjacent_mines)
                for cell in row
            ))
        return "\n".join(lines)
