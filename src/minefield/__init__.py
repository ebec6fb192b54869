"""
Minesweeper rules engine.

Provides the board (mine placement, reveal cascades, chording, win/lose
detection), cell state, and a Gymnasium environment wrapper.
"""
from .cell import Cell, CellState
from .board import Board, BoardConfig, GameState
from .errors import (
    BoardError,
    CorruptedBoardError,
    InvalidDimensions,
    InvalidMineCount,
    OutOfBounds,
)
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "GameState",
    "BoardError",
    "CorruptedBoardError",
    "InvalidDimensions",
    "InvalidMineCount",
    "OutOfBounds",
    "MinesweeperEnv",
]
