"""
Gymnasium environment wrapper for the Minesweeper engine.

Drives one Board per episode through the standard RL interface.
"""
import logging
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig
from .cell import OBS_HIDDEN, OBS_MARKED, OBS_MINE

logger = logging.getLogger(__name__)


# ============================================================================
# Rewards
# ============================================================================

REWARD_WIN = 10.0
REWARD_LOSS = -10.0
REWARD_REVEAL = 1.0
REWARD_MARK = 0.0
REWARD_INVALID = -0.1


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = marked cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size 2 * rows * columns.
        Action i < rows * columns reveals cell (i // columns, i % columns);
        the upper half toggles the mark on the same cells. Revealing an
        already revealed cell chords it.

    Rewards:
        - +1 for a reveal that opened cells
        - +10 for winning the game
        - -10 for hitting a mine
        - 0 for toggling a mark
        - -0.1 for an action that changed nothing
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.render_mode = render_mode
        self._rng = random.Random(self.config.seed)
        self.board = Board(self.config, rng=self._rng)

        self.observation_space = spaces.Box(
            low=OBS_MARKED,
            high=OBS_MINE,
            shape=(self.config.rows, self.config.columns),
            dtype=np.int8,
        )

        self._num_cells = self.config.rows * self.config.columns
        self.action_space = spaces.Discrete(2 * self._num_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new episode on a fresh board.

        Mines are laid by a ``random.Random`` the environment keeps for
        its boards, separate from ``self.np_random``. A seed reseeds both;
        later unseeded resets continue the board sequence from there.

        Args:
            seed: Random seed for mine placement.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self._rng = random.Random(seed)
        self.board = Board(self.config, rng=self._rng)
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Flat action index (see class docstring).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        is_mark, row, col = self._decode_action(action)
        self._steps += 1

        if is_mark:
            reward = self._apply_mark(row, col)
        else:
            reward = self._apply_reveal(row, col)

        observation = self.board.get_observation()
        terminated = not self.board.is_playing
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _decode_action(self, action: int) -> Tuple[bool, int, int]:
        """Split a flat action index into (is_mark, row, col)."""
        action = int(action)
        is_mark = action >= self._num_cells
        index = action - self._num_cells if is_mark else action
        return is_mark, index // self.config.columns, index % self.config.columns

    def _apply_reveal(self, row: int, col: int) -> float:
        opened = self.board.reveal(row, col)
        if not opened:
            return REWARD_INVALID
        if self.board.has_exploded:
            return REWARD_LOSS
        if self.board.is_won:
            return REWARD_WIN
        return REWARD_REVEAL

    def _apply_mark(self, row: int, col: int) -> float:
        before = self.board.cell_at(row, col).state
        after = self.board.mark(row, col)
        if after == before:
            return REWARD_INVALID
        return REWARD_MARK

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "hidden_safe": self.board.hidden_safe_count,
            "total_safe": self.config.safe_cells,
            "marked": self.board.marked_count,
            "game_state": self.board.game_state.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self._render_ansi()
        if self.render_mode == "human":
            print(self._render_ansi())
        return None

    def _render_ansi(self) -> str:
        """Render board as ASCII string."""
        symbols = {OBS_HIDDEN: ".", OBS_MARKED: "F", OBS_MINE: "*", 0: " "}
        obs = self.board.get_observation()
        return "\n".join(
            " ".join(symbols.get(int(val), str(val)) for val in row)
            for row in obs
        )

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that can change the board.

        Reveals are valid on hidden cells, marks on hidden or marked
        cells. Chords are left out of the mask.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if not self.board.is_playing:
            return mask
        for cell in self.board.cells():
            index = cell.row * self.config.columns + cell.col
            if cell.is_hidden:
                mask[index] = True
            if not cell.is_revealed:
                mask[self._num_cells + index] = True
        return mask
