from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_blocks.game import Command, FallingBlocksGame, GameConfig, PALETTE, TetrominoType


def _hex_to_rgb(value: str) -> Tuple[int, int, int]:
    value = value.lstrip("#")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


_RGB = {int(kind): _hex_to_rgb(PALETTE[kind]) for kind in TetrominoType}


class FallingBlocksEnv(gym.Env):
    """One command per step, followed by one frame of gravity.

    Actions are the :class:`Command` values. The observation is the board with
    the falling piece overlaid as negative color ids. The reward is the score
    gained during the step.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
        frame_ms: float = 100.0,
        max_episode_steps: int = 10_000,
    ) -> None:
        super().__init__()
        self.game = FallingBlocksGame(config)
        self.render_mode = render_mode
        self.frame_ms = float(frame_ms)
        self.max_episode_steps = int(max_episode_steps)

        rows, cols = self.game.board.rows, self.game.board.cols
        n_kinds = len(TetrominoType)
        self.observation_space = spaces.Box(low=-n_kinds, high=n_kinds, shape=(rows, cols), dtype=np.int8)
        self.action_space = spaces.Discrete(len(Command))

        self._steps = 0

    def _get_obs(self) -> np.ndarray:
        return self.game.get_state().astype(np.int8)

    def _get_info(self) -> Dict[str, Any]:
        stats = self.game.get_game_stats()
        return {
            "score": stats["score"],
            "level": stats["level"],
            "lines_cleared_total": stats["lines_cleared"],
            "pieces_locked": stats["pieces_locked"],
            "holes": self.game.board.count_holes(),
            "max_height": self.game.board.get_max_height(),
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        self.game.set_rng(self.np_random)
        self.game.start()
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        score_before = self.game.score
        self.game.dispatch(Command(int(action)))
        self.game.tick(self.frame_ms)
        self._steps += 1

        reward = float(self.game.score - score_before)
        terminated = bool(self.game.game_over)
        truncated = self._steps >= self.max_episode_steps and not terminated
        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode != "rgb_array":
            return None
        state = self.game.get_state()
        cell = 12
        h, w = state.shape
        img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
        for y in range(h):
            for x in range(w):
                v = abs(int(state[y, x]))
                if v:
                    img[y * cell : (y + 1) * cell - 1, x * cell : (x + 1) * cell - 1, :] = _RGB[v]
        return img

    def close(self) -> None:
        pass
