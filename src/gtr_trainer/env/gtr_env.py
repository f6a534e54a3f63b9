from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from gtr_trainer.game import PUYO_COLORS, Placement, PuyoBoard, Rotation
from gtr_trainer.trainer import GameConfig, GtrTrainerGame, Outcome, RoundState


PALETTE = {
    0: (30, 30, 36),
    1: (230, 60, 60),    # RED
    2: (60, 110, 230),   # BLUE
    3: (70, 200, 90),    # GREEN
    4: (230, 210, 60),   # YELLOW
}


def decode_action(action: int, width: int) -> Placement:
    return Placement(int(action) % width, Rotation(int(action) // width))


def encode_placement(placement: Placement, width: int) -> int:
    return int(placement.rotation) * width + placement.x


def _compute_action_mask(board: PuyoBoard) -> np.ndarray:
    width = board.width
    mask = np.zeros((len(Rotation) * width,), dtype=np.bool_)
    for rotation in Rotation:
        for x in range(width):
            placement = Placement(x, rotation)
            mask[encode_placement(placement, width)] = board.landing_positions(placement) is not None
    return mask


class GtrTrainerEnv(gym.Env):
    """One GTR round per episode; each action drops the current pair.

    Action index ``rotation * width + x`` places the axis at column ``x`` with
    the given rotation. The episode terminates when the shape is built or the
    round fails (illegal placement, or all pairs used).
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 4}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None,
                 success_reward: float = 1.0,
                 fail_reward: float = -1.0,
                 step_penalty: float = 0.0) -> None:
        super().__init__()
        self.game = GtrTrainerGame(config)
        self.render_mode = render_mode

        self.success_reward = float(success_reward)
        self.fail_reward = float(fail_reward)
        self.step_penalty = float(step_penalty)

        cfg = self.game.config
        max_color = max(int(c) for c in PUYO_COLORS)
        self.observation_space = spaces.Dict(
            {
                "grid": spaces.Box(low=0, high=max_color, shape=(cfg.height, cfg.width), dtype=np.int8),
                "tsumos": spaces.Box(low=0, high=max_color, shape=(cfg.tsumo_count, 2), dtype=np.int8),
                "index": spaces.Discrete(cfg.tsumo_count + 1),
            }
        )
        self.action_space = spaces.Discrete(len(Rotation) * cfg.width)

        self._last_state: RoundState = self.game.round
        self._last_index = 0

    def _get_obs(self) -> Dict[str, Any]:
        state = self._last_state
        tsumos = np.zeros((self.game.config.tsumo_count, 2), dtype=np.int8)
        for i, pair in enumerate(state.tsumos):
            tsumos[i] = (int(pair.axis), int(pair.child))
        return {
            "grid": state.board.grid.clone_state(),
            "tsumos": tsumos,
            "index": int(self._last_index),
        }

    def _hint_action(self, terminated: bool = False) -> int:
        state = self._last_state
        if terminated or self._last_index >= len(state.solution):
            return -1
        return encode_placement(state.solution.placements[self._last_index], self.game.config.width)

    def _get_info(self, terminated: bool = False) -> Dict[str, Any]:
        # Describes the round in the observation, even after the game dealt the next one
        state = self._last_state
        return {
            "action_mask": _compute_action_mask(state.board),
            "hint_action": self._hint_action(terminated),
            "solution": list(state.solution.placements),
            "success_count": self.game.success_count,
            "fail_count": self.game.fail_count,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is not None:
            self.game.rng.seed(seed)
        self.game.new_round()
        self._last_state = self.game.round
        self._last_index = 0
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        placement = decode_action(action, self.game.config.width)
        index_before = self.game.round.index
        outcome = self.game.place(placement)

        terminated = outcome in (Outcome.SUCCESS, Outcome.FAIL)
        if terminated:
            # The game has already dealt the next round; report the one that ended
            assert self.game.finished_round is not None
            self._last_state = self.game.finished_round
            self._last_index = index_before + 1 if outcome == Outcome.SUCCESS else index_before
        else:
            self._last_state = self.game.round
            self._last_index = self.game.round.index

        if outcome == Outcome.SUCCESS:
            reward = self.success_reward
        elif outcome == Outcome.FAIL:
            reward = self.fail_reward
        else:
            reward = self.step_penalty

        info = self._get_info(terminated)
        info["outcome"] = outcome.name
        info["placement"] = placement
        return self._get_obs(), float(reward), terminated, False, info

    # Mask exposure for wrappers/MaskablePPO
    def get_action_mask(self) -> np.ndarray:
        return _compute_action_mask(self.game.board)

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            grid = self._last_state.board.grid.grid
            cell = 12
            h, w = grid.shape
            img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
            for y in range(h):
                row = h - 1 - y  # row 0 is the floor
                for x in range(w):
                    img[row * cell : (row + 1) * cell, x * cell : (x + 1) * cell, :] = PALETTE[int(grid[y, x])]
            return img
        return None

    def close(self) -> None:
        pass
