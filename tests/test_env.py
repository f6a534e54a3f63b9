import gymnasium as gym
import numpy as np

import gtr_trainer.env  # noqa: F401
from gtr_trainer.env.gtr_env import GtrTrainerEnv, _compute_action_mask, decode_action, encode_placement
from gtr_trainer.env.wrappers import ResampleInvalidActionWrapper
from gtr_trainer.game import GameGrid, Placement, PuyoBoard, Rotation
from gtr_trainer.solver import check_left_gtr, replay
from gtr_trainer.trainer import GameConfig


def make_env():
    return GtrTrainerEnv(GameConfig(random_seed=0))


def test_reset_returns_valid_observation():
    env = make_env()
    obs, info = env.reset(seed=3)
    assert env.observation_space.contains(obs)
    assert not obs["grid"].any()
    assert obs["index"] == 0
    assert info["action_mask"].shape == (env.action_space.n,)
    assert info["hint_action"] >= 0


def test_action_encoding():
    width = 6
    assert encode_placement(Placement(3, Rotation.DOWN), width) == 15
    assert decode_action(15, width) == Placement(3, Rotation.DOWN)


def test_mask_excludes_out_of_bounds_placements():
    env = make_env()
    _, info = env.reset(seed=1)
    mask = info["action_mask"]
    assert not mask[encode_placement(Placement(5, Rotation.RIGHT), 6)]
    assert not mask[encode_placement(Placement(0, Rotation.LEFT), 6)]
    assert mask[encode_placement(Placement(0, Rotation.UP), 6)]
    assert mask.sum() == 22


def test_following_hints_builds_the_shape():
    env = make_env()
    obs, info = env.reset(seed=5)
    terminated = False
    steps = 0
    while not terminated:
        obs, reward, terminated, truncated, info = env.step(info["hint_action"])
        steps += 1
    assert info["outcome"] == "SUCCESS"
    assert reward == 1.0
    assert steps <= 4
    assert obs["index"] == steps
    grid = GameGrid(6, 13)
    grid.grid = obs["grid"].copy()
    assert check_left_gtr(PuyoBoard(grid=grid))
    assert info["success_count"] == 1


def test_illegal_action_fails_the_episode():
    env = make_env()
    env.reset(seed=2)
    obs, reward, terminated, truncated, info = env.step(encode_placement(Placement(5, Rotation.RIGHT), 6))
    assert terminated
    assert reward == -1.0
    assert info["outcome"] == "FAIL"
    assert not obs["grid"].any()


def test_terminal_info_describes_the_finished_round():
    env = make_env()
    obs, info = env.reset(seed=5)
    assert info["solution"] == env.game.round.solution.placements
    terminated = False
    while not terminated:
        obs, reward, terminated, truncated, info = env.step(info["hint_action"])
    assert info["outcome"] == "SUCCESS"
    assert info["hint_action"] == -1

    grid = GameGrid(6, 13)
    grid.grid = obs["grid"].copy()
    board = PuyoBoard(grid=grid)
    assert np.array_equal(info["action_mask"], _compute_action_mask(board))

    finished = replay(env.game.finished_round.tsumos, info["solution"])
    assert np.array_equal(finished.grid.grid, obs["grid"])


def test_failed_step_info_uses_the_failed_board():
    env = make_env()
    env.reset(seed=2)
    env.step(encode_placement(Placement(0, Rotation.UP), 6))
    obs, reward, terminated, truncated, info = env.step(encode_placement(Placement(5, Rotation.RIGHT), 6))
    assert terminated
    assert info["hint_action"] == -1
    assert obs["grid"].sum() > 0
    grid = GameGrid(6, 13)
    grid.grid = obs["grid"].copy()
    assert np.array_equal(info["action_mask"], _compute_action_mask(PuyoBoard(grid=grid)))


def test_render_rgb_array():
    env = GtrTrainerEnv(GameConfig(random_seed=0), render_mode="rgb_array")
    env.reset(seed=0)
    env.step(encode_placement(Placement(0, Rotation.UP), 6))
    frame = env.render()
    assert frame.shape == (13 * 12, 6 * 12, 3)
    # bottom-left cell is filled, top-left is background
    assert tuple(frame[-1, 0]) != (30, 30, 36)
    assert tuple(frame[0, 0]) == (30, 30, 36)


def test_registered_env_with_resampling():
    env = ResampleInvalidActionWrapper(gym.make("GTRTrainer-6x13-v0"))
    env.reset(seed=0)
    illegal = encode_placement(Placement(5, Rotation.RIGHT), 6)
    _, _, terminated, _, info = env.step(illegal)
    assert info["outcome"] == "PLACED"
    assert not terminated
    assert isinstance(env.get_action_mask(), np.ndarray)
    env.close()
