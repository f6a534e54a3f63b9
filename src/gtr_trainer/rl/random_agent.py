from __future__ import annotations

import gymnasium as gym

import gtr_trainer.env  # noqa: F401


def run_random(episodes: int = 200, seed: int | None = None) -> float:
    """Play rounds with uniformly random legal placements; returns the success rate."""
    env = gym.make("GTRTrainer-6x13-v0")
    obs, info = env.reset(seed=seed)
    successes = 0
    for _ in range(episodes):
        terminated = False
        while not terminated:
            mask = info["action_mask"]
            action = env.action_space.sample(mask=mask.astype("int8")) if mask.any() else env.action_space.sample()
            obs, reward, terminated, truncated, info = env.step(action)
        if info["outcome"] == "SUCCESS":
            successes += 1
        obs, info = env.reset()
    env.close()
    rate = successes / max(1, episodes)
    print(f"Random agent: {successes}/{episodes} rounds built a GTR ({rate:.1%})")
    return rate


if __name__ == "__main__":  # pragma: no cover
    run_random()
