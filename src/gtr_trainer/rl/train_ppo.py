from __future__ import annotations

import argparse
import os

import gymnasium as gym

# Ensure envs are registered
import gtr_trainer.env  # noqa: F401
from gtr_trainer.env.wrappers import ResampleInvalidActionWrapper


ENV_ID = "GTRTrainer-6x13-v0"


def make_env(seed: int | None = None) -> gym.Env:
    env = gym.make(ENV_ID)
    # Resample invalid actions for vanilla PPO; also forwards get_action_mask
    env = ResampleInvalidActionWrapper(env)
    if seed is not None:
        env.reset(seed=seed)
    return env


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser()
    p.add_argument("--algo", choices=["ppo", "maskable"], default="maskable")
    p.add_argument("--timesteps", type=int, default=200_000)
    p.add_argument("--logdir", type=str, default="./logs/ppo")
    p.add_argument("--save_path", type=str, default="./models/ppo_gtr.zip")
    p.add_argument("--n_envs", type=int, default=4)
    return p


def main() -> None:
    args = build_parser().parse_args()

    from stable_baselines3.common.vec_env import SubprocVecEnv, VecMonitor

    if args.algo == "maskable":
        from sb3_contrib import MaskablePPO as Algo
        from sb3_contrib.common.wrappers import ActionMasker

        def make_env_idx(i: int):
            def thunk():
                return ActionMasker(make_env(seed=i), lambda env: env.get_action_mask())
            return thunk
    else:
        from stable_baselines3 import PPO as Algo

        def make_env_idx(i: int):
            def thunk():
                return make_env(seed=i)
            return thunk

    vec_env = VecMonitor(SubprocVecEnv([make_env_idx(i) for i in range(args.n_envs)]))
    model = Algo(
        policy="MultiInputPolicy",
        env=vec_env,
        verbose=1,
        tensorboard_log=args.logdir,
    )

    os.makedirs(os.path.dirname(args.save_path), exist_ok=True)
    model.learn(total_timesteps=args.timesteps)
    model.save(args.save_path)


if __name__ == "__main__":  # pragma: no cover
    main()
