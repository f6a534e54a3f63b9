from __future__ import annotations

import argparse
from typing import Optional

import gymnasium as gym
import numpy as np
import pygame

import gtr_trainer.env  # noqa: F401
from gtr_trainer.env.wrappers import ResampleInvalidActionWrapper


def build_env(render_mode: Optional[str] = None, use_resample: bool = True) -> gym.Env:
    env = gym.make("GTRTrainer-6x13-v0", render_mode=render_mode)
    if use_resample:
        env = ResampleInvalidActionWrapper(env)
    return env


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser()
    p.add_argument("--policy", choices=["hint", "random", "ppo", "maskable"], default="hint")
    p.add_argument("--model", type=str, default=None)
    p.add_argument("--episodes", type=int, default=100)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--render", action="store_true", help="Show each placement in a pygame window")
    p.add_argument("--fps", type=int, default=4)
    return p


def _show(screen: pygame.Surface, frame: np.ndarray) -> None:
    # rgb_array frames are (h, w, 3); pygame surfaces are indexed (w, h)
    surf = pygame.surfarray.make_surface(frame.swapaxes(0, 1))
    screen.blit(pygame.transform.scale(surf, screen.get_size()), (0, 0))
    pygame.display.flip()


def main() -> None:
    args = build_parser().parse_args()
    model = None
    if args.policy in ("ppo", "maskable"):
        if args.model is None:
            raise SystemExit("--model is required for ppo/maskable policies")
        if args.policy == "maskable":
            from sb3_contrib import MaskablePPO as Algo
        else:
            from stable_baselines3 import PPO as Algo
        model = Algo.load(args.model, device="auto")

    env = build_env(render_mode="rgb_array" if args.render else None, use_resample=(args.policy == "ppo"))
    screen = None
    clock = None
    if args.render:
        pygame.init()
        frame = env.render()
        screen = pygame.display.set_mode((frame.shape[1] * 3, frame.shape[0] * 3))
        pygame.display.set_caption("GTR Trainer - Agent Eval")
        clock = pygame.time.Clock()

    try:
        obs, info = env.reset(seed=args.seed)
        successes = 0
        placements = 0
        for _ in range(args.episodes):
            terminated = False
            while not terminated:
                if args.policy == "hint":
                    action = info["hint_action"]
                elif args.policy == "random":
                    action = env.action_space.sample(mask=info["action_mask"].astype(np.int8))
                elif args.policy == "maskable":
                    action, _ = model.predict(obs, deterministic=True, action_masks=info["action_mask"])
                else:
                    action, _ = model.predict(obs, deterministic=True)
                obs, reward, terminated, truncated, info = env.step(int(action))
                placements += 1
                if screen is not None:
                    for event in pygame.event.get():
                        if event.type == pygame.QUIT or (event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE):
                            return
                    _show(screen, env.render())
                    clock.tick(args.fps)
            if info["outcome"] == "SUCCESS":
                successes += 1
            obs, info = env.reset()
        print(f"{args.policy}: {successes}/{args.episodes} successes, "
              f"{placements / max(1, args.episodes):.2f} placements per round")
    finally:
        env.close()
        if args.render:
            pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    main()
