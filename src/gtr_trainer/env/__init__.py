"""Gymnasium environments for GTR Trainer."""

from __future__ import annotations

from gymnasium.envs.registration import register

# One left-GTR round per episode on the standard 6x13 board
register(
    id="GTRTrainer-6x13-v0",
    entry_point="gtr_trainer.env.gtr_env:GtrTrainerEnv",
)

__all__ = ["GTRTrainer-6x13-v0"]
