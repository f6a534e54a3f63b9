"""Round state and controls for a GTR training session."""

from .core import (
    Action,
    FallingPiece,
    GameConfig,
    GhostPosition,
    GtrTrainerGame,
    Outcome,
    RoundState,
    compute_ghost,
)

__all__ = [
    "Action",
    "FallingPiece",
    "GameConfig",
    "GhostPosition",
    "GtrTrainerGame",
    "Outcome",
    "RoundState",
    "compute_ghost",
]
