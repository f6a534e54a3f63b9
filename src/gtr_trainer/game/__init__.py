"""Game model for GTR Trainer.

Exports the board model and supporting types:
- GameGrid: color matrix with column heights and gravity drops
- PuyoBoard: pair placement with rotation geometry
- TsumoPair, Placement, Rotation, PuyoColor: piece and command types
- ShapeDefinition, LEFT_GTR, LEFT_GTR_CLASSIC: target shape table
"""

from .grid import GameGrid
from .pieces import (
    BOARD_HEIGHT,
    BOARD_WIDTH,
    PUYO_COLORS,
    Placement,
    PuyoColor,
    Rotation,
    TsumoPair,
)
from .board import PuyoBoard
from .rules import LEFT_GTR, LEFT_GTR_CLASSIC, SHAPES, ShapeDefinition

__all__ = [
    "GameGrid",
    "BOARD_HEIGHT",
    "BOARD_WIDTH",
    "PUYO_COLORS",
    "Placement",
    "PuyoColor",
    "Rotation",
    "TsumoPair",
    "PuyoBoard",
    "LEFT_GTR",
    "LEFT_GTR_CLASSIC",
    "SHAPES",
    "ShapeDefinition",
]
