from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .grid import Coordinate


@dataclass(frozen=True)
class ShapeDefinition:
    """Target shape inside the bottom-left judgment zone.

    Every cell of every group must be filled, each group must be a single
    color, and no two groups may share a color. `max_heights[x]` is the
    tallest stack the shape can use in judgment column `x`.
    """

    name: str
    groups: Tuple[Tuple[Coordinate, ...], ...]
    max_heights: Tuple[int, ...]


#   col0 col1 col2
#   [A]            row 2
#   [A]  [A]  [B]  row 1
#   [B]  [B]  [C]  row 0
LEFT_GTR = ShapeDefinition(
    name="left_gtr",
    groups=(
        ((0, 1), (0, 2), (1, 1)),  # L-shape
        ((0, 0), (1, 0), (2, 1)),  # cushion
        ((2, 0),),                 # base
    ),
    max_heights=(3, 3, 2),
)

#   col0 col1
#   [A]  [A]  row 2
#   [A]  [A]  row 1
#   [A]  [B]  row 0
LEFT_GTR_CLASSIC = ShapeDefinition(
    name="left_gtr_classic",
    groups=(
        ((0, 0), (0, 1), (0, 2), (1, 1), (1, 2)),
        ((1, 0),),
    ),
    max_heights=(3, 3),
)

SHAPES = {shape.name: shape for shape in (LEFT_GTR, LEFT_GTR_CLASSIC)}
