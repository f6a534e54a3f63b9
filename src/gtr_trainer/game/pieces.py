from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple


BOARD_WIDTH = 6
BOARD_HEIGHT = 13


class PuyoColor(IntEnum):
    NONE = 0
    RED = 1
    BLUE = 2
    GREEN = 3
    YELLOW = 4


PUYO_COLORS: Tuple[PuyoColor, ...] = (
    PuyoColor.RED,
    PuyoColor.BLUE,
    PuyoColor.GREEN,
    PuyoColor.YELLOW,
)


class Rotation(IntEnum):
    """Position of the child puyo relative to the axis puyo."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def offset(self) -> Tuple[int, int]:
        return _CHILD_OFFSETS[self]

    @property
    def is_vertical(self) -> bool:
        return self.offset[0] == 0

    def rotated(self, delta: int) -> "Rotation":
        return Rotation((int(self) + delta) % 4)


_CHILD_OFFSETS = {
    Rotation.UP: (0, 1),
    Rotation.RIGHT: (1, 0),
    Rotation.DOWN: (0, -1),
    Rotation.LEFT: (-1, 0),
}


@dataclass(frozen=True)
class TsumoPair:
    axis: PuyoColor
    child: PuyoColor

    @property
    def is_monochrome(self) -> bool:
        return self.axis == self.child


@dataclass(frozen=True)
class Placement:
    x: int  # column of the axis puyo
    rotation: Rotation = Rotation.UP

    @property
    def child_x(self) -> int:
        return self.x + self.rotation.offset[0]
