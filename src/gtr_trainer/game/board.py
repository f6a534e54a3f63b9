from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple

from .grid import Coordinate, GameGrid
from .pieces import BOARD_HEIGHT, BOARD_WIDTH, Placement, PuyoColor, TsumoPair


class PuyoBoard:
    """Playfield that stacks tsumo pairs under gravity.

    All normal writes go through `drop_puyo` and `place_pair`, which land
    cells on the current column height, so no cell ever floats above an empty
    one. `from_rows` and `grid.set_cell` bypass this for test fixtures.
    """

    def __init__(self, width: int = BOARD_WIDTH, height: int = BOARD_HEIGHT, grid: Optional[GameGrid] = None) -> None:
        self.grid = grid if grid is not None else GameGrid(width, height)

    @classmethod
    def from_rows(cls, rows: Sequence[Iterable[PuyoColor]], width: int = BOARD_WIDTH,
                  height: int = BOARD_HEIGHT) -> "PuyoBoard":
        """Build a board from bottom-up rows; row 0 is the floor."""
        board = cls(width, height)
        for y, row in enumerate(rows):
            for x, color in enumerate(row):
                board.grid.set_cell(x, y, color)
        return board

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def get_cell(self, x: int, y: int) -> PuyoColor:
        return self.grid.get_cell(x, y)

    def column_height(self, x: int) -> int:
        return self.grid.column_height(x)

    def drop_puyo(self, x: int, color: PuyoColor) -> int:
        return self.grid.drop(x, color)

    def landing_positions(self, placement: Placement) -> Optional[Tuple[Coordinate, Coordinate]]:
        """Where the axis and child cells would land, or None if illegal."""
        x = placement.x
        child_x = placement.child_x
        if not (0 <= x < self.width and 0 <= child_x < self.width):
            return None

        if placement.rotation.is_vertical:
            h = self.column_height(x)
            if h + 2 > self.height:
                return None
            if placement.rotation.offset[1] > 0:
                return (x, h), (x, h + 1)
            return (x, h + 1), (x, h)

        # Horizontal: each cell falls in its own column
        axis_y = self.column_height(x)
        child_y = self.column_height(child_x)
        if axis_y >= self.height or child_y >= self.height:
            return None
        return (x, axis_y), (child_x, child_y)

    def place_pair(self, pair: TsumoPair, placement: Placement) -> bool:
        landing = self.landing_positions(placement)
        if landing is None:
            return False
        (axis_x, axis_y), (child_x, child_y) = landing
        self.grid.grid[axis_y, axis_x] = int(pair.axis)
        self.grid.grid[child_y, child_x] = int(pair.child)
        return True

    def clone(self) -> "PuyoBoard":
        return PuyoBoard(grid=self.grid.copy())

    def reset(self) -> None:
        self.grid.reset()

    def is_empty(self) -> bool:
        return self.grid.is_empty()

    def __repr__(self) -> str:
        rows = []
        for y in range(self.height - 1, -1, -1):
            rows.append("".join(".RBGY"[int(c)] for c in self.grid.grid[y]))
        return "PuyoBoard(\n  " + "\n  ".join(rows) + "\n)"
