from __future__ import annotations

from typing import Tuple

import numpy as np

from .pieces import PuyoColor


Coordinate = Tuple[int, int]


class GameGrid:
    """Discrete 2D grid of puyo colors.

    The grid uses 0 (``PuyoColor.NONE``) for empty cells. Cells are indexed as
    ``grid[y, x]`` with ``y = 0`` the bottom row, so a column's stack grows
    towards larger ``y``.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(0)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_cell(self, x: int, y: int) -> PuyoColor:
        if not self.is_inside(x, y):
            return PuyoColor.NONE
        return PuyoColor(int(self.grid[y, x]))

    def set_cell(self, x: int, y: int, color: PuyoColor) -> None:
        """Write a cell directly, ignoring gravity. Meant for fixtures."""
        if not self.is_inside(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside a {self.width}x{self.height} grid")
        self.grid[y, x] = int(color)

    def column_height(self, x: int) -> int:
        if not 0 <= x < self.width:
            return 0
        empty_rows = np.flatnonzero(self.grid[:, x] == 0)
        if empty_rows.size == 0:
            return self.height
        return int(empty_rows[0])

    def drop(self, x: int, color: PuyoColor) -> int:
        """Stack one cell on column `x`; returns its row or -1 if the column is full."""
        if not 0 <= x < self.width:
            return -1
        h = self.column_height(x)
        if h >= self.height:
            return -1
        self.grid[h, x] = int(color)
        return h

    def is_empty(self) -> bool:
        return not np.any(self.grid)

    def copy(self) -> "GameGrid":
        new_grid = GameGrid(self.width, self.height)
        new_grid.grid = self.grid.copy()
        return new_grid

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
