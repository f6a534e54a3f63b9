from __future__ import annotations

from gtr_trainer.game.board import PuyoBoard
from gtr_trainer.game.pieces import PuyoColor
from gtr_trainer.game.rules import LEFT_GTR, ShapeDefinition


def check_shape(board: PuyoBoard, shape: ShapeDefinition) -> bool:
    """True iff the judgment zone of `board` holds `shape`."""
    seen = set()
    for group in shape.groups:
        color = board.get_cell(*group[0])
        if color == PuyoColor.NONE or color in seen:
            return False
        for x, y in group[1:]:
            if board.get_cell(x, y) != color:
                return False
        seen.add(color)
    return True


def check_left_gtr(board: PuyoBoard) -> bool:
    return check_shape(board, LEFT_GTR)


def can_still_complete(board: PuyoBoard, shape: ShapeDefinition, cells_left: int) -> bool:
    """False when no further `cells_left` puyos can turn `board` into `shape`.

    Filled cells never change, so a group already holding two colors, or two
    groups already sharing one, is final. So is having more empty shape cells
    than puyos left to drop.
    """
    empty = 0
    group_colors = set()
    for group in shape.groups:
        color = PuyoColor.NONE
        for x, y in group:
            cell = board.get_cell(x, y)
            if cell == PuyoColor.NONE:
                empty += 1
            elif color == PuyoColor.NONE:
                color = cell
            elif cell != color:
                return False
        if color != PuyoColor.NONE:
            if color in group_colors:
                return False
            group_colors.add(color)
    return empty <= cells_left


def exceeds_judgment_zone(board: PuyoBoard, shape: ShapeDefinition) -> bool:
    """True if any judgment column is stacked above what `shape` can use."""
    return any(board.column_height(x) > limit for x, limit in enumerate(shape.max_heights))
