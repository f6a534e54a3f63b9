from __future__ import annotations

from typing import List

from gtr_trainer.game.pieces import BOARD_WIDTH, Placement, Rotation, TsumoPair


def generate_placements(pair: TsumoPair, width: int = BOARD_WIDTH) -> List[Placement]:
    """All distinct placements of `pair` whose two cells stay inside the board.

    A monochrome pair looks the same upside down, so DOWN and LEFT are dropped
    in favour of UP and RIGHT.
    """
    placements: List[Placement] = []
    for rotation in Rotation:
        if pair.is_monochrome and rotation in (Rotation.DOWN, Rotation.LEFT):
            continue
        dx = rotation.offset[0]
        for x in range(width):
            if 0 <= x + dx < width:
                placements.append(Placement(x, rotation))
    return placements
