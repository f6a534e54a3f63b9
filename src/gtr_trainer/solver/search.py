from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence

from gtr_trainer.game.board import PuyoBoard
from gtr_trainer.game.pieces import Placement, TsumoPair
from gtr_trainer.game.rules import LEFT_GTR, ShapeDefinition

from .placements import generate_placements
from .shape import can_still_complete, check_shape, exceeds_judgment_zone

logger = logging.getLogger(__name__)


@dataclass
class SolverResult:
    """Placements to apply, one per pair, in order.

    May be shorter than the pair list when the shape is completed early, and
    empty when the starting board already holds it.
    """

    placements: List[Placement] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.placements)

    def __iter__(self) -> Iterator[Placement]:
        return iter(self.placements)


def solve_gtr(
    tsumos: Sequence[TsumoPair],
    board: Optional[PuyoBoard] = None,
    shape: ShapeDefinition = LEFT_GTR,
) -> Optional[SolverResult]:
    """Find placements for `tsumos` that complete `shape`, or None if impossible."""
    start = board if board is not None else PuyoBoard()
    path: List[Placement] = []

    def dfs(index: int, current: PuyoBoard) -> bool:
        if check_shape(current, shape):
            return True
        if index >= len(tsumos):
            return False

        pair = tsumos[index]
        for placement in generate_placements(pair, current.width):
            child = current.clone()
            if not child.place_pair(pair, placement):
                continue
            # An overfilled judgment column can never be repaired later
            if exceeds_judgment_zone(child, shape) and not check_shape(child, shape):
                continue
            if not can_still_complete(child, shape, 2 * (len(tsumos) - index - 1)):
                continue
            path.append(placement)
            if dfs(index + 1, child):
                return True
            path.pop()
        return False

    if dfs(0, start):
        logger.debug("solved %d pairs for %s with %d placements", len(tsumos), shape.name, len(path))
        return SolverResult(list(path))
    logger.debug("no %s solution for %d pairs", shape.name, len(tsumos))
    return None


def replay(
    tsumos: Sequence[TsumoPair],
    placements: Sequence[Placement],
    board: Optional[PuyoBoard] = None,
) -> PuyoBoard:
    """Apply `placements` to a copy of `board` (or an empty board) and return it."""
    if len(placements) > len(tsumos):
        raise ValueError(f"{len(placements)} placements for only {len(tsumos)} pairs")
    result = board.clone() if board is not None else PuyoBoard()
    for step, (pair, placement) in enumerate(zip(tsumos, placements)):
        if not result.place_pair(pair, placement):
            raise ValueError(f"placement {step} ({placement}) is not legal")
    return result
