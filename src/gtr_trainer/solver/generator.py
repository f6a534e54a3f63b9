from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Optional

from gtr_trainer.game.board import PuyoBoard
from gtr_trainer.game.pieces import PUYO_COLORS, TsumoPair
from gtr_trainer.game.rules import LEFT_GTR, ShapeDefinition

from .search import SolverResult, solve_gtr

logger = logging.getLogger(__name__)


class GenerationError(RuntimeError):
    """Raised when no solvable tsumo sequence was found within the attempt cap."""


@dataclass
class GeneratedPuzzle:
    tsumos: List[TsumoPair]
    solution: SolverResult


def random_tsumo(rng: random.Random) -> TsumoPair:
    return TsumoPair(axis=rng.choice(PUYO_COLORS), child=rng.choice(PUYO_COLORS))


def generate_solvable_tsumos(
    rng: Optional[random.Random] = None,
    count: int = 4,
    max_attempts: Optional[int] = None,
    shape: ShapeDefinition = LEFT_GTR,
    board: Optional[PuyoBoard] = None,
) -> GeneratedPuzzle:
    """Draw random tsumo sequences until the solver finds one that builds `shape`.

    Each sequence is solved from `board`, an empty standard board by default.
    With ``max_attempts=None`` this retries until it succeeds; with a cap,
    running out raises `GenerationError`.
    """
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")
    rng = rng or random.Random()
    start = board if board is not None else PuyoBoard()
    attempts = 0
    while max_attempts is None or attempts < max_attempts:
        attempts += 1
        tsumos = [random_tsumo(rng) for _ in range(count)]
        solution = solve_gtr(tsumos, start, shape)
        if solution is not None:
            logger.debug("generated solvable %s puzzle after %d attempt(s)", shape.name, attempts)
            return GeneratedPuzzle(tsumos, solution)
    raise GenerationError(f"no solvable {shape.name} puzzle in {max_attempts} attempts")
