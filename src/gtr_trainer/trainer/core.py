from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import List, Optional, Tuple

from gtr_trainer.game.board import PuyoBoard
from gtr_trainer.game.pieces import BOARD_HEIGHT, BOARD_WIDTH, Placement, PuyoColor, Rotation, TsumoPair
from gtr_trainer.game.rules import LEFT_GTR, ShapeDefinition
from gtr_trainer.solver import SolverResult, check_shape, generate_solvable_tsumos

logger = logging.getLogger(__name__)


class Action(IntEnum):
    LEFT = 0
    RIGHT = 1
    ROTATE_CW = 2
    ROTATE_CCW = 3
    DROP = 4
    NEW_ROUND = 5
    NONE = 6


class Outcome(IntEnum):
    NONE = 0
    PLACED = 1
    SUCCESS = 2
    FAIL = 3


@dataclass
class GameConfig:
    width: int = BOARD_WIDTH
    height: int = BOARD_HEIGHT
    tsumo_count: int = 4
    spawn_x: int = 2
    preview_count: int = 3
    random_seed: Optional[int] = None
    max_generation_attempts: Optional[int] = None
    shape: ShapeDefinition = LEFT_GTR


@dataclass(frozen=True)
class FallingPiece:
    x: int
    rotation: Rotation
    pair: TsumoPair

    @property
    def placement(self) -> Placement:
        return Placement(self.x, self.rotation)

    def fits(self, width: int) -> bool:
        return 0 <= self.x < width and 0 <= self.placement.child_x < width

    def moved(self, dx: int, width: int) -> Optional["FallingPiece"]:
        moved = replace(self, x=self.x + dx)
        return moved if moved.fits(width) else None

    def rotated(self, delta: int, width: int) -> Optional["FallingPiece"]:
        rotation = self.rotation.rotated(delta)
        x = self.x
        # Wall kick: push the axis one column away from the wall the child hits
        child_x = x + rotation.offset[0]
        if child_x < 0:
            x += 1
        elif child_x >= width:
            x -= 1
        rotated = FallingPiece(x, rotation, self.pair)
        return rotated if rotated.fits(width) else None


@dataclass(frozen=True)
class GhostPosition:
    axis_x: int
    axis_y: int
    child_x: int
    child_y: int
    axis_color: PuyoColor
    child_color: PuyoColor

    def cells(self) -> List[Tuple[int, int, PuyoColor]]:
        return [
            (self.axis_x, self.axis_y, self.axis_color),
            (self.child_x, self.child_y, self.child_color),
        ]


def compute_ghost(board: PuyoBoard, piece: FallingPiece) -> Optional[GhostPosition]:
    landing = board.landing_positions(piece.placement)
    if landing is None:
        return None
    (axis_x, axis_y), (child_x, child_y) = landing
    return GhostPosition(axis_x, axis_y, child_x, child_y, piece.pair.axis, piece.pair.child)


@dataclass(frozen=True)
class RoundState:
    """One round's state. Transitions build a new RoundState instead of mutating."""

    board: PuyoBoard
    tsumos: Tuple[TsumoPair, ...]
    solution: SolverResult
    index: int
    falling: FallingPiece

    @property
    def current_pair(self) -> TsumoPair:
        return self.tsumos[self.index]


class GtrTrainerGame:
    def __init__(self, config: Optional[GameConfig] = None) -> None:
        self.config = config or GameConfig()
        self.rng = random.Random(self.config.random_seed)
        self.success_count = 0
        self.fail_count = 0
        self.finished_round: Optional[RoundState] = None
        self.round: RoundState = self._start_round()

    def reset(self) -> None:
        self.success_count = 0
        self.fail_count = 0
        self.new_round()

    def new_round(self) -> None:
        self.round = self._start_round()

    def _start_round(self) -> RoundState:
        puzzle = generate_solvable_tsumos(
            self.rng,
            count=self.config.tsumo_count,
            max_attempts=self.config.max_generation_attempts,
            shape=self.config.shape,
            board=self._empty_board(),
        )
        return RoundState(
            board=self._empty_board(),
            tsumos=tuple(puzzle.tsumos),
            solution=puzzle.solution,
            index=0,
            falling=self._spawn(puzzle.tsumos[0]),
        )

    def _empty_board(self) -> PuyoBoard:
        return PuyoBoard(self.config.width, self.config.height)

    def _spawn(self, pair: TsumoPair) -> FallingPiece:
        return FallingPiece(self.config.spawn_x, Rotation.UP, pair)

    def _finish_round(self, outcome: Outcome, board: PuyoBoard) -> Outcome:
        self.finished_round = replace(self.round, board=board)
        if outcome == Outcome.SUCCESS:
            self.success_count += 1
        else:
            self.fail_count += 1
        logger.debug("round finished: %s (success=%d fail=%d)", outcome.name, self.success_count, self.fail_count)
        self.new_round()
        return outcome

    def move(self, dx: int) -> bool:
        moved = self.round.falling.moved(dx, self.config.width)
        if moved is None:
            return False
        self.round = replace(self.round, falling=moved)
        return True

    def rotate(self, delta: int) -> bool:
        rotated = self.round.falling.rotated(delta, self.config.width)
        if rotated is None:
            return False
        self.round = replace(self.round, falling=rotated)
        return True

    def place(self, placement: Placement) -> Outcome:
        """Drop the current pair at `placement` and advance the round."""
        state = self.round
        board = state.board.clone()
        if not board.place_pair(state.current_pair, placement):
            return self._finish_round(Outcome.FAIL, state.board)
        if check_shape(board, self.config.shape):
            return self._finish_round(Outcome.SUCCESS, board)
        next_index = state.index + 1
        if next_index >= len(state.tsumos):
            return self._finish_round(Outcome.FAIL, board)
        self.round = replace(
            state,
            board=board,
            index=next_index,
            falling=self._spawn(state.tsumos[next_index]),
        )
        return Outcome.PLACED

    def drop(self) -> Outcome:
        return self.place(self.round.falling.placement)

    def step(self, action: Action) -> Outcome:
        if action == Action.LEFT:
            self.move(-1)
        elif action == Action.RIGHT:
            self.move(1)
        elif action == Action.ROTATE_CW:
            self.rotate(1)
        elif action == Action.ROTATE_CCW:
            self.rotate(-1)
        elif action == Action.DROP:
            return self.drop()
        elif action == Action.NEW_ROUND:
            self.new_round()
        return Outcome.NONE

    @property
    def board(self) -> PuyoBoard:
        return self.round.board

    @property
    def player_ghost(self) -> Optional[GhostPosition]:
        return compute_ghost(self.round.board, self.round.falling)

    @property
    def solution_ghost(self) -> Optional[GhostPosition]:
        state = self.round
        if state.index >= len(state.solution):
            return None
        placement = state.solution.placements[state.index]
        return compute_ghost(state.board, FallingPiece(placement.x, placement.rotation, state.current_pair))

    @property
    def next_tsumos(self) -> List[TsumoPair]:
        start = self.round.index + 1
        return list(self.round.tsumos[start:start + self.config.preview_count])
