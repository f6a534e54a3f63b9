import random

import pytest

from gtr_trainer.game import LEFT_GTR_CLASSIC, PUYO_COLORS
from gtr_trainer.solver import (
    GenerationError,
    check_left_gtr,
    check_shape,
    generate_solvable_tsumos,
    random_tsumo,
    replay,
)


class ConstantRandom(random.Random):
    """Always picks the first choice, so every pair is RED/RED."""

    def choice(self, seq):
        return seq[0]


def test_random_tsumo_draws_from_palette():
    rng = random.Random(7)
    seen = set()
    for _ in range(200):
        pair = random_tsumo(rng)
        assert pair.axis in PUYO_COLORS
        assert pair.child in PUYO_COLORS
        seen.update((pair.axis, pair.child))
    assert seen == set(PUYO_COLORS)


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_generated_puzzle_is_solvable(seed):
    puzzle = generate_solvable_tsumos(random.Random(seed))
    assert len(puzzle.tsumos) == 4
    assert len(puzzle.solution) >= 1
    assert check_left_gtr(replay(puzzle.tsumos, puzzle.solution.placements))


def test_same_seed_gives_same_puzzle():
    first = generate_solvable_tsumos(random.Random(42))
    second = generate_solvable_tsumos(random.Random(42))
    assert first.tsumos == second.tsumos
    assert first.solution.placements == second.solution.placements


def test_attempt_cap_raises():
    with pytest.raises(GenerationError):
        generate_solvable_tsumos(ConstantRandom(), max_attempts=3)


def test_other_shape_definitions():
    puzzle = generate_solvable_tsumos(random.Random(5), shape=LEFT_GTR_CLASSIC)
    assert check_shape(replay(puzzle.tsumos, puzzle.solution.placements), LEFT_GTR_CLASSIC)


def test_empty_sequence_is_rejected():
    with pytest.raises(ValueError):
        generate_solvable_tsumos(random.Random(0), count=0)
