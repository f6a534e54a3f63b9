"""Shape detection and puzzle search for GTR Trainer.

- check_left_gtr / check_shape: goal predicates over the judgment zone
- generate_placements: legal placements for a tsumo pair
- solve_gtr: bounded DFS over a fixed tsumo sequence
- generate_solvable_tsumos: random puzzles with a verified solution
"""

from .shape import can_still_complete, check_left_gtr, check_shape, exceeds_judgment_zone
from .placements import generate_placements
from .search import SolverResult, replay, solve_gtr
from .generator import GeneratedPuzzle, GenerationError, generate_solvable_tsumos, random_tsumo

__all__ = [
    "check_left_gtr",
    "check_shape",
    "can_still_complete",
    "exceeds_judgment_zone",
    "generate_placements",
    "SolverResult",
    "replay",
    "solve_gtr",
    "GeneratedPuzzle",
    "GenerationError",
    "generate_solvable_tsumos",
    "random_tsumo",
]
