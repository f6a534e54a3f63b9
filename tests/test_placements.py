from gtr_trainer.game import BOARD_WIDTH, PuyoColor, Rotation, TsumoPair
from gtr_trainer.solver import generate_placements


def test_two_color_pair_uses_every_rotation():
    placements = generate_placements(TsumoPair(PuyoColor.RED, PuyoColor.BLUE))
    # 6 columns per vertical rotation, 5 per horizontal one
    assert len(placements) == 22
    assert {p.rotation for p in placements} == set(Rotation)
    assert len(set(placements)) == len(placements)
    for p in placements:
        assert 0 <= p.x < BOARD_WIDTH
        assert 0 <= p.child_x < BOARD_WIDTH


def test_monochrome_pair_keeps_up_and_right_only():
    placements = generate_placements(TsumoPair(PuyoColor.GREEN, PuyoColor.GREEN))
    assert len(placements) == 11
    assert {p.rotation for p in placements} == {Rotation.UP, Rotation.RIGHT}


def test_horizontal_placements_respect_walls():
    placements = generate_placements(TsumoPair(PuyoColor.RED, PuyoColor.BLUE))
    right = [p.x for p in placements if p.rotation == Rotation.RIGHT]
    left = [p.x for p in placements if p.rotation == Rotation.LEFT]
    assert right == [0, 1, 2, 3, 4]
    assert left == [1, 2, 3, 4, 5]


def test_narrow_board():
    placements = generate_placements(TsumoPair(PuyoColor.RED, PuyoColor.BLUE), width=1)
    assert {p.rotation for p in placements} == {Rotation.UP, Rotation.DOWN}
