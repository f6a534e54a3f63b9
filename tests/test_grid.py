import numpy as np
import pytest

from gtr_trainer.game import BOARD_HEIGHT, BOARD_WIDTH, GameGrid, PuyoColor


def test_new_grid_is_empty_with_expected_shape():
    grid = GameGrid(BOARD_WIDTH, BOARD_HEIGHT)
    assert grid.grid.shape == (BOARD_HEIGHT, BOARD_WIDTH)
    assert grid.is_empty()
    assert all(grid.column_height(x) == 0 for x in range(BOARD_WIDTH))


@pytest.mark.parametrize("x,y", [(-1, 0), (BOARD_WIDTH, 0), (0, -1), (0, BOARD_HEIGHT), (99, 99)])
def test_get_cell_out_of_bounds_is_none(x, y):
    grid = GameGrid(BOARD_WIDTH, BOARD_HEIGHT)
    grid.drop(0, PuyoColor.RED)
    assert grid.get_cell(x, y) == PuyoColor.NONE


def test_drops_stack_in_order_until_full():
    grid = GameGrid(BOARD_WIDTH, BOARD_HEIGHT)
    colors = [PuyoColor.RED, PuyoColor.BLUE, PuyoColor.GREEN, PuyoColor.YELLOW]
    for n in range(BOARD_HEIGHT):
        row = grid.drop(3, colors[n % 4])
        assert row == n
        assert grid.column_height(3) == n + 1
    for y in range(BOARD_HEIGHT):
        assert grid.get_cell(3, y) == colors[y % 4]

    before = grid.clone_state()
    assert grid.drop(3, PuyoColor.RED) == -1
    assert np.array_equal(grid.grid, before)


def test_drop_outside_columns_is_rejected():
    grid = GameGrid(BOARD_WIDTH, BOARD_HEIGHT)
    assert grid.drop(-1, PuyoColor.RED) == -1
    assert grid.drop(BOARD_WIDTH, PuyoColor.RED) == -1
    assert grid.is_empty()


def test_column_height_counts_contiguous_cells_from_floor():
    grid = GameGrid(BOARD_WIDTH, BOARD_HEIGHT)
    grid.set_cell(0, 0, PuyoColor.RED)
    grid.set_cell(0, 2, PuyoColor.BLUE)  # floating fixture cell
    assert grid.column_height(0) == 1
    assert grid.column_height(1) == 0


def test_set_cell_outside_grid_raises():
    grid = GameGrid(BOARD_WIDTH, BOARD_HEIGHT)
    with pytest.raises(IndexError):
        grid.set_cell(BOARD_WIDTH, 0, PuyoColor.RED)


def test_copy_is_independent():
    grid = GameGrid(BOARD_WIDTH, BOARD_HEIGHT)
    grid.drop(1, PuyoColor.GREEN)
    copy = grid.copy()
    copy.drop(1, PuyoColor.RED)
    copy.drop(4, PuyoColor.RED)
    assert grid.column_height(1) == 1
    assert grid.column_height(4) == 0
    assert copy.column_height(1) == 2


def test_reset_clears_everything():
    grid = GameGrid(BOARD_WIDTH, BOARD_HEIGHT)
    grid.drop(0, PuyoColor.RED)
    grid.drop(5, PuyoColor.BLUE)
    assert not grid.is_empty()
    grid.reset()
    assert grid.is_empty()
    assert grid.grid.shape == (BOARD_HEIGHT, BOARD_WIDTH)
