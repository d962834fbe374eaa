from __future__ import annotations

import numpy as np
import pytest

from falling_blocks.game import BASE_SHAPES, Board, TetrominoType

O = BASE_SHAPES[TetrominoType.O]
I = BASE_SHAPES[TetrominoType.I]


def test_empty_board_in_range_does_not_collide() -> None:
    board = Board()
    assert not board.collides(O, (0, 0))
    assert not board.collides(O, (8, 18))
    assert not board.collides(I, (6, 19))


@pytest.mark.parametrize("position", [(-1, 0), (9, 0), (0, 19), (4, 25), (-3, -3)])
def test_out_of_range_cells_collide(position: tuple[int, int]) -> None:
    assert Board().collides(O, position)


def test_cells_above_top_do_not_collide() -> None:
    board = Board()
    board.grid[0, :] = 1
    assert not board.collides(O, (4, -2))
    assert not board.collides(I, (0, -5))
    # The lower row of the O piece reaches row 0, which is filled.
    assert board.collides(O, (4, -1))


def test_overlap_with_locked_cell_collides() -> None:
    board = Board()
    board.grid[5, 5] = int(TetrominoType.T)
    assert board.collides(O, (4, 4))
    assert not board.collides(O, (6, 4))


def test_merge_writes_color_only_under_occupied_cells() -> None:
    board = Board()
    t = BASE_SHAPES[TetrominoType.T]
    board.merge(t, (2, 3), int(TetrominoType.T))
    filled = {(int(y), int(x)) for y, x in zip(*np.nonzero(board.grid))}
    assert filled == {(3, 2), (3, 3), (3, 4), (4, 3)}
    assert board.grid[3, 2] == int(TetrominoType.T)
    assert board.color_at(3, 2) == "#0DFF72"
    assert board.color_at(0, 0) is None


def test_merge_out_of_range_is_a_programming_error() -> None:
    with pytest.raises(AssertionError):
        Board().merge(O, (9, 0), 1)


def test_clear_lines_without_full_rows_is_noop() -> None:
    board = Board()
    board.grid[19, :9] = 1
    before = board.clone_state()
    assert board.clear_lines() == 0
    assert np.array_equal(board.grid, before)


def test_clear_lines_handles_non_contiguous_rows() -> None:
    board = Board()
    for row in (10, 17, 19):
        board.grid[row, :] = 1
    board.grid[18, 3] = 5
    board.grid[16, 7] = 6
    board.grid[11, 0] = 2

    assert board.clear_lines() == 3
    assert board.grid.shape == (20, 10)
    assert not board.grid[:3].any()
    assert board.grid[19, 3] == 5
    assert board.grid[18, 7] == 6
    assert board.grid[13, 0] == 2
    assert int(np.count_nonzero(board.grid)) == 3


@pytest.mark.parametrize("k", [1, 2, 4, 20])
def test_clear_lines_counts_every_full_row(k: int) -> None:
    board = Board()
    board.grid[20 - k :, :] = 3
    assert board.clear_lines() == k
    assert board.grid.shape == (20, 10)
    assert not board.grid.any()


def test_height_and_holes() -> None:
    board = Board()
    assert board.get_max_height() == 0
    board.grid[15, 2] = 1
    board.grid[17, 2] = 1
    assert board.get_max_height() == 5
    assert board.count_holes() == 3


def test_reset_empties_board() -> None:
    board = Board()
    board.grid[:, :] = 4
    board.reset()
    assert not board.grid.any()
