from __future__ import annotations

import numpy as np
import pytest

from falling_blocks.game import BASE_SHAPES, Board, Piece, TetrominoType, rotate_clockwise


@pytest.mark.parametrize("kind", list(TetrominoType))
def test_four_rotations_return_original(kind: TetrominoType) -> None:
    shape = BASE_SHAPES[kind]
    rotated = shape
    for _ in range(4):
        rotated = rotate_clockwise(rotated)
    assert np.array_equal(rotated, shape)


def test_rotation_is_clockwise() -> None:
    t = BASE_SHAPES[TetrominoType.T]
    assert rotate_clockwise(t).tolist() == [[0, 1], [1, 1], [0, 1]]
    assert rotate_clockwise(BASE_SHAPES[TetrominoType.I]).shape == (4, 1)


def test_templates_are_read_only() -> None:
    with pytest.raises(ValueError):
        BASE_SHAPES[TetrominoType.O][0, 0] = 0


def test_spawn_uses_center_and_kind_color() -> None:
    piece = Piece.spawn(TetrominoType.T, cols=10)
    assert piece.position == (4, 0)
    assert piece.color == int(TetrominoType.T)
    assert piece.hex_color == "#0DFF72"
    assert piece.cells() == [(4, 0), (5, 0), (6, 0), (5, 1)]


def test_try_rotate_applies_when_free() -> None:
    board = Board()
    piece = Piece.spawn(TetrominoType.I, cols=10)
    assert piece.try_rotate(board)
    assert piece.shape.shape == (4, 1)
    # The catalog template is untouched.
    assert BASE_SHAPES[TetrominoType.I].shape == (1, 4)


def test_try_rotate_keeps_shape_when_rotation_collides() -> None:
    board = Board()
    piece = Piece.spawn(TetrominoType.I, cols=10)
    piece.y = 18
    before = piece.shape.copy()
    assert not piece.try_rotate(board)
    assert np.array_equal(piece.shape, before)


def test_try_rotate_blocked_by_stack() -> None:
    board = Board()
    board.grid[2, 5] = 1
    piece = Piece.spawn(TetrominoType.T, cols=10)
    # Clockwise T reaches row 2 in column 5.
    assert not piece.try_rotate(board)
    assert piece.shape.shape == (2, 3)
