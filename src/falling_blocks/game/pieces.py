from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, List, Tuple

import numpy as np

if TYPE_CHECKING:
    from .board import Board


class TetrominoType(IntEnum):
    I = 1
    O = 2
    T = 3
    L = 4
    J = 5
    S = 6
    Z = 7


Shape = np.ndarray


def _frozen(rows: List[List[int]]) -> Shape:
    arr = np.array(rows, dtype=np.int8)
    arr.setflags(write=False)
    return arr


BASE_SHAPES = {
    TetrominoType.I: _frozen([[1, 1, 1, 1]]),
    TetrominoType.O: _frozen([[1, 1], [1, 1]]),
    TetrominoType.T: _frozen([[1, 1, 1], [0, 1, 0]]),
    TetrominoType.L: _frozen([[1, 1, 1], [1, 0, 0]]),
    TetrominoType.J: _frozen([[1, 1, 1], [0, 0, 1]]),
    TetrominoType.S: _frozen([[1, 1, 0], [0, 1, 1]]),
    TetrominoType.Z: _frozen([[0, 1, 1], [1, 1, 0]]),
}

# Color id stored in the board is the TetrominoType value (0 = empty).
PALETTE = {
    TetrominoType.I: "#FF0D72",
    TetrominoType.O: "#0DC2FF",
    TetrominoType.T: "#0DFF72",
    TetrominoType.L: "#F538FF",
    TetrominoType.J: "#FF8E0D",
    TetrominoType.S: "#FFE138",
    TetrominoType.Z: "#3877FF",
}


def rotate_clockwise(shape: Shape) -> Shape:
    """Rotate a rectangular shape 90 degrees clockwise.

    ``rotated[r, c] == shape[rows - 1 - c, r]``, i.e. transpose and then
    reverse each row.
    """
    return np.rot90(shape, 1, axes=(1, 0)).copy()


@dataclass
class Piece:
    kind: TetrominoType
    shape: Shape
    x: int = 0
    y: int = 0

    @classmethod
    def spawn(cls, kind: TetrominoType, cols: int, spawn_y: int = 0) -> "Piece":
        return cls(kind=kind, shape=BASE_SHAPES[kind].copy(), x=cols // 2 - 1, y=spawn_y)

    @property
    def color(self) -> int:
        return int(self.kind)

    @property
    def hex_color(self) -> str:
        return PALETTE[self.kind]

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y

    def rotated_shape(self) -> Shape:
        return rotate_clockwise(self.shape)

    def try_rotate(self, board: "Board") -> bool:
        """Rotate in place unless the rotated shape collides; no wall kicks."""
        rotated = self.rotated_shape()
        if board.collides(rotated, self.position):
            return False
        self.shape = rotated
        return True

    def cells(self) -> List[Tuple[int, int]]:
        h, w = self.shape.shape
        cells: List[Tuple[int, int]] = []
        for dy in range(h):
            for dx in range(w):
                if self.shape[dy, dx]:
                    cells.append((self.x + dx, self.y + dy))
        return cells
