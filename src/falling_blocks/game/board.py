from __future__ import annotations

from typing import Iterator, Optional, Tuple

import numpy as np

from .pieces import PALETTE, Shape, TetrominoType


Coordinate = Tuple[int, int]


class Board:
    """Grid of locked cells.

    ``grid[row, col]`` is 0 for empty cells and a color id (the
    ``TetrominoType`` value of the piece that locked there) otherwise.
    Row 0 is the top of the board.
    """

    def __init__(self, rows: int = 20, cols: int = 10) -> None:
        self.rows = int(rows)
        self.cols = int(cols)
        self.grid = np.zeros((self.rows, self.cols), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(0)

    @staticmethod
    def _occupied(shape: Shape, position: Coordinate) -> Iterator[Coordinate]:
        px, py = position
        for dy, dx in zip(*np.nonzero(shape)):
            yield px + int(dx), py + int(dy)

    def collides(self, shape: Shape, position: Coordinate) -> bool:
        # Cells above the top edge (y < 0) are allowed so pieces can spawn partly hidden.
        for x, y in self._occupied(shape, position):
            if x < 0 or x >= self.cols or y >= self.rows:
                return True
            if y >= 0 and self.grid[y, x] != 0:
                return True
        return False

    def merge(self, shape: Shape, position: Coordinate, color: int) -> None:
        for x, y in self._occupied(shape, position):
            assert 0 <= x < self.cols and 0 <= y < self.rows, f"merge out of range at ({x}, {y})"
            self.grid[y, x] = color

    def clear_lines(self) -> int:
        full = np.all(self.grid != 0, axis=1)
        cleared = int(full.sum())
        if cleared == 0:
            return 0
        # Remaining rows keep their order; empty rows are stacked on top.
        new_rows = np.zeros((cleared, self.cols), dtype=np.int8)
        self.grid = np.vstack((new_rows, self.grid[~full]))
        return cleared

    def color_at(self, row: int, col: int) -> Optional[str]:
        value = int(self.grid[row, col])
        if value == 0:
            return None
        return PALETTE[TetrominoType(value)]

    def get_max_height(self) -> int:
        non_empty_rows = np.where(np.any(self.grid != 0, axis=1))[0]
        if non_empty_rows.size == 0:
            return 0
        return self.rows - int(non_empty_rows[0])

    def count_holes(self) -> int:
        holes = 0
        for x in range(self.cols):
            seen_block = False
            for cell in self.grid[:, x]:
                if cell != 0:
                    seen_block = True
                elif seen_block:
                    holes += 1
        return holes

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
