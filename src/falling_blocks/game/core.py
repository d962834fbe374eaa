from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional

import numpy as np

from .board import Board
from .pieces import Piece, TetrominoType
from .rules import ScoringRules

logger = logging.getLogger(__name__)


class Command(IntEnum):
    NONE = 0
    LEFT = 1
    RIGHT = 2
    ROTATE = 3
    SOFT_DROP = 4
    HARD_DROP = 5


class GameStatus(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass
class GameConfig:
    width: int = 10
    height: int = 20
    random_seed: Optional[int] = None
    spawn_y: int = 0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"board size must be positive, got {self.width}x{self.height}")
        if not 0 <= self.spawn_y < self.height:
            raise ValueError(f"spawn_y must be within the board rows [0, {self.height}), got {self.spawn_y}")


class FallingBlocksGame:
    """Falling-block game engine.

    The engine has no clock of its own: a driver calls :meth:`tick` with the
    milliseconds elapsed since the previous frame and forwards player input
    through the command methods (or :meth:`dispatch`). Every call completes
    its mutation before returning.

    Lifecycle: ``IDLE -> RUNNING`` on :meth:`start`, ``RUNNING <-> PAUSED`` on
    :meth:`pause`, ``RUNNING -> GAME_OVER`` when a freshly spawned piece
    collides. :meth:`start` restarts from any state.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.random_seed)
        self.board = Board(rows=self.config.height, cols=self.config.width)
        self.current_piece: Optional[Piece] = None
        self.status = GameStatus.IDLE
        self.score = 0
        self.level = 1
        self.drop_interval = self.rules.drop_interval(self.level)
        self.lines_cleared_total = 0
        self.pieces_locked = 0
        self._drop_counter = 0.0

    @property
    def game_over(self) -> bool:
        return self.status is GameStatus.GAME_OVER

    @property
    def is_paused(self) -> bool:
        return self.status is GameStatus.PAUSED

    @property
    def is_running(self) -> bool:
        return self.status is GameStatus.RUNNING

    def set_rng(self, rng: np.random.Generator) -> None:
        self.rng = rng

    # ------------------------------------------------------------------
    # Lifecycle

    def start(self) -> None:
        self.board.reset()
        self.score = 0
        self.level = 1
        self.drop_interval = self.rules.drop_interval(self.level)
        self.lines_cleared_total = 0
        self.pieces_locked = 0
        self._drop_counter = 0.0
        self.status = GameStatus.RUNNING
        logger.debug("game started on %dx%d board", self.board.cols, self.board.rows)
        self._spawn_piece()

    def pause(self) -> None:
        if self.status is GameStatus.RUNNING:
            self.status = GameStatus.PAUSED
        elif self.status is GameStatus.PAUSED:
            self.status = GameStatus.RUNNING
            self._drop_counter = 0.0

    # ------------------------------------------------------------------
    # Internals

    def _random_kind(self) -> TetrominoType:
        kinds = list(TetrominoType)
        return kinds[int(self.rng.integers(0, len(kinds)))]

    def _spawn_piece(self) -> None:
        self.current_piece = Piece.spawn(self._random_kind(), self.board.cols, self.config.spawn_y)
        if self.board.collides(self.current_piece.shape, self.current_piece.position):
            self.status = GameStatus.GAME_OVER
            logger.debug("spawn blocked, game over with score %d", self.score)

    def _move(self, dx: int, dy: int) -> bool:
        piece = self.current_piece
        assert piece is not None
        if self.board.collides(piece.shape, (piece.x + dx, piece.y + dy)):
            return False
        piece.x += dx
        piece.y += dy
        return True

    def _lock_piece(self) -> int:
        piece = self.current_piece
        assert piece is not None
        self.board.merge(piece.shape, piece.position, piece.color)
        self.pieces_locked += 1
        lines = self.board.clear_lines()
        if lines > 0:
            self.lines_cleared_total += lines
            self.score += self.rules.score_for_lines(lines, self.level)
            new_level = self.rules.next_level(self.score, self.level)
            if new_level != self.level:
                self.level = new_level
                self.drop_interval = self.rules.drop_interval(self.level)
                logger.debug("level up to %d, drop interval %d ms", self.level, self.drop_interval)
        logger.debug("locked %s at %s, cleared %d", piece.kind.name, piece.position, lines)
        self._spawn_piece()
        return lines

    def _step_down(self) -> None:
        if not self._move(0, 1):
            self._lock_piece()
        self._drop_counter = 0.0

    # ------------------------------------------------------------------
    # Commands

    def move_left(self) -> None:
        if self.is_running:
            self._move(-1, 0)

    def move_right(self) -> None:
        if self.is_running:
            self._move(1, 0)

    def rotate(self) -> None:
        if self.is_running:
            assert self.current_piece is not None
            self.current_piece.try_rotate(self.board)

    def soft_drop(self) -> None:
        if self.is_running:
            self._step_down()

    def hard_drop(self) -> None:
        if not self.is_running:
            return
        while self._move(0, 1):
            pass
        self._lock_piece()
        self._drop_counter = 0.0

    def tick(self, elapsed_ms: float) -> None:
        if elapsed_ms < 0:
            raise ValueError(f"elapsed_ms must be non-negative, got {elapsed_ms}")
        if not self.is_running:
            return
        self._drop_counter += elapsed_ms
        if self._drop_counter > self.drop_interval:
            self._step_down()

    def dispatch(self, command: Command) -> None:
        if command == Command.LEFT:
            self.move_left()
        elif command == Command.RIGHT:
            self.move_right()
        elif command == Command.ROTATE:
            self.rotate()
        elif command == Command.SOFT_DROP:
            self.soft_drop()
        elif command == Command.HARD_DROP:
            self.hard_drop()
        elif command == Command.NONE:
            pass

    # ------------------------------------------------------------------
    # Readable state

    def get_state(self) -> np.ndarray:
        # Overlay current piece on a copy of the board; negative ids mark the falling piece
        state = self.board.clone_state()
        if self.current_piece is not None and self.status in (GameStatus.RUNNING, GameStatus.PAUSED):
            for x, y in self.current_piece.cells():
                if 0 <= y < self.board.rows and 0 <= x < self.board.cols:
                    state[y, x] = -self.current_piece.color
        return state

    def get_game_stats(self) -> dict:
        return {
            "score": self.score,
            "level": self.level,
            "lines_cleared": self.lines_cleared_total,
            "pieces_locked": self.pieces_locked,
            "status": self.status.value,
            "avg_lines_per_piece": self.lines_cleared_total / max(1, self.pieces_locked),
        }
