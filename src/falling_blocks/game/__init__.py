"""Game module for Falling Blocks.

Exports the core game engine and supporting classes:
- Board: Grid of locked cells, collision checks and line clearing
- Piece: Active tetromino with clockwise rotation
- TetrominoType: Enum of the seven piece kinds
- ScoringRules: Line-clear scoring, leveling and drop speed
- FallingBlocksGame: Engine with the command API and timer tick
"""

from .board import Board
from .pieces import BASE_SHAPES, PALETTE, Piece, TetrominoType, rotate_clockwise
from .rules import ScoringRules
from .core import Command, FallingBlocksGame, GameConfig, GameStatus

__all__ = [
    "Board",
    "Piece",
    "TetrominoType",
    "BASE_SHAPES",
    "PALETTE",
    "rotate_clockwise",
    "ScoringRules",
    "FallingBlocksGame",
    "GameConfig",
    "GameStatus",
    "Command",
]
