from __future__ import annotations

from typing import List, Tuple

import pygame

from falling_blocks.game import FallingBlocksGame, GameStatus


BACKGROUND = (0, 0, 0)
PANEL = (10, 10, 14)
TEXT = (230, 230, 230)
ALERT = (255, 100, 100)


class Renderer:
    def __init__(self, cell_size: int = 30, margin: int = 20, panel_width: int = 180) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.panel_width = panel_width
        self._font: pygame.font.Font | None = None

    def window_size(self, game: FallingBlocksGame) -> Tuple[int, int]:
        width = game.board.cols * self.cell_size + self.margin * 3 + self.panel_width
        height = game.board.rows * self.cell_size + self.margin * 2
        return width, height

    def _draw_cell(self, surf: pygame.Surface, x: int, y: int, color: str) -> None:
        rect = pygame.Rect(
            x * self.cell_size,
            y * self.cell_size,
            self.cell_size - 1,
            self.cell_size - 1,
        )
        pygame.draw.rect(surf, pygame.Color(color), rect)

    def _grid_surface(self, game: FallingBlocksGame) -> pygame.Surface:
        board = game.board
        surf = pygame.Surface((board.cols * self.cell_size, board.rows * self.cell_size))
        surf.fill(BACKGROUND)
        for y in range(board.rows):
            for x in range(board.cols):
                color = board.color_at(y, x)
                if color is not None:
                    self._draw_cell(surf, x, y, color)
        piece = game.current_piece
        if piece is not None and game.status in (GameStatus.RUNNING, GameStatus.PAUSED):
            for x, y in piece.cells():
                if 0 <= y < board.rows:
                    self._draw_cell(surf, x, y, piece.hex_color)
        return surf

    def _status_lines(self, game: FallingBlocksGame) -> List[Tuple[str, Tuple[int, int, int]]]:
        stats = game.get_game_stats()
        lines = [
            (f"Score: {stats['score']}", TEXT),
            (f"Level: {stats['level']}", TEXT),
            (f"Lines: {stats['lines_cleared']}", TEXT),
        ]
        if game.status is GameStatus.IDLE:
            lines.append(("Press Enter to start", TEXT))
        elif game.status is GameStatus.PAUSED:
            lines.append(("Paused - P to resume", TEXT))
        elif game.status is GameStatus.GAME_OVER:
            lines.append(("Game Over", ALERT))
            lines.append(("R to restart", ALERT))
        return lines

    def draw(self, screen: pygame.Surface, game: FallingBlocksGame) -> None:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 26)
        screen.fill(PANEL)
        screen.blit(self._grid_surface(game), (self.margin, self.margin))
        x_text = self.margin * 2 + game.board.cols * self.cell_size
        for i, (txt, color) in enumerate(self._status_lines(game)):
            img = self._font.render(txt, True, color)
            screen.blit(img, (x_text, self.margin + i * 24))
        pygame.display.flip()
