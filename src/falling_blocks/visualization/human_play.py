from __future__ import annotations

import argparse
from typing import Dict

import pygame

from falling_blocks.game import Command, FallingBlocksGame, GameConfig
from falling_blocks.utils.logging import setup_logger
from .renderer import Renderer


KEY_TO_COMMAND: Dict[int, Command] = {
    pygame.K_LEFT: Command.LEFT,
    pygame.K_a: Command.LEFT,
    pygame.K_RIGHT: Command.RIGHT,
    pygame.K_d: Command.RIGHT,
    pygame.K_DOWN: Command.SOFT_DROP,
    pygame.K_s: Command.SOFT_DROP,
    pygame.K_UP: Command.ROTATE,
    pygame.K_w: Command.ROTATE,
    pygame.K_SPACE: Command.HARD_DROP,
}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Falling Blocks with the keyboard.")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--fps", type=int, default=60)
    p.add_argument("--cell_size", type=int, default=30)
    p.add_argument("--log_level", type=str, default="info")
    return p


def run(seed: int | None = None, fps: int = 60, cell_size: int = 30) -> None:
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = FallingBlocksGame(GameConfig(random_seed=seed))
        renderer = Renderer(cell_size=cell_size)

        screen = pygame.display.set_mode(renderer.window_size(game))
        pygame.display.set_caption("Falling Blocks")

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key in (pygame.K_RETURN, pygame.K_r):
                        game.start()
                    elif event.key == pygame.K_p:
                        game.pause()
                    else:
                        command = KEY_TO_COMMAND.get(event.key)
                        if command is not None:
                            game.dispatch(command)

            # The driver owns the clock; the engine only sees elapsed milliseconds
            elapsed = clock.tick(fps)
            game.tick(elapsed)

            renderer.draw(screen, game)
    finally:
        pygame.quit()


def main() -> None:
    args = build_parser().parse_args()
    logger = setup_logger(level=args.log_level)
    logger.info("controls: arrows/WASD move and rotate, space hard drop, P pause, Enter start, R restart")
    run(seed=args.seed, fps=args.fps, cell_size=args.cell_size)


if __name__ == "__main__":  # pragma: no cover
    main()
