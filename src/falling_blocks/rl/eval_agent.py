from __future__ import annotations

import argparse

import gymnasium as gym
import pygame

import falling_blocks.env  # ensure registration
from falling_blocks.utils.logging import setup_logger
from falling_blocks.visualization.renderer import Renderer


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser()
    p.add_argument("--model", type=str, required=True)
    p.add_argument("--steps", type=int, default=2000)
    p.add_argument("--fps", type=int, default=10)
    p.add_argument("--frame_ms", type=float, default=100.0)
    return p


def main() -> None:
    args = build_parser().parse_args()
    logger = setup_logger(name="falling_blocks.rl.eval_agent")

    from stable_baselines3 import PPO

    env = gym.make("FallingBlocks-10x20-v0", frame_ms=args.frame_ms)
    model = PPO.load(args.model, device="auto")
    renderer = Renderer()

    pygame.init()
    try:
        game = env.unwrapped.game
        screen = pygame.display.set_mode(renderer.window_size(game))
        pygame.display.set_caption("Falling Blocks - Agent Eval")
        clock = pygame.time.Clock()

        obs, info = env.reset()
        total_reward = 0.0
        steps = 0
        while steps < args.steps:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    return

            action, _ = model.predict(obs, deterministic=True)
            obs, reward, terminated, truncated, info = env.step(action)
            total_reward += float(reward)
            steps += 1
            if terminated or truncated:
                logger.info("episode finished at step %d: score=%d level=%d", steps, info["score"], info["level"])
                obs, info = env.reset()

            renderer.draw(screen, env.unwrapped.game)
            clock.tick(args.fps)
        logger.info("total reward %.1f over %d steps", total_reward, steps)
    finally:
        env.close()
        pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    main()
