from __future__ import annotations

import argparse
import os

import gymnasium as gym

# Ensure envs are registered
import falling_blocks.env  # noqa: F401
from falling_blocks.utils.logging import setup_logger

ENV_ID = "FallingBlocks-10x20-v0"


def make_env(frame_ms: float, seed: int | None = None) -> gym.Env:
    env = gym.make(ENV_ID, frame_ms=frame_ms)
    if seed is not None:
        env.reset(seed=seed)
    return env


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser()
    p.add_argument("--timesteps", type=int, default=200_000)
    p.add_argument("--frame_ms", type=float, default=100.0,
                   help="Milliseconds of gravity applied after every agent action")
    p.add_argument("--logdir", type=str, default="./logs/ppo")
    p.add_argument("--save_path", type=str, default="./models/ppo_falling_blocks.zip")
    p.add_argument("--n_envs", type=int, default=4)
    p.add_argument("--seed", type=int, default=None)
    return p


def main() -> None:
    args = build_parser().parse_args()
    logger = setup_logger(name="falling_blocks.rl.train_ppo")

    from stable_baselines3 import PPO
    from stable_baselines3.common.vec_env import SubprocVecEnv, VecMonitor

    def make_env_idx(i: int):
        def thunk():
            seed = None if args.seed is None else args.seed + i
            return make_env(args.frame_ms, seed)
        return thunk

    vec_env = SubprocVecEnv([make_env_idx(i) for i in range(args.n_envs)])
    vec_env = VecMonitor(vec_env)
    model = PPO(
        policy="MlpPolicy",
        env=vec_env,
        verbose=1,
        tensorboard_log=args.logdir,
        seed=args.seed,
    )

    logger.info("training PPO on %s for %d timesteps with %d envs", ENV_ID, args.timesteps, args.n_envs)
    save_dir = os.path.dirname(args.save_path)
    if save_dir:
        os.makedirs(save_dir, exist_ok=True)
    model.learn(total_timesteps=args.timesteps)
    model.save(args.save_path)
    logger.info("saved model to %s", args.save_path)


if __name__ == "__main__":  # pragma: no cover
    main()
