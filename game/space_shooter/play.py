"""
Command line entry point: play the game or watch random agents.

    python -m game.space_shooter.play --difficulty hard --character power --name Ada
    python -m game.space_shooter.play --random-agent --episodes 5 --no-render
"""

import argparse
import sys
from typing import Dict, List, Optional

import numpy as np
from loguru import logger

from .config import CHARACTERS, DIFFICULTIES, ENV_CONFIG
from .engine import SimulationEngine
from .rankings import Leaderboard
from .shooter_env import ShooterEnv


def evaluate_random(
    n_episodes: int = 10,
    difficulty: str = ENV_CONFIG["difficulty"],
    character: str = ENV_CONFIG["character"],
    render: bool = False,
    seed: Optional[int] = None,
    max_steps: int = ENV_CONFIG["max_steps"],
) -> List[Dict[str, float]]:
    """
    Run random-policy episodes and collect per-episode stats

    Args:
        n_episodes: Number of episodes to run
        difficulty: Difficulty profile name
        character: Character profile name
        render: Whether to open the arcade window
        seed: Base seed, episode i uses seed + i
        max_steps: Step limit per episode
    """
    env = ShooterEnv(
        render_mode="human" if render else None,
        difficulty=difficulty,
        character=character,
        max_steps=max_steps,
    )
    env.action_space.seed(seed)

    stats = []
    for ep in range(n_episodes):
        obs, info = env.reset(seed=None if seed is None else seed + ep)
        total_reward = 0.0
        terminated = truncated = False
        while not (terminated or truncated):
            obs, reward, terminated, truncated, info = env.step(env.action_space.sample())
            total_reward += reward
        stats.append({
            "reward": total_reward,
            "score": info["score"],
            "enemies_defeated": info["enemies_defeated"],
            "steps": info["step"],
            "survived": float(not terminated),
        })
        print(f"Episode {ep + 1}/{n_episodes}: score={info['score']} "
              f"defeated={info['enemies_defeated']} steps={info['step']} reward={total_reward:.2f}")

    env.close()

    scores = np.array([s["score"] for s in stats], dtype=np.float64)
    print(f"\n{'='*60}")
    print(f"Mean score: {scores.mean():.1f} ± {scores.std():.1f} over {n_episodes} episodes")
    print(f"Survival rate: {np.mean([s['survived'] for s in stats]):.2f}")
    print(f"{'='*60}\n")
    return stats


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Vertical space shooter")
    parser.add_argument(
        "--difficulty",
        type=str,
        default=ENV_CONFIG["difficulty"],
        help=f"Difficulty ({', '.join(d.lower() for d in DIFFICULTIES)})",
    )
    parser.add_argument(
        "--character",
        type=str,
        default=ENV_CONFIG["character"],
        help=f"Character ({', '.join(c.lower() for c in CHARACTERS)})",
    )
    parser.add_argument("--name", type=str, default=None, help="Player name for the rankings")
    parser.add_argument(
        "--rankings",
        type=str,
        default="./rankings.json",
        help="Where to keep the top-10 table (default: ./rankings.json)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--random-agent", action="store_true", help="Let a random policy play")
    parser.add_argument("--episodes", type=int, default=1, help="Episodes for --random-agent")
    parser.add_argument("--no-render", action="store_true", help="Run --random-agent headless")
    parser.add_argument(
        "--max-steps",
        type=int,
        default=ENV_CONFIG["max_steps"],
        help="Step limit per --random-agent episode",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        if args.random_agent:
            evaluate_random(
                n_episodes=args.episodes,
                difficulty=args.difficulty,
                character=args.character,
                render=not args.no_render,
                seed=args.seed,
                max_steps=args.max_steps,
            )
            return 0

        leaderboard = Leaderboard.load(args.rankings)
        engine = SimulationEngine(
            args.difficulty,
            args.character,
            player_name=args.name,
            seed=args.seed,
            leaderboard=leaderboard,
        )
    except ValueError as e:
        logger.error(str(e))
        return 2

    from .window import play
    play(engine)
    return 0


if __name__ == "__main__":
    sys.exit(main())
