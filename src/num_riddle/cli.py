"""
cli.py - terminal front-end for the number riddle.

Usage:
    python -m num_riddle.cli <command> [options]

Commands:
    play        Play a game, one guess per line on stdin
    bench       Let the automated players solve many games and report stats

Examples:
    python -m num_riddle.cli play --seed 7
    python -m num_riddle.cli play --min 100 --max 999
    python -m num_riddle.cli bench --games 50
"""

import argparse
import logging
import sys
from typing import List, TextIO

from .config import GameConfig
from .env import RiddleEnv
from .experiments import run_games
from .logging_config import setup_logging
from .state import GuessResult


def format_result(result: GuessResult) -> List[str]:
    lines = [f"Current guess: {result.displayed_guess}"]
    if result.won:
        lines.append("You win!")
    for shown in result.conditions:
        mark = "[x]" if shown.satisfied else "[ ]"
        lines.append(f"{mark} {shown.text}")
    return lines


def play(env: RiddleEnv, stdin: TextIO, stdout: TextIO) -> bool:
    """Feed lines from `stdin` to the game until it is won or input runs out."""
    print("Guess the Number", file=stdout)
    for line in stdin:
        result = env.on_guess(line.rstrip("\n"))
        print("\n".join(format_result(result)), file=stdout)
        if result.won:
            return True
    return False


def _config(args) -> GameConfig:
    return GameConfig(secret_min=args.min, secret_max=args.max)


def cmd_play(args):
    env = RiddleEnv(config=args.config, seed=args.seed)
    env.reset()
    won = play(env, sys.stdin, sys.stdout)
    return 0 if won else 1


def cmd_bench(args):
    run_games.main(n_games=args.games, seed=args.seed, config=args.config)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="num_riddle",
        description="Guess the number from progressively revealed conditions.",
    )
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = parser.add_subparsers(dest="command", required=True)

    for name, func, help_text in (
        ("play", cmd_play, "Play interactively"),
        ("bench", cmd_bench, "Benchmark the automated players"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("--seed", type=int, default=None,
                       help="Seed for the secret and conditions (random if omitted)")
        p.add_argument("--min", type=int, default=100, help="Smallest possible secret")
        p.add_argument("--max", type=int, default=9999, help="Largest possible secret")
        p.set_defaults(func=func)

    bench = sub.choices["bench"]
    bench.add_argument("--games", type=int, default=100, help="Number of games to play")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.config = _config(args)
    except ValueError as e:
        parser.error(str(e))
    setup_logging(getattr(logging, args.log_level))
    if args.command == "bench" and args.seed is None:
        args.seed = 0
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
