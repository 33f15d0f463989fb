from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from holdem.models import GameConfig

from .stats import LOGGER, run_simulation


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Estimate Texas Hold'em tie and push rates")
    parser.add_argument("players", type=positive_int, help="Players dealt in per hand")
    parser.add_argument("hands", type=positive_int, help="Number of hands to simulate")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible run")
    parser.add_argument("--log-level", default="INFO")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)
    # Reject impossible tables before any simulation state exists.
    try:
        GameConfig(player_count=args.players).validate()
    except ValueError as exc:
        parser.error(str(exc))
    return args


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    print("Lets Play!")
    try:
        stats = run_simulation(args.players, args.hands, seed=args.seed)
    except KeyboardInterrupt:
        LOGGER.info("Simulation interrupted; shutting down")
        return
    print(stats.summary())


if __name__ == "__main__":
    main()
