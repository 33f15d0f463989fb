from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional

from holdem.game import Game
from holdem.models import HandResult

LOGGER = logging.getLogger("simulator")


@dataclass
class SimulationStats:
    hands_played: int = 0
    real_ties: int = 0
    winning_ties: int = 0

    def record(self, result: HandResult) -> None:
        self.hands_played += 1
        if result.nondegenerate_tie:
            self.real_ties += 1
        if result.winning_tie:
            self.winning_ties += 1

    @property
    def tie_rate(self) -> float:
        return self.real_ties / self.hands_played if self.hands_played else 0.0

    @property
    def push_rate(self) -> float:
        return self.winning_ties / self.hands_played if self.hands_played else 0.0

    def summary(self) -> str:
        return f"Results!! {self.real_ties} Ties, {self.winning_ties} pushes out of {self.hands_played} Hands"


def run_simulation(player_count: int, hand_count: int, seed: Optional[int] = None) -> SimulationStats:
    """Play ``hand_count`` deals at a table of ``player_count`` and tally the outcomes."""

    game = Game(player_count, rng=random.Random(seed))
    stats = SimulationStats()
    LOGGER.info("Simulating %s hands with %s players", hand_count, player_count)
    for _ in range(hand_count):
        result = game.play_hand()
        if result is None:
            continue
        stats.record(result)
    LOGGER.info(
        "Finished %s hands: tie rate %.4f, push rate %.4f",
        stats.hands_played,
        stats.tie_rate,
        stats.push_rate,
    )
    return stats
