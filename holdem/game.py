from __future__ import annotations

import logging
import random
from collections import Counter
from typing import List, Optional, Sequence, Set

from .cards import Card, deal, new_deck, shuffle
from .evaluator import evaluate_best
from .models import GameConfig, HandResult, HandValue, Player

# Game deals and scores one hand at a time. There is no betting here, only
# who holds the best hand and whether anyone shares it.

LOGGER = logging.getLogger("holdem.game")


class Game:
    """Deck-backed showdown simulator for a fixed number of players."""

    def __init__(
        self,
        player_count: int,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        self.config = GameConfig(player_count=player_count)
        self.config.validate()
        self.rng = rng if rng is not None else random.Random(seed)
        self.deck: List[Card] = new_deck()
        self.hands_played = 0

    @property
    def player_count(self) -> int:
        return self.config.player_count

    # Deal lifecycle --------------------------------------------------

    def play_hand(self) -> Optional[HandResult]:
        shuffle(self.deck, self.rng)
        if len(self.deck) < self.config.cards_needed:
            LOGGER.warning(
                "Deck holds %s cards but %s players need %s; skipping deal",
                len(self.deck),
                self.player_count,
                self.config.cards_needed,
            )
            return None

        # Work on a copy so the deck keeps all its cards for the next shuffle.
        remaining = list(self.deck)
        community = deal(remaining, self.config.community_size)
        holes = [deal(remaining, self.config.hole_size) for _ in range(self.player_count)]

        result = self.evaluate_deal(community, holes)
        self.hands_played += 1
        LOGGER.debug("Hand %s: %s", self.hands_played, result.summary())
        return result

    def evaluate_deal(self, community: Sequence[Card], holes: Sequence[Sequence[Card]]) -> HandResult:
        """Score fixed community and hole cards without touching the deck."""
        players: List[Player] = []
        for hole in holes:
            cards = sorted([*hole, *community], key=lambda card: card.rank)
            players.append(Player(hole_cards=list(hole), hand=evaluate_best(cards)))

        community_hand = evaluate_best(community)
        hands = [player.hand for player in players if player.hand is not None]
        winning_hand = max(hands) if hands else None
        tied = tied_values(hands)

        for player in players:
            if player.hand is None:
                continue
            player.tied = player.hand in tied
            player.winner = player.hand == winning_hand
            player.degenerate = player.hand == community_hand

        winning_tie = winning_hand is not None and winning_hand in tied
        nondegenerate_tie = any(hand != community_hand for hand in tied)

        return HandResult(
            community=tuple(community),
            players=tuple(players),
            community_hand=community_hand,
            winning_hand=winning_hand,
            winning_tie=winning_tie,
            nondegenerate_tie=nondegenerate_tie,
        )


def tied_values(hands: Sequence[HandValue]) -> Set[HandValue]:
    counts = Counter(hands)
    return {hand for hand, count in counts.items() if count > 1}
