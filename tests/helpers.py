from __future__ import annotations

import itertools
import random
from typing import List, Sequence

from holdem.cards import Card, new_deck, parse_cards
from holdem.game import Game
from holdem.models import HandResult


def create_game(players: int = 3, seed: int = 42) -> Game:
    """Instantiate a game with a seeded shuffle source."""
    return Game(players, rng=random.Random(seed))


def score_board(community: str, *holes: str) -> HandResult:
    """Score fixed cards, e.g. ``score_board("2h 2d 7s 9c Kd", "2c 2s", "Ks Kc")``."""
    game = Game(max(len(holes), 1))
    return game.evaluate_deal(parse_cards(community.split()), [parse_cards(hole.split()) for hole in holes])


def random_cards(rng: random.Random, count: int) -> List[Card]:
    deck = new_deck()
    rng.shuffle(deck)
    return deck[:count]


def reference_category(cards: Sequence[Card]) -> int:
    """Brute-force category (0 high card .. 8 straight flush) over every 5-card subset."""
    return max(_five_card_category(combo) for combo in itertools.combinations(cards, 5))


def _five_card_category(cards: Sequence[Card]) -> int:
    values = sorted(int(card.rank) for card in cards)
    is_flush = len({card.suit for card in cards}) == 1
    distinct = sorted(set(values))
    is_straight = len(distinct) == 5 and (distinct[-1] - distinct[0] == 4 or distinct == [2, 3, 4, 5, 14])
    counts = sorted((values.count(value) for value in distinct), reverse=True)

    if is_straight and is_flush:
        return 8
    if counts[0] == 4:
        return 7
    if counts[:2] == [3, 2]:
        return 6
    if is_flush:
        return 5
    if is_straight:
        return 4
    if counts[0] == 3:
        return 3
    if counts[:2] == [2, 2]:
        return 2
    if counts[0] == 2:
        return 1
    return 0
