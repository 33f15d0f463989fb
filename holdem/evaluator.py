from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from .cards import Card, Rank, Suit, count_by_rank, group_ranks_by_count
from .models import (
    HandValue,
    flush,
    full_house,
    high_card,
    pair,
    quad,
    straight,
    straight_flush,
    trip,
    two_pair,
)

HAND_SIZE = 5


def evaluate_best(cards: Sequence[Card]) -> Optional[HandValue]:
    """Return the best hand found in 5+ cards, or None when there are too few."""
    if len(cards) < HAND_SIZE:
        return None
    candidates = [
        value
        for value in (best_multiple(cards), best_straight(cards), best_flush(cards))
        if value is not None
    ]
    if not candidates:
        return None
    return max(candidates)


def best_multiple(cards: Sequence[Card]) -> Optional[HandValue]:
    groups = group_ranks_by_count(count_by_rank(cards))
    quads, trips, pairs, singles = groups[4], groups[3], groups[2], groups[1]

    # Each group is ascending, so the highest rank is always last.
    if quads:
        return quad(quads[-1])
    if len(trips) >= 2:
        return full_house(trips[-1], trips[-2])
    if trips and pairs:
        return full_house(trips[-1], pairs[-1])
    if trips:
        return trip(trips[-1])
    if len(pairs) >= 2:
        return two_pair(pairs[-1], pairs[-2])
    if pairs:
        return pair(pairs[-1])
    if singles:
        return high_card(singles[-1])
    return None


def best_straight(cards: Sequence[Card]) -> Optional[HandValue]:
    if len(cards) < HAND_SIZE:
        return None
    present = {card.rank for card in cards}
    # Ace low: an ace sits in the slot below Two.
    run = 1 if Rank.ACE in present else 0
    best: Optional[HandValue] = None
    for rank in Rank:
        if rank in present:
            run += 1
            if run >= HAND_SIZE:
                best = straight(rank)
        else:
            run = 0
    return best


def split_suits(cards: Sequence[Card]) -> Dict[Suit, List[Card]]:
    suited: Dict[Suit, List[Card]] = {suit: [] for suit in Suit}
    for card in cards:
        suited[card.suit].append(card)
    return suited


def best_flush(cards: Sequence[Card]) -> Optional[HandValue]:
    for suited in split_suits(cards).values():
        if len(suited) < HAND_SIZE:
            continue
        run = best_straight(suited)
        if run is not None:
            return straight_flush(run.ranks[0])
        top = sorted((card.rank for card in suited), reverse=True)[:HAND_SIZE]
        return flush(*top)
    return None
