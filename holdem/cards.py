from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, Iterable, List, Sequence

RANKS = "23456789TJQKA"
SUITS = "shcd"


class Rank(IntEnum):
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def label(self) -> str:
        return RANKS[self - 2]

    @property
    def word(self) -> str:
        return self.name.capitalize()


class Suit(Enum):
    SPADE = "s"
    HEART = "h"
    CLUB = "c"
    DIAMOND = "d"

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class Card:
    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        if not isinstance(self.rank, Rank):
            raise ValueError(f"Invalid rank: {self.rank}")
        if not isinstance(self.suit, Suit):
            raise ValueError(f"Invalid suit: {self.suit}")

    @property
    def label(self) -> str:
        return f"{self.rank.label}{self.suit.label}"

    def __str__(self) -> str:
        return self.label


def new_deck() -> List[Card]:
    """All 52 cards, rank varying fastest inside each suit block."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


def shuffle(deck: List[Card], rng: random.Random) -> None:
    # random.Random.shuffle is Fisher-Yates: uniform over all permutations.
    rng.shuffle(deck)


def deal(deck: List[Card], count: int) -> List[Card]:
    if len(deck) < count:
        raise ValueError("Not enough cards left in deck")
    cards = deck[:count]
    del deck[:count]
    return cards


def count_by_rank(cards: Iterable[Card]) -> Dict[Rank, int]:
    counts = {rank: 0 for rank in Rank}
    for card in cards:
        counts[card.rank] += 1
    return counts


def group_ranks_by_count(counts: Dict[Rank, int]) -> List[List[Rank]]:
    """Index ``n`` holds the ranks seen exactly ``n`` times, lowest first."""
    groups: List[List[Rank]] = [[] for _ in range(5)]
    for rank in Rank:
        groups[counts.get(rank, 0)].append(rank)
    return groups


def cards_to_labels(cards: Sequence[Card]) -> List[str]:
    return [card.label for card in cards]


def parse_label(label: str) -> Card:
    if len(label) != 2:
        raise ValueError(f"Invalid card label: {label}")
    rank_char, suit_char = label[0].upper(), label[1].lower()
    if rank_char not in RANKS:
        raise ValueError(f"Invalid rank: {label[0]}")
    if suit_char not in SUITS:
        raise ValueError(f"Invalid suit: {label[1]}")
    return Card(Rank(RANKS.index(rank_char) + 2), Suit(suit_char))


def parse_cards(labels: Sequence[str]) -> List[Card]:
    return [parse_label(label) for label in labels]
