from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from functools import total_ordering
from typing import List, Optional, Tuple

from .cards import Card, Rank


class HandCategory(IntEnum):
    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    TRIP = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    QUAD = 7
    STRAIGHT_FLUSH = 8


# Number of tie-break ranks each category carries.
RANK_SLOTS = {
    HandCategory.HIGH_CARD: 1,
    HandCategory.PAIR: 1,
    HandCategory.TWO_PAIR: 2,
    HandCategory.TRIP: 1,
    HandCategory.STRAIGHT: 1,
    HandCategory.FLUSH: 5,
    HandCategory.FULL_HOUSE: 2,
    HandCategory.QUAD: 1,
    HandCategory.STRAIGHT_FLUSH: 1,
}


@total_ordering
@dataclass(frozen=True, eq=True)
class HandValue:
    """Best-hand category plus its tie-break ranks, most significant first."""

    category: HandCategory
    ranks: Tuple[Rank, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.category, HandCategory):
            raise ValueError(f"Invalid hand category: {self.category}")
        expected = RANK_SLOTS[self.category]
        if len(self.ranks) != expected:
            raise ValueError(
                f"{self.category.name} takes {expected} rank(s), got {len(self.ranks)}"
            )
        if not all(isinstance(rank, Rank) for rank in self.ranks):
            raise ValueError(f"Invalid ranks: {self.ranks}")

    def compare(self, other: HandValue) -> int:
        # Category decides first; same-category hands fall through to ranks.
        if self.category != other.category:
            return 1 if self.category > other.category else -1
        for mine, theirs in zip(self.ranks, other.ranks):
            if mine != theirs:
                return 1 if mine > theirs else -1
        return 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, HandValue):
            return NotImplemented
        return self.compare(other) < 0

    @property
    def name(self) -> str:
        return self.category.name.lower()

    def describe(self) -> str:
        words = [rank.word for rank in self.ranks]
        if self.category == HandCategory.HIGH_CARD:
            return f"High Card ({words[0]})"
        if self.category == HandCategory.PAIR:
            return f"Pair ({words[0]})"
        if self.category == HandCategory.TWO_PAIR:
            return f"Two Pair ({words[0]} and {words[1]})"
        if self.category == HandCategory.TRIP:
            return f"Three of a Kind ({words[0]})"
        if self.category == HandCategory.STRAIGHT:
            return f"Straight ({words[0]} high)"
        if self.category == HandCategory.FLUSH:
            return f"Flush ({', '.join(words)})"
        if self.category == HandCategory.FULL_HOUSE:
            return f"Full House ({words[0]} over {words[1]})"
        if self.category == HandCategory.QUAD:
            return f"Four of a Kind ({words[0]})"
        return f"Straight Flush ({words[0]} high)"

    def __str__(self) -> str:
        return self.describe()


def high_card(rank: Rank) -> HandValue:
    return HandValue(HandCategory.HIGH_CARD, (rank,))


def pair(rank: Rank) -> HandValue:
    return HandValue(HandCategory.PAIR, (rank,))


def two_pair(high: Rank, low: Rank) -> HandValue:
    return HandValue(HandCategory.TWO_PAIR, (high, low))


def trip(rank: Rank) -> HandValue:
    return HandValue(HandCategory.TRIP, (rank,))


def straight(top: Rank) -> HandValue:
    return HandValue(HandCategory.STRAIGHT, (top,))


def flush(*ranks: Rank) -> HandValue:
    return HandValue(HandCategory.FLUSH, tuple(ranks))


def full_house(trips: Rank, over: Rank) -> HandValue:
    return HandValue(HandCategory.FULL_HOUSE, (trips, over))


def quad(rank: Rank) -> HandValue:
    return HandValue(HandCategory.QUAD, (rank,))


def straight_flush(top: Rank) -> HandValue:
    return HandValue(HandCategory.STRAIGHT_FLUSH, (top,))


@dataclass
class GameConfig:
    player_count: int = 2
    community_size: int = 5
    hole_size: int = 2
    deck_size: int = 52

    @property
    def cards_needed(self) -> int:
        return self.community_size + self.hole_size * self.player_count

    def validate(self) -> None:
        if self.player_count < 1:
            raise ValueError("player_count must be at least 1")
        if self.cards_needed > self.deck_size:
            raise ValueError(
                f"{self.player_count} players need {self.cards_needed} cards; "
                f"the deck only has {self.deck_size}"
            )


@dataclass
class Player:
    # Fresh per deal; flags are filled in once every hand is known.
    hole_cards: List[Card] = field(default_factory=list)
    hand: Optional[HandValue] = None
    winner: bool = False
    degenerate: bool = False
    tied: bool = False


def _format_hand(hand: Optional[HandValue]) -> str:
    return hand.describe() if hand is not None else "None"


@dataclass(frozen=True)
class HandResult:
    community: Tuple[Card, ...]
    players: Tuple[Player, ...]
    community_hand: Optional[HandValue]
    winning_hand: Optional[HandValue]
    winning_tie: bool
    nondegenerate_tie: bool

    @property
    def winners(self) -> List[int]:
        return [idx for idx, player in enumerate(self.players) if player.winner]

    def summary(self) -> str:
        return (
            f"Common: {_format_hand(self.community_hand)}, "
            f"Winning: {_format_hand(self.winning_hand)}, "
            f"Tie: {self.nondegenerate_tie}, Push: {self.winning_tie}"
        )
