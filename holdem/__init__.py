"""Hold'em showdown primitives: cards, hand evaluation and per-deal scoring."""

from .cards import Card, Rank, Suit, new_deck, parse_cards, shuffle
from .evaluator import evaluate_best
from .game import Game
from .models import GameConfig, HandCategory, HandResult, HandValue, Player

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "new_deck",
    "parse_cards",
    "shuffle",
    "evaluate_best",
    "Game",
    "GameConfig",
    "HandCategory",
    "HandResult",
    "HandValue",
    "Player",
]
