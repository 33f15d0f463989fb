import random

import pytest

from holdem.cards import (
    Card,
    Rank,
    Suit,
    cards_to_labels,
    count_by_rank,
    deal,
    group_ranks_by_count,
    new_deck,
    parse_cards,
    parse_label,
    shuffle,
)


def test_new_deck_holds_every_card_once():
    deck = new_deck()
    assert len(deck) == 52
    assert len(set(deck)) == 52
    assert {(card.rank, card.suit) for card in deck} == {(rank, suit) for rank in Rank for suit in Suit}


def test_new_deck_order_is_canonical():
    deck = new_deck()
    assert deck[0] == Card(Rank.TWO, Suit.SPADE)
    assert deck[12] == Card(Rank.ACE, Suit.SPADE)
    assert deck[13] == Card(Rank.TWO, Suit.HEART)
    assert deck[-1] == Card(Rank.ACE, Suit.DIAMOND)
    assert new_deck() == deck


def test_shuffle_permutes_without_resampling():
    deck = new_deck()
    rng = random.Random(1234)
    for _ in range(50):
        shuffle(deck, rng)
        assert len(deck) == 52
        assert set(deck) == set(new_deck())
    assert deck != new_deck()


def test_shuffle_is_reproducible_with_seeded_source():
    first, second = new_deck(), new_deck()
    shuffle(first, random.Random(7))
    shuffle(second, random.Random(7))
    assert first == second


def test_count_by_rank_covers_all_ranks():
    counts = count_by_rank(parse_cards(["Ah", "Ad", "Kc", "2s", "2h", "2d"]))
    assert len(counts) == 13
    assert counts[Rank.ACE] == 2
    assert counts[Rank.KING] == 1
    assert counts[Rank.TWO] == 3
    assert counts[Rank.SEVEN] == 0


def test_group_ranks_by_count_orders_ranks_ascending():
    counts = count_by_rank(parse_cards(["Ah", "Ad", "9c", "9s", "4h", "4d", "Kc"]))
    groups = group_ranks_by_count(counts)
    assert len(groups) == 5
    assert groups[2] == [Rank.FOUR, Rank.NINE, Rank.ACE]
    assert groups[1] == [Rank.KING]
    assert groups[3] == [] and groups[4] == []
    assert len(groups[0]) == 9


def test_card_labels_round_trip_through_parser():
    labels = ["As", "Th", "2c", "Qd"]
    assert cards_to_labels(parse_cards(labels)) == labels
    assert parse_label("ah") == Card(Rank.ACE, Suit.HEART)


def test_card_validation_rejects_invalid_values():
    with pytest.raises(ValueError, match="Invalid rank"):
        Card("A", Suit.HEART)  # type: ignore[arg-type]
    with pytest.raises(ValueError, match="Invalid suit"):
        Card(Rank.ACE, "x")  # type: ignore[arg-type]
    with pytest.raises(ValueError, match="Invalid rank"):
        parse_label("1h")
    with pytest.raises(ValueError, match="Invalid suit"):
        parse_label("Ax")
    with pytest.raises(ValueError, match="Invalid card label"):
        parse_label("10h")


def test_deal_removes_cards_and_raises_when_exhausted():
    deck = parse_cards(["Ah", "Kd", "Qc"])
    assert deal(deck, 2) == parse_cards(["Ah", "Kd"])
    assert deck == parse_cards(["Qc"])
    with pytest.raises(ValueError, match="Not enough cards"):
        deal(deck, 2)
