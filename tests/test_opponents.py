from __future__ import annotations

import random

import pytest

from guinote.cards import Card, Rank, Suit
from guinote.opponents import RandomOpponent

HAND = [Card(Suit.SWORDS, Rank.ACE), Card(Suit.CUPS, Rank.TWO), Card(Suit.COINS, Rank.KING)]


def test_random_opponent_only_picks_legal_indices() -> None:
    opponent = RandomOpponent(random.Random(4))
    picks = {
        opponent.choose(HAND, [0, 2], lead_card=None, trump_suit=Suit.CUPS)
        for _ in range(50)
    }
    assert picks == {0, 2}


def test_random_opponent_is_reproducible() -> None:
    first = RandomOpponent(random.Random(9))
    second = RandomOpponent(random.Random(9))
    legal = [0, 1, 2]
    lead = Card(Suit.CLUBS, Rank.SEVEN)
    assert [first.choose(HAND, legal, lead_card=lead, trump_suit=Suit.COINS) for _ in range(10)] == [
        second.choose(HAND, legal, lead_card=lead, trump_suit=Suit.COINS) for _ in range(10)
    ]


def test_random_opponent_rejects_empty_legal_set() -> None:
    with pytest.raises(ValueError):
        RandomOpponent(random.Random(0)).choose(HAND, [], lead_card=None, trump_suit=Suit.CUPS)
