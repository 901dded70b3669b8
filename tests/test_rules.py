"""Tests covering trick resolution and arrastre legality."""

from __future__ import annotations

import itertools

import pytest

from guinote import rules
from guinote.cards import Card, Rank, Suit, iter_full_deck

C = Card


def test_trump_follower_takes_points_of_lead() -> None:
    result = rules.resolve_trick(C(Suit.SWORDS, Rank.THREE), Suit.SWORDS, C(Suit.CUPS, Rank.TWO), Suit.CUPS)
    assert result.winner is rules.Role.FOLLOW
    assert result.points_awarded == 10


def test_higher_trump_lead_wins() -> None:
    result = rules.resolve_trick(C(Suit.CUPS, Rank.ACE), Suit.CUPS, C(Suit.CUPS, Rank.THREE), Suit.CUPS)
    assert result.winner is rules.Role.LEAD
    assert result.points_awarded == 21


def test_follower_heading_the_lead_suit_wins() -> None:
    result = rules.resolve_trick(C(Suit.COINS, Rank.KING), Suit.COINS, C(Suit.COINS, Rank.ACE), Suit.CLUBS)
    assert result.winner is rules.Role.FOLLOW
    assert result.points_awarded == 15


def test_discard_of_another_suit_loses_even_with_more_power() -> None:
    result = rules.resolve_trick(C(Suit.COINS, Rank.TWO), Suit.COINS, C(Suit.SWORDS, Rank.ACE), Suit.CLUBS)
    assert result.winner is rules.Role.LEAD
    assert result.points_awarded == 11


def test_lead_suit_must_match_lead_card() -> None:
    with pytest.raises(ValueError):
        rules.resolve_trick(C(Suit.COINS, Rank.TWO), Suit.CUPS, C(Suit.SWORDS, Rank.ACE), Suit.CLUBS)


def test_order_does_not_matter_when_suits_are_comparable() -> None:
    deck = list(iter_full_deck())
    for trump in Suit:
        for a, b in itertools.combinations(deck, 2):
            if a.suit != b.suit and trump not in (a.suit, b.suit):
                continue
            forward = rules.resolve_trick(a, a.suit, b, trump)
            backward = rules.resolve_trick(b, b.suit, a, trump)
            assert (forward.winner is rules.Role.LEAD) == (backward.winner is rules.Role.FOLLOW)
            assert forward.points_awarded == backward.points_awarded



def test_lead_wins_both_orders_for_unrelated_suits() -> None:
    deck = list(iter_full_deck())
    for trump in Suit:
        for a, b in itertools.combinations(deck, 2):
            if a.suit == b.suit or trump in (a.suit, b.suit):
                continue
            assert rules.resolve_trick(a, a.suit, b, trump).winner is rules.Role.LEAD
            assert rules.resolve_trick(b, b.suit, a, trump).winner is rules.Role.LEAD

def test_side_other() -> None:
    assert rules.Side.PLAYER.other is rules.Side.OPPONENT
    assert rules.Side.OPPONENT.other is rules.Side.PLAYER


@pytest.mark.parametrize(
    ("hand", "lead", "stock_exhausted", "expected"),
    [
        # Leading is unrestricted.
        ([C(Suit.CUPS, Rank.TWO), C(Suit.COINS, Rank.ACE)], None, True, [0, 1]),
        # While stock remains, following is unrestricted.
        ([C(Suit.CUPS, Rank.TWO), C(Suit.COINS, Rank.ACE)], C(Suit.COINS, Rank.FOUR), False, [0, 1]),
        # Must head the lead suit when able.
        (
            [C(Suit.SWORDS, Rank.FOUR), C(Suit.SWORDS, Rank.KING), C(Suit.CUPS, Rank.TWO)],
            C(Suit.SWORDS, Rank.SEVEN),
            True,
            [1],
        ),
        # Must follow suit even when unable to head it.
        (
            [C(Suit.SWORDS, Rank.FOUR), C(Suit.SWORDS, Rank.KING), C(Suit.CUPS, Rank.TWO)],
            C(Suit.SWORDS, Rank.THREE),
            True,
            [0, 1],
        ),
        # Void in the lead suit: must trump.
        ([C(Suit.CUPS, Rank.TWO), C(Suit.COINS, Rank.FIVE)], C(Suit.SWORDS, Rank.ACE), True, [0]),
        # Void in both: anything goes.
        ([C(Suit.CLUBS, Rank.TWO), C(Suit.COINS, Rank.FIVE)], C(Suit.SWORDS, Rank.ACE), True, [0, 1]),
        # Trump led: head it with a higher trump.
        (
            [C(Suit.CUPS, Rank.ACE), C(Suit.CUPS, Rank.TWO), C(Suit.SWORDS, Rank.FOUR)],
            C(Suit.CUPS, Rank.THREE),
            True,
            [0],
        ),
    ],
)
def test_legal_plays(hand: list[Card], lead: Card | None, stock_exhausted: bool, expected: list[int]) -> None:
    assert rules.legal_plays(hand, lead, Suit.CUPS, stock_exhausted=stock_exhausted) == expected


def test_legal_plays_on_empty_hand() -> None:
    assert rules.legal_plays([], C(Suit.CUPS, Rank.ACE), Suit.CUPS, stock_exhausted=True) == []
