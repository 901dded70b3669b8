"""Rule utilities, trick resolution and error taxonomy for Guiñote."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from .cards import Card, Suit, is_trump, point_value, resolves_against

__all__ = [
    "Side",
    "Role",
    "TrickResult",
    "InsufficientCards",
    "EmptyDeck",
    "InvalidSelection",
    "IllegalPlay",
    "InvariantViolation",
    "resolve_trick",
    "legal_plays",
]


class Side(str, Enum):
    """The two seats at the table."""

    PLAYER = "player"
    OPPONENT = "opponent"

    @property
    def other(self) -> "Side":
        return Side.OPPONENT if self is Side.PLAYER else Side.PLAYER


class Role(str, Enum):
    """Position of a card within a trick."""

    LEAD = "lead"
    FOLLOW = "follow"


class InsufficientCards(RuntimeError):
    """Raised when a deal asks for more cards than the deck holds."""


class EmptyDeck(RuntimeError):
    """Raised when drawing from an exhausted stock."""


class InvalidSelection(ValueError):
    """Raised when a hand index is out of range."""


class IllegalPlay(RuntimeError):
    """Raised when a card is played out of turn or against the arrastre rules."""


class InvariantViolation(AssertionError):
    """Raised when a card is found in two places, or missing altogether."""


@dataclass(frozen=True, slots=True)
class TrickResult:
    """Outcome of a resolved trick."""

    winner: Role
    points_awarded: int


def resolve_trick(lead_card: Card, lead_suit: Suit, follow_card: Card, trump_suit: Suit) -> TrickResult:
    """Return the winner of a two-card trick and the points it carries.

    The led card wins unless the follower plays a higher card of the lead
    suit, or trumps a non-trump lead. Both cards' points go to the winner.
    """

    if lead_card.suit != lead_suit:
        raise ValueError("lead_suit must match the suit of lead_card")
    follow_wins = resolves_against(follow_card, lead_card, trump_suit, own_led=False)
    return TrickResult(
        winner=Role.FOLLOW if follow_wins else Role.LEAD,
        points_awarded=point_value(lead_card) + point_value(follow_card),
    )


def _beats(card: Card, lead_card: Card, trump_suit: Suit) -> bool:
    return resolves_against(card, lead_card, trump_suit, own_led=False)


def legal_plays(
    hand: Sequence[Card],
    lead_card: Card | None,
    trump_suit: Suit,
    *,
    stock_exhausted: bool,
) -> list[int]:
    """Return the hand indices that may legally be played.

    Leading, or following while the stock still has cards, is unrestricted.
    During arrastre the follower must head the lead suit when able, else
    follow it, else trump, else play anything.
    """

    everything = list(range(len(hand)))
    if lead_card is None or not stock_exhausted:
        return everything

    same_suit = [idx for idx in everything if hand[idx].suit == lead_card.suit]
    if same_suit:
        heading = [idx for idx in same_suit if hand[idx].power > lead_card.power]
        return heading or same_suit

    trumps = [idx for idx in everything if is_trump(hand[idx], trump_suit)]
    if trumps:
        winning = [idx for idx in trumps if _beats(hand[idx], lead_card, trump_suit)]
        return winning or trumps
    return everything
