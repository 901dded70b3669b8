"""Card abstractions and rank tables for Guiñote."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final, Iterable


class Suit(str, Enum):
    """Enumeration of the four suits in a Spanish deck."""

    SWORDS = "espadas"
    CLUBS = "bastos"
    CUPS = "copas"
    COINS = "oros"


class Rank(str, Enum):
    """Enumeration of the ten ranks of the 40-card Spanish deck."""

    ACE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    JACK = "10"
    KNIGHT = "11"
    KING = "12"

    @classmethod
    def ordered(cls) -> tuple["Rank", ...]:
        """Return ranks in deck (pip) order."""

        return (
            cls.ACE,
            cls.TWO,
            cls.THREE,
            cls.FOUR,
            cls.FIVE,
            cls.SIX,
            cls.SEVEN,
            cls.JACK,
            cls.KNIGHT,
            cls.KING,
        )


POINTS: Final[dict[Rank, int]] = {
    Rank.ACE: 11,
    Rank.THREE: 10,
    Rank.KING: 4,
    Rank.KNIGHT: 3,
    Rank.JACK: 2,
    Rank.SEVEN: 0,
    Rank.SIX: 0,
    Rank.FIVE: 0,
    Rank.FOUR: 0,
    Rank.TWO: 0,
}

# Trick strength only; ordering differs from POINTS (Jack > Knight).
KILL_POWER: Final[dict[Rank, int]] = {
    Rank.ACE: 12,
    Rank.THREE: 11,
    Rank.KING: 10,
    Rank.JACK: 9,
    Rank.KNIGHT: 8,
    Rank.SEVEN: 7,
    Rank.SIX: 6,
    Rank.FIVE: 5,
    Rank.FOUR: 4,
    Rank.TWO: 3,
}

RANK_NAMES: Final[dict[Rank, str]] = {
    Rank.ACE: "As",
    Rank.TWO: "Dos",
    Rank.THREE: "Tres",
    Rank.FOUR: "Cuatro",
    Rank.FIVE: "Cinco",
    Rank.SIX: "Seis",
    Rank.SEVEN: "Siete",
    Rank.JACK: "Sota",
    Rank.KNIGHT: "Caballo",
    Rank.KING: "Rey",
}

RANK_SHORT: Final[dict[Rank, str]] = {
    Rank.ACE: "A",
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.JACK: "S",
    Rank.KNIGHT: "C",
    Rank.KING: "R",
}

SUIT_NAMES: Final[dict[Suit, str]] = {
    Suit.SWORDS: "Espadas",
    Suit.CLUBS: "Bastos",
    Suit.CUPS: "Copas",
    Suit.COINS: "Oros",
}


@dataclass(frozen=True, slots=True)
class Card:
    """Value object describing a physical Spanish card."""

    suit: Suit
    rank: Rank

    @property
    def points(self) -> int:
        return point_value(self)

    @property
    def power(self) -> int:
        return kill_power(self)

    def name(self) -> str:
        """Return the long Spanish name, e.g. ``Tres de Copas``."""

        return f"{RANK_NAMES[self.rank]} de {SUIT_NAMES[self.suit]}"

    def label(self) -> str:
        """Create a compact label suitable for CLI representations."""

        return f"{RANK_SHORT[self.rank]}{self.suit.value[0].upper()}"


def point_value(card: Card) -> int:
    """Return the score value of ``card`` when won in a trick."""

    return POINTS[card.rank]


def kill_power(card: Card) -> int:
    """Return the trick-winning strength of ``card``."""

    return KILL_POWER[card.rank]


def is_trump(card: Card, trump_suit: Suit) -> bool:
    return card.suit == trump_suit


def resolves_against(own: Card, opponent: Card, trump_suit: Suit, *, own_led: bool) -> bool:
    """Return ``True`` when ``own`` beats ``opponent`` under ``trump_suit``.

    ``own_led`` tells whether ``own`` opened the trick; it only matters when
    the cards are of different suits and neither is trump, in which case the
    led card wins regardless of kill power.
    """

    own_trump = is_trump(own, trump_suit)
    opponent_trump = is_trump(opponent, trump_suit)
    if own_trump and not opponent_trump:
        return True
    if opponent_trump and not own_trump:
        return False
    if own.suit == opponent.suit:
        return kill_power(own) > kill_power(opponent)
    return own_led


def iter_full_deck() -> Iterable[Card]:
    """Yield all 40 cards in suit-major, pip order."""

    for suit in Suit:
        for rank in Rank.ordered():
            yield Card(suit=suit, rank=rank)
