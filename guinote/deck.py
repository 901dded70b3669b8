"""Deck construction, shuffling and dealing."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Iterator

from .cards import Card, iter_full_deck
from .rules import EmptyDeck, InsufficientCards

__all__ = ["Deck", "new_shuffled_deck"]


@dataclass(slots=True)
class Deck:
    """Ordered stock of cards; index 0 is the top."""

    cards: list[Card] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    @property
    def trump_card(self) -> Card | None:
        """The face-up card at the bottom, drawn last."""

        return self.cards[-1] if self.cards else None

    def deal(self, count: int) -> list[Card]:
        """Remove and return the first ``count`` cards."""

        if count < 0 or count > len(self.cards):
            raise InsufficientCards(f"cannot deal {count} card(s) from a deck of {len(self.cards)}")
        hand = self.cards[:count]
        del self.cards[:count]
        return hand

    def draw(self) -> Card:
        """Remove and return the top card."""

        if not self.cards:
            raise EmptyDeck("the stock is exhausted")
        return self.cards.pop(0)


def new_shuffled_deck(rng: random.Random | None = None) -> Deck:
    """Return the 40-card deck in a uniformly random order.

    ``random.Random.shuffle`` is a Fisher-Yates shuffle, so every permutation
    is equally likely; pass a seeded ``rng`` for reproducible deals.
    """

    cards = list(iter_full_deck())
    (rng or random.Random()).shuffle(cards)
    return Deck(cards)
