"""Opponent move selection hooks."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Protocol, Sequence

from .cards import Card, Suit


class OpponentPolicy(Protocol):
    """Chooses the opponent's card; must return one of ``legal``."""

    def choose(
        self,
        hand: Sequence[Card],
        legal: Sequence[int],
        *,
        lead_card: Card | None,
        trump_suit: Suit,
    ) -> int: ...


@dataclass(slots=True)
class RandomOpponent:
    """Plays a uniformly random legal card."""

    rng: random.Random = field(default_factory=random.Random)

    def choose(
        self,
        hand: Sequence[Card],
        legal: Sequence[int],
        *,
        lead_card: Card | None,
        trump_suit: Suit,
    ) -> int:
        if not legal:
            raise ValueError("no legal card to choose from")
        return self.rng.choice(list(legal))
