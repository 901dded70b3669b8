"""Core game state data structures for Guiñote."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from . import encoding
from .cards import Card, Suit
from .deck import Deck, new_shuffled_deck
from .rules import InsufficientCards, InvariantViolation, Side
from .scoreboard import Score

__all__ = [
    "Screen",
    "GameConfig",
    "CompletedTrick",
    "GameState",
    "TableView",
    "deal_new_round",
]


class Screen(str, Enum):
    """Screens the interface can show; exactly one is active."""

    MENU = "menu"
    PLAYING = "playing"
    ROUND_LOST = "round_lost"
    ROUND_WON = "round_won"
    TERMINAL_TOO_SMALL = "terminal_too_small"


@dataclass(slots=True)
class GameConfig:
    """Runtime configuration for a Guiñote round."""

    hand_size: int = 6
    win_threshold: int = 101
    last_trick_bonus: int = 10
    min_width: int = 35
    min_height: int = 140
    enforce_arrastre: bool = True
    strict: bool = False

    def __post_init__(self) -> None:
        if self.hand_size <= 0:
            raise ValueError("hand_size must be positive")
        if self.win_threshold <= 0:
            raise ValueError("win_threshold must be positive")
        if self.last_trick_bonus < 0:
            raise ValueError("last_trick_bonus must be non-negative")
        if self.min_width < 0 or self.min_height < 0:
            raise ValueError("terminal minimums must be non-negative")


@dataclass(frozen=True, slots=True)
class CompletedTrick:
    """The most recently resolved trick, kept for display."""

    leader: Side
    lead_card: Card
    follow_card: Card
    winner: Side
    points: int


@dataclass(slots=True)
class GameState:
    """Mutable aggregate owned by the engine."""

    config: GameConfig
    deck: Deck
    hands: dict[Side, list[Card]]
    trump_card: Card
    screen: Screen = Screen.MENU
    previous_screen: Screen | None = None
    won: dict[Side, list[Card]] = field(default_factory=lambda: {side: [] for side in Side})
    table: dict[Side, Card | None] = field(default_factory=lambda: {side: None for side in Side})
    score: Score = field(default_factory=Score)
    leader: Side = Side.PLAYER
    selected: int | None = 0
    last_trick: CompletedTrick | None = None
    round_winner: Side | None = None
    round_number: int = 1

    @property
    def trump_suit(self) -> Suit:
        return self.trump_card.suit

    @property
    def player_hand(self) -> list[Card]:
        return self.hands[Side.PLAYER]

    @property
    def opponent_hand(self) -> list[Card]:
        return self.hands[Side.OPPONENT]

    @property
    def stock_exhausted(self) -> bool:
        return len(self.deck) == 0

    def lead_card(self) -> Card | None:
        return self.table[self.leader]

    def to_act(self) -> Side | None:
        """Return whose turn it is, or ``None`` once the trick is full."""

        lead = self.table[self.leader]
        follow = self.table[self.leader.other]
        if lead is None:
            return self.leader
        if follow is None:
            return self.leader.other
        return None

    def round_over(self) -> bool:
        return self.round_winner is not None

    def check_invariants(self) -> None:
        """Verify the 40 cards are split between deck, hands, table and won piles."""

        locations: list[Card] = list(self.deck)
        for side in Side:
            locations.extend(self.hands[side])
            locations.extend(self.won[side])
            played = self.table[side]
            if played is not None:
                locations.append(played)
        try:
            mask = encoding.mask_from_cards(locations)
        except ValueError as exc:
            raise InvariantViolation(str(exc)) from exc
        if mask != encoding.FULL_MASK:
            missing = encoding.cards_from_mask(encoding.FULL_MASK & ~mask)
            labels = ", ".join(card.label() for card in missing)
            raise InvariantViolation(f"cards missing from play: {labels}")
        if self.trump_card in self.deck and self.deck.trump_card != self.trump_card:
            raise InvariantViolation("trump card moved away from the bottom of the stock")

    def snapshot(self) -> "TableView":
        """Return an immutable view of the state for renderers."""

        return TableView(
            screen=self.screen,
            player_hand=tuple((card, idx == self.selected) for idx, card in enumerate(self.player_hand)),
            opponent_hand=tuple(self.opponent_hand),
            score=self.score.as_pair(),
            trump_suit=self.trump_suit,
            trump_card=self.trump_card if not self.stock_exhausted else None,
            player_played=self.table[Side.PLAYER],
            opponent_played=self.table[Side.OPPONENT],
            stock_size=len(self.deck),
            leader=self.leader,
            to_act=self.to_act(),
            last_trick=self.last_trick,
            round_winner=self.round_winner,
            round_number=self.round_number,
            threshold=self.config.win_threshold,
        )


@dataclass(frozen=True, slots=True)
class TableView:
    """Read-only frame data handed to the rendering layer."""

    screen: Screen
    player_hand: tuple[tuple[Card, bool], ...]
    opponent_hand: tuple[Card, ...]
    score: tuple[int, int]
    trump_suit: Suit
    trump_card: Card | None
    player_played: Card | None
    opponent_played: Card | None
    stock_size: int
    leader: Side
    to_act: Side | None
    last_trick: CompletedTrick | None
    round_winner: Side | None
    round_number: int
    threshold: int

    @property
    def opponent_card_count(self) -> int:
        return len(self.opponent_hand)

    @property
    def selected_index(self) -> int | None:
        for idx, (_, selected) in enumerate(self.player_hand):
            if selected:
                return idx
        return None


def deal_new_round(
    config: GameConfig,
    rng: random.Random | None = None,
    *,
    leader: Side = Side.PLAYER,
    round_number: int = 1,
    deck: Deck | None = None,
) -> GameState:
    """Shuffle and deal a fresh round returning an initialised ``GameState``.

    The card left at the bottom of the stock after dealing is turned face up
    and fixes the trump suit for the round.
    """

    stock = deck if deck is not None else new_shuffled_deck(rng)
    hands: dict[Side, list[Card]] = {}
    for side in (leader, leader.other):
        hands[side] = stock.deal(config.hand_size)
    trump_card = stock.trump_card
    if trump_card is None:
        raise InsufficientCards("no card left to turn up as trump")
    return GameState(
        config=config,
        deck=stock,
        hands={side: hands[side] for side in Side},
        trump_card=trump_card,
        leader=leader,
        selected=0,
        round_number=round_number,
    )


def hand_labels(cards: Sequence[Card]) -> str:
    return " ".join(card.label() for card in cards)
