from __future__ import annotations

import random

import pytest

from guinote import state
from guinote.cards import Card, Rank, Suit
from guinote.deck import Deck
from guinote.rules import InsufficientCards, InvariantViolation, Side


def test_deal_new_round_assigns_hands_and_trump() -> None:
    config = state.GameConfig()
    game_state = state.deal_new_round(config, random.Random(3))

    assert len(game_state.player_hand) == 6
    assert len(game_state.opponent_hand) == 6
    assert len(game_state.deck) == 28
    assert game_state.deck.trump_card == game_state.trump_card
    assert game_state.trump_suit is game_state.trump_card.suit
    assert game_state.screen is state.Screen.MENU
    assert game_state.to_act() is Side.PLAYER
    game_state.check_invariants()


def test_leader_is_dealt_first() -> None:
    deck = Deck([Card(suit, rank) for suit in Suit for rank in Rank.ordered()])
    first_cards = deck.cards[:2]
    game_state = state.deal_new_round(state.GameConfig(hand_size=2), deck=deck, leader=Side.OPPONENT)
    assert game_state.opponent_hand == first_cards
    assert game_state.to_act() is Side.OPPONENT


def test_deal_is_reproducible_for_a_seed() -> None:
    config = state.GameConfig()
    first = state.deal_new_round(config, random.Random(11))
    second = state.deal_new_round(config, random.Random(11))
    assert first.player_hand == second.player_hand
    assert first.trump_card == second.trump_card


@pytest.mark.parametrize("hand_size", [20, 21])
def test_deal_without_a_trump_card_fails(hand_size: int) -> None:
    with pytest.raises(InsufficientCards):
        state.deal_new_round(state.GameConfig(hand_size=hand_size), random.Random(0))


@pytest.mark.parametrize(
    "overrides",
    [
        {"hand_size": 0},
        {"win_threshold": 0},
        {"last_trick_bonus": -1},
        {"min_width": -1},
    ],
)
def test_config_validation(overrides: dict[str, int]) -> None:
    with pytest.raises(ValueError):
        state.GameConfig(**overrides)


def test_invariants_catch_duplicated_card() -> None:
    game_state = state.deal_new_round(state.GameConfig(), random.Random(4))
    game_state.opponent_hand.append(game_state.player_hand[0])
    with pytest.raises(InvariantViolation):
        game_state.check_invariants()


def test_invariants_catch_lost_card() -> None:
    game_state = state.deal_new_round(state.GameConfig(), random.Random(4))
    game_state.player_hand.pop()
    with pytest.raises(InvariantViolation):
        game_state.check_invariants()


def test_table_cards_count_towards_conservation() -> None:
    game_state = state.deal_new_round(state.GameConfig(), random.Random(4))
    game_state.table[Side.PLAYER] = game_state.player_hand.pop(0)
    game_state.check_invariants()
    assert game_state.to_act() is Side.OPPONENT


def test_snapshot_marks_selection_and_is_detached() -> None:
    game_state = state.deal_new_round(state.GameConfig(hand_size=4), random.Random(8))
    game_state.selected = 2

    view = game_state.snapshot()

    assert view.selected_index == 2
    assert [selected for _, selected in view.player_hand] == [False, False, True, False]
    assert view.opponent_card_count == 4
    assert view.score == (0, 0)
    assert view.trump_suit is game_state.trump_suit
    assert view.stock_size == 32
    assert view.player_played is None and view.opponent_played is None
    assert isinstance(view.opponent_hand, tuple)

    game_state.player_hand.clear()
    assert len(view.player_hand) == 4
