"""Headless self-play harness driving ``GameEngine`` through its commands."""

from __future__ import annotations

import random
from dataclasses import dataclass

from . import actions
from .engine import GameEngine
from .opponents import OpponentPolicy, RandomOpponent
from .rules import Side
from .scoreboard import MatchHistory, SideMatchTotal
from .state import GameConfig, Screen

__all__ = ["SelfPlayReport", "play_round", "run_self_play"]

TURN_LIMIT = 64


@dataclass(frozen=True, slots=True)
class SelfPlayReport:
    """Summary of a self-play session."""

    history: MatchHistory
    player: SideMatchTotal
    opponent: SideMatchTotal


def play_round(engine: GameEngine, player_policy: OpponentPolicy) -> Side:
    """Play the engine's current round to completion and return the winner."""

    if engine.state.screen is Screen.MENU:
        engine.dispatch(actions.AdvanceScreen())

    for _ in range(TURN_LIMIT):
        game_state = engine.state
        if game_state.screen is not Screen.PLAYING:
            break
        legal = engine.legal_indices(Side.PLAYER)
        index = player_policy.choose(
            list(game_state.player_hand),
            legal,
            lead_card=None if game_state.leader is Side.PLAYER else game_state.lead_card(),
            trump_suit=game_state.trump_suit,
        )
        engine.dispatch(actions.SelectCard(index))
        engine.dispatch(actions.PlaySelectedCard())
    else:
        raise RuntimeError("round did not finish within the turn limit")

    winner = engine.state.round_winner
    if winner is None:
        raise RuntimeError(f"round stopped on screen {engine.state.screen.value} without a winner")
    return winner


def run_self_play(
    rounds: int,
    *,
    seed: int = 123,
    config: GameConfig | None = None,
) -> SelfPlayReport:
    """Play ``rounds`` random-vs-random rounds and return aggregate results."""

    if rounds <= 0:
        raise ValueError("rounds must be positive")

    rng = random.Random(seed)
    engine = GameEngine(config, rng=rng, opponent=RandomOpponent(random.Random(rng.random())))
    player_policy = RandomOpponent(random.Random(rng.random()))

    for round_number in range(1, rounds + 1):
        play_round(engine, player_policy)
        if round_number < rounds:
            engine.dispatch(actions.AdvanceScreen())

    player_total, opponent_total = engine.history.totals()
    return SelfPlayReport(history=engine.history, player=player_total, opponent=opponent_total)
