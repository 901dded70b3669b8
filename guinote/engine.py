"""Game state machine: command dispatch, trick flow and screen transitions."""

from __future__ import annotations

import random

from loguru import logger

from . import actions
from .opponents import OpponentPolicy, RandomOpponent
from .rules import (
    EmptyDeck,
    IllegalPlay,
    InvalidSelection,
    InvariantViolation,
    Role,
    Side,
    legal_plays,
    resolve_trick,
)
from .scoreboard import MatchHistory, RoundSummary
from .state import CompletedTrick, GameConfig, GameState, Screen, TableView, deal_new_round, hand_labels

__all__ = ["GameEngine", "terminal_fits"]


def terminal_fits(width: int, height: int, min_width: int = 35, min_height: int = 140) -> bool:
    """Return ``True`` when a ``width`` x ``height`` terminal can host the game."""

    return width >= min_width and height >= min_height


class GameEngine:
    """Owns the ``GameState`` and applies every command to it.

    The opponent is asked for a card whenever it is its turn after a player
    command, so a single ``PlaySelectedCard`` may resolve the trick and also
    produce the opponent's next lead.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        *,
        rng: random.Random | None = None,
        opponent: OpponentPolicy | None = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rng = rng or random.Random()
        self.opponent: OpponentPolicy = opponent or RandomOpponent(random.Random(self.rng.random()))
        self.history = MatchHistory()
        self.exit_requested = False
        self.state = self._deal(round_number=1)

    # ------------------------------------------------------------------
    # Command boundary
    # ------------------------------------------------------------------
    def dispatch(self, command: actions.Command) -> TableView:
        """Apply ``command`` and return the resulting frame snapshot."""

        if isinstance(command, actions.Quit):
            logger.info("Quit requested")
            self.exit_requested = True
        elif isinstance(command, actions.TerminalResized):
            self.handle_resize(command.width, command.height)
        elif self.state.screen is Screen.TERMINAL_TOO_SMALL:
            logger.debug("Ignoring {} while the terminal is too small", type(command).__name__)
        elif isinstance(command, actions.SelectCard):
            self.select_card(command.index)
        elif isinstance(command, actions.MoveSelection):
            self.move_selection(command.delta)
        elif isinstance(command, actions.PlaySelectedCard):
            self.play_selected_card()
        elif isinstance(command, actions.AdvanceScreen):
            self.advance_screen()
        else:
            raise TypeError(f"unknown command {command!r}")
        if self.config.strict:
            self.state.check_invariants()
        return self.snapshot()

    def snapshot(self) -> TableView:
        return self.state.snapshot()

    # ------------------------------------------------------------------
    # Screen transitions
    # ------------------------------------------------------------------
    def advance_screen(self) -> bool:
        if self.state.screen is Screen.MENU:
            return self.advance_to_game()
        if self.state.round_over():
            self.start_next_round()
            return True
        return False

    def advance_to_game(self) -> bool:
        """Menu -> Playing; a no-op from any other screen."""

        if self.state.screen is not Screen.MENU:
            return False
        self.state.screen = Screen.PLAYING
        logger.info("Round {} started", self.state.round_number)
        self._run_opponent()
        return True

    def start_next_round(self) -> None:
        """Deal a fresh round and return to the menu."""

        round_number = self.state.round_number + 1
        self.state = self._deal(round_number=round_number)

    def handle_resize(self, width: int, height: int) -> bool:
        """Route to or from the too-small screen; return ``True`` on a transition."""

        fits = terminal_fits(width, height, self.config.min_width, self.config.min_height)
        current = self.state.screen
        if not fits and current is not Screen.TERMINAL_TOO_SMALL:
            logger.debug("Terminal {}x{} below minimum", width, height)
            self.state.previous_screen = current
            self.state.screen = Screen.TERMINAL_TOO_SMALL
            return True
        if fits and current is Screen.TERMINAL_TOO_SMALL:
            self.state.screen = self.state.previous_screen or Screen.MENU
            self.state.previous_screen = None
            return True
        return False

    # ------------------------------------------------------------------
    # Playing commands
    # ------------------------------------------------------------------
    def select_card(self, index: int) -> bool:
        """Move the cursor to ``index``; out-of-range indices are ignored."""

        if self.state.screen is not Screen.PLAYING:
            return False
        try:
            self._check_index(Side.PLAYER, index)
        except InvalidSelection as exc:
            logger.debug("Selection ignored: {}", exc)
            return False
        self.state.selected = index
        return True

    def move_selection(self, delta: int) -> bool:
        hand = self.state.player_hand
        if self.state.screen is not Screen.PLAYING or not hand:
            return False
        current = self.state.selected if self.state.selected is not None else 0
        return self.select_card((current + delta) % len(hand))

    def play_selected_card(self) -> bool:
        """Play the card under the cursor if it is the player's turn and legal."""

        if self.state.screen is not Screen.PLAYING or self.state.selected is None:
            return False
        try:
            self._play(Side.PLAYER, self.state.selected)
        except (IllegalPlay, InvalidSelection) as exc:
            logger.debug("Play ignored: {}", exc)
            return False
        self._run_opponent()
        return True

    def play_opponent_card(self, index: int) -> None:
        """Apply the opponent collaborator's choice; illegal choices propagate."""

        self._play(Side.OPPONENT, index)

    def legal_indices(self, side: Side) -> list[int]:
        hand = self.state.hands[side]
        if not self.config.enforce_arrastre:
            return list(range(len(hand)))
        lead = None if side is self.state.leader else self.state.lead_card()
        return legal_plays(hand, lead, self.state.trump_suit, stock_exhausted=self.state.stock_exhausted)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _deal(self, *, round_number: int) -> GameState:
        leader = Side.PLAYER if round_number % 2 == 1 else Side.OPPONENT
        game_state = deal_new_round(self.config, self.rng, leader=leader, round_number=round_number)
        logger.info(
            "Round {} dealt: trump {} ({}), {} leads",
            round_number,
            game_state.trump_suit.value,
            game_state.trump_card.name(),
            leader.value,
        )
        logger.debug("Player hand: {}", hand_labels(game_state.player_hand))
        return game_state

    def _check_index(self, side: Side, index: int) -> None:
        size = len(self.state.hands[side])
        if not 0 <= index < size:
            raise InvalidSelection(f"index {index} outside a hand of {size} card(s)")

    def _play(self, side: Side, index: int) -> None:
        if self.state.screen is not Screen.PLAYING:
            raise IllegalPlay("no round in progress")
        if self.state.to_act() is not side:
            raise IllegalPlay(f"it is not the {side.value}'s turn")
        self._check_index(side, index)
        if index not in self.legal_indices(side):
            raise IllegalPlay(f"{self.state.hands[side][index].name()} is not a legal play")

        card = self.state.hands[side].pop(index)
        self.state.table[side] = card
        logger.debug("{} plays {}", side.value, card.name())
        if side is Side.PLAYER:
            self._clamp_cursor()
        if self.state.to_act() is None:
            self._resolve_trick()

    def _clamp_cursor(self) -> None:
        hand = self.state.player_hand
        if not hand:
            self.state.selected = None
        elif self.state.selected is None:
            self.state.selected = 0
        else:
            self.state.selected = min(self.state.selected, len(hand) - 1)

    def _resolve_trick(self) -> None:
        game_state = self.state
        leader = game_state.leader
        lead_card = game_state.table[leader]
        follow_card = game_state.table[leader.other]
        if lead_card is None or follow_card is None:
            raise InvariantViolation("trick resolved before both cards were played")

        result = resolve_trick(lead_card, lead_card.suit, follow_card, game_state.trump_suit)
        winner = leader if result.winner is Role.LEAD else leader.other
        game_state.score.award_points(winner, result.points_awarded)
        game_state.won[winner].extend((lead_card, follow_card))
        game_state.table = {side: None for side in Side}
        game_state.last_trick = CompletedTrick(
            leader=leader,
            lead_card=lead_card,
            follow_card=follow_card,
            winner=winner,
            points=result.points_awarded,
        )
        game_state.leader = winner
        logger.info(
            "Trick {} vs {}: {} wins {} pts (score {}-{})",
            lead_card.label(),
            follow_card.label(),
            winner.value,
            result.points_awarded,
            game_state.score.player,
            game_state.score.opponent,
        )
        self._refill(winner)
        self._check_round_end(winner)

    def _refill(self, winner: Side) -> None:
        for side in (winner, winner.other):
            try:
                self.state.hands[side].append(self.state.deck.draw())
            except EmptyDeck:
                return
        if self.state.stock_exhausted:
            logger.info("Stock exhausted; arrastre begins")
        self._clamp_cursor()

    def _check_round_end(self, last_winner: Side) -> None:
        game_state = self.state
        exhausted = game_state.stock_exhausted and not any(game_state.hands[side] for side in Side)
        if exhausted and self.config.last_trick_bonus:
            game_state.score.award_points(last_winner, self.config.last_trick_bonus)
            logger.info("{} takes diez de últimas", last_winner.value)

        if game_state.score.has_won(last_winner, self.config.win_threshold):
            self._finish_round(last_winner)
        elif exhausted:
            player, opponent = game_state.score.as_pair()
            if player == opponent:
                self._finish_round(last_winner)
            else:
                self._finish_round(Side.PLAYER if player > opponent else Side.OPPONENT)

    def _finish_round(self, winner: Side) -> None:
        game_state = self.state
        game_state.round_winner = winner
        game_state.screen = Screen.ROUND_WON if winner is Side.PLAYER else Screen.ROUND_LOST
        player, opponent = game_state.score.as_pair()
        self.history.record(
            RoundSummary(
                round_number=game_state.round_number,
                winner=winner,
                player_points=player,
                opponent_points=opponent,
            )
        )
        logger.info("Round {} over: {} wins {}-{}", game_state.round_number, winner.value, player, opponent)

    def _run_opponent(self) -> None:
        while self.state.screen is Screen.PLAYING and self.state.to_act() is Side.OPPONENT:
            game_state = self.state
            legal = self.legal_indices(Side.OPPONENT)
            index = self.opponent.choose(
                list(game_state.opponent_hand),
                legal,
                lead_card=None if game_state.leader is Side.OPPONENT else game_state.lead_card(),
                trump_suit=game_state.trump_suit,
            )
            self.play_opponent_card(index)
