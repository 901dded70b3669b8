"""Per-round score accumulation and multi-round match history."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from .rules import Side

__all__ = ["MAX_SCORE", "ScoreOverflow", "Score", "RoundSummary", "SideMatchTotal", "MatchHistory"]

# 16-bit ceiling guarding runaway awards.
MAX_SCORE: Final[int] = 2**15 - 1


class ScoreOverflow(OverflowError):
    """Raised when an award would push a side past ``MAX_SCORE``."""


@dataclass(slots=True)
class Score:
    """Two non-negative accumulators that only grow within a round."""

    player: int = 0
    opponent: int = 0

    def points_for(self, side: Side) -> int:
        return self.player if side is Side.PLAYER else self.opponent

    def award_points(self, side: Side, amount: int) -> int:
        """Add ``amount`` to ``side`` and return the new total."""

        if amount < 0:
            raise ValueError("awarded points must be non-negative")
        total = self.points_for(side) + amount
        if total > MAX_SCORE:
            raise ScoreOverflow(f"{side.value} score would exceed {MAX_SCORE}")
        if side is Side.PLAYER:
            self.player = total
        else:
            self.opponent = total
        return total

    def has_won(self, side: Side, threshold: int) -> bool:
        return self.points_for(side) >= threshold

    def reset_for_new_round(self) -> None:
        self.player = 0
        self.opponent = 0

    def as_pair(self) -> tuple[int, int]:
        """Return ``(player, opponent)``."""

        return self.player, self.opponent


@dataclass(frozen=True, slots=True)
class RoundSummary:
    """Summary captured after a single round."""

    round_number: int
    winner: Side
    player_points: int
    opponent_points: int


@dataclass(frozen=True, slots=True)
class SideMatchTotal:
    """Aggregate totals accumulated for one side across recorded rounds."""

    side: Side
    wins: int
    points: int


@dataclass(slots=True)
class MatchHistory:
    """Mutable tracker that accumulates round summaries for a match."""

    rounds: list[RoundSummary] = field(default_factory=list)
    _wins: dict[Side, int] = field(init=False, repr=False)
    _points: dict[Side, int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._wins = {side: 0 for side in Side}
        self._points = {side: 0 for side in Side}
        for summary in list(self.rounds):
            self._accumulate(summary)

    def record(self, summary: RoundSummary) -> None:
        """Record ``summary`` and update cumulative totals."""

        if self.rounds and summary.round_number <= self.rounds[-1].round_number:
            raise ValueError("rounds must be recorded in increasing order")
        self.rounds.append(summary)
        self._accumulate(summary)

    def _accumulate(self, summary: RoundSummary) -> None:
        self._wins[summary.winner] += 1
        self._points[Side.PLAYER] += summary.player_points
        self._points[Side.OPPONENT] += summary.opponent_points

    def totals(self) -> list[SideMatchTotal]:
        """Return cumulative totals, player first."""

        return [
            SideMatchTotal(side=side, wins=self._wins[side], points=self._points[side])
            for side in Side
        ]
