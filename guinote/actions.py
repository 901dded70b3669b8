"""Commands accepted by the game engine from the input layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

__all__ = [
    "Quit",
    "SelectCard",
    "MoveSelection",
    "PlaySelectedCard",
    "AdvanceScreen",
    "TerminalResized",
    "Command",
]


@dataclass(frozen=True)
class Quit:
    """Request process termination."""


@dataclass(frozen=True)
class SelectCard:
    """Move the cursor to ``index`` in the player's hand."""

    index: int


@dataclass(frozen=True)
class MoveSelection:
    """Move the cursor ``delta`` positions, wrapping around the hand."""

    delta: int


@dataclass(frozen=True)
class PlaySelectedCard:
    """Play the card under the cursor."""


@dataclass(frozen=True)
class AdvanceScreen:
    """Leave the menu or a round-over screen."""


@dataclass(frozen=True)
class TerminalResized:
    """Report the current terminal dimensions."""

    width: int
    height: int


Command = Union[Quit, SelectCard, MoveSelection, PlaySelectedCard, AdvanceScreen, TerminalResized]
