"""Key-to-command mapping shared by the interactive front-ends."""

from __future__ import annotations

from .. import actions
from ..state import Screen

_LEFT_KEYS = {"left", "h", "a"}
_RIGHT_KEYS = {"right", "l", "d"}
_CONFIRM_KEYS = {"enter", "space"}


def command_for_key(key: str, screen: Screen) -> actions.Command | None:
    """Translate a Textual key name into an engine command.

    Digits select a card by its 1-based position; Enter plays the selection
    while a round is in progress and advances every other screen.
    """

    if key in {"q", "ctrl+c"}:
        return actions.Quit()
    if key in _CONFIRM_KEYS:
        if screen is Screen.PLAYING:
            return actions.PlaySelectedCard()
        return actions.AdvanceScreen()
    if screen is not Screen.PLAYING:
        return None
    if key.isdigit() and key != "0":
        return actions.SelectCard(int(key) - 1)
    if key in _LEFT_KEYS:
        return actions.MoveSelection(-1)
    if key in _RIGHT_KEYS:
        return actions.MoveSelection(1)
    return None
