"""Top-level package for the Guiñote game engine."""

from . import actions, cards, deck, encoding, engine, rules, scoreboard, state

__all__ = [
    "actions",
    "cards",
    "deck",
    "encoding",
    "engine",
    "rules",
    "scoreboard",
    "state",
]
