"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from rich.console import RenderableType
from rich.panel import Panel

from ..cards import RANK_SHORT, Card, Suit
from ..state import TableView
from .views import TableSummaryView

_SUIT_SYMBOLS = {
    Suit.SWORDS: ("⚔", "cyan"),
    Suit.CLUBS: ("♣", "green"),
    Suit.CUPS: ("🏆", "red"),
    Suit.COINS: ("🪙", "yellow"),
}


def suit_markup(suit: Suit) -> str:
    symbol, color = _SUIT_SYMBOLS[suit]
    return f"[{color}]{symbol} {suit.value.title()}[/{color}]"


def format_card(card: Card | None) -> str:
    """Return a Rich-rendered label for ``card``."""

    if card is None:
        return "[dim]—[/dim]"
    symbol, color = _SUIT_SYMBOLS[card.suit]
    return f"[{color}]{RANK_SHORT[card.rank]}{symbol}[/{color}]"


def render_table(view: TableView, *, reveal_opponent: bool = False, title: str = "Guiñote") -> RenderableType:
    """Return a Rich panel describing the current table state."""

    summary = TableSummaryView(
        view=view,
        reveal_opponent=reveal_opponent,
        card_formatter=format_card,
        suit_formatter=suit_markup,
    )
    return Panel(summary.render(), title=title, padding=(0, 1), border_style="cyan")
