"""Composable view primitives for the Guiñote CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from rich import box
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..cards import Card, Suit
from ..rules import Side
from ..state import TableView


@dataclass(slots=True)
class TableSummaryView:
    """Renderable summarising one frame of the table."""

    view: TableView
    reveal_opponent: bool
    card_formatter: Callable[[Card | None], str]
    suit_formatter: Callable[[Suit], str]

    def _metadata_panel(self) -> Panel:
        view = self.view
        grid = Table.grid(expand=True)
        grid.add_column(justify="left")
        player, opponent = view.score
        grid.add_row(f"[cyan]Round[/cyan]: {view.round_number}")
        grid.add_row(f"[cyan]Score[/cyan]: You {player} • Opponent {opponent} (target {view.threshold})")
        trump = self.suit_formatter(view.trump_suit)
        if view.trump_card is not None:
            trump += f" ({self.card_formatter(view.trump_card)})"
        grid.add_row(f"[cyan]Triunfo[/cyan]: {trump}")
        grid.add_row(f"[cyan]Stock[/cyan]: {view.stock_size} card(s)")
        return Panel(grid, title="Table State", box=box.SQUARE, border_style="blue")

    def _opponent_markup(self) -> str:
        cards = self.view.opponent_hand
        if not cards:
            return "—"
        if not self.reveal_opponent:
            return " ".join("[on red]  [/on red]" for _ in cards) + f"  ({len(cards)} cards)"
        return " ".join(self.card_formatter(card) for card in cards)

    def _trick_panel(self) -> Panel:
        view = self.view
        grid = Table.grid(expand=True)
        grid.add_column(justify="left")
        grid.add_row(f"Opponent: {self.card_formatter(view.opponent_played)}")
        grid.add_row(f"You: {self.card_formatter(view.player_played)}")
        if view.to_act is Side.PLAYER:
            grid.add_row("[bold yellow]Your turn[/bold yellow]")
        last = view.last_trick
        if last is not None:
            who = "You" if last.winner is Side.PLAYER else "Opponent"
            grid.add_row(
                f"[dim]Last trick: {self.card_formatter(last.lead_card)} / "
                f"{self.card_formatter(last.follow_card)} → {who} +{last.points}[/dim]"
            )
        return Panel(grid, title="Trick", box=box.SQUARE, border_style="magenta")

    def _hand_table(self) -> Table:
        table = Table(box=box.ROUNDED, expand=True, show_header=False)
        for _ in self.view.player_hand:
            table.add_column(justify="center")
        if not self.view.player_hand:
            table.add_column(justify="center")
            table.add_row("[dim]Empty hand[/dim]")
            return table
        labels: list[str] = []
        numbers: list[str] = []
        for idx, (card, selected) in enumerate(self.view.player_hand):
            label = self.card_formatter(card)
            if selected:
                label = f"[reverse]{label}[/reverse]"
            labels.append(label)
            numbers.append(f"[bold]{idx + 1}[/bold]" if selected else f"[dim]{idx + 1}[/dim]")
        table.add_row(*labels)
        table.add_row(*numbers)
        return table

    def render(self) -> RenderableType:
        opponent = Panel(
            Text.from_markup(self._opponent_markup()),
            title="Opponent Cards",
            box=box.SQUARE,
            border_style="red",
        )
        hand = Panel(self._hand_table(), title="Your Cards", box=box.SQUARE, border_style="green")
        return Group(self._metadata_panel(), opponent, self._trick_panel(), hand)
