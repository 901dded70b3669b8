"""Textual-powered interactive Guiñote interface."""

from __future__ import annotations

import random

from loguru import logger
from rich.align import Align
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.reactive import reactive
from textual.widgets import Header, Static

from ... import actions
from ...engine import GameEngine
from ...opponents import RandomOpponent
from ...rules import Side
from ...scoreboard import MatchHistory
from ...state import GameConfig, Screen, TableView
from ..keys import command_for_key
from ..render import format_card, render_table

MAX_EVENT_LINES = 18

HELP_LINE = "[bold]1-9[/bold] select • [bold]←/→[/bold] move • [bold]Enter[/bold] play/continue • [bold]Q[/bold] quit"


class EventLog(Static):
    """Simple rolling log rendered inside a panel."""

    lines: reactive[tuple[str, ...]] = reactive((), init=False)

    def on_mount(self) -> None:  # pragma: no cover - widget lifecycle glue
        self._refresh()

    def add(self, message: str) -> None:
        log = list(self.lines)
        log.append(message)
        self.lines = tuple(log[-MAX_EVENT_LINES:])

    def watch_lines(self, value: tuple[str, ...]) -> None:
        self._refresh(value)

    def _refresh(self, lines: tuple[str, ...] | None = None) -> None:
        content = Table.grid(padding=(0, 1))
        content.expand = True
        content.add_column(justify="left")
        rows = lines if lines is not None else self.lines
        if rows:
            for line in rows:
                content.add_row(Text.from_markup(line))
        else:
            content.add_row(Text.from_markup("[dim]Tricks will appear here[/dim]"))
        self.update(Panel(content, title="Events", border_style="magenta"))


class ScorePanel(Static):
    """Displays rolling match summaries."""

    def update_scores(self, history: MatchHistory) -> None:
        table = Table(expand=True)
        table.add_column("Side", justify="left")
        table.add_column("Rounds", justify="right")
        table.add_column("Points", justify="right")
        for entry in history.totals():
            label = "You" if entry.side is Side.PLAYER else "Opponent"
            table.add_row(label, str(entry.wins), str(entry.points))
        self.update(Panel(table, title="Match Totals", border_style="bright_blue"))


class StatusStrip(Static):
    """Single line status helper."""

    message: reactive[str] = reactive("", init=False)

    def watch_message(self, value: str) -> None:
        self.update(Panel(Text.from_markup(value or "[dim]Ready[/dim]"), border_style="green"))


class GuinoteTextualApp(App):
    """Textual Guiñote game UI; a thin renderer over ``GameEngine``."""

    CSS = """
    Screen {
        layout: vertical;
        height: 100%;
    }

    #main {
        layout: horizontal;
        height: 1fr;
    }

    #board {
        width: 3fr;
        padding: 0 1;
        overflow-y: auto;
    }

    #side {
        layout: vertical;
        width: 1fr;
    }
    """

    def __init__(self, *, config: GameConfig, seed: int | None) -> None:
        super().__init__()
        if seed is None:
            seed = random.SystemRandom().randrange(0, 2**63)
        self.seed = seed
        logger.info("Interactive session seeded with {}", seed)
        rng = random.Random(seed)
        self.engine = GameEngine(config, rng=rng, opponent=RandomOpponent(random.Random(rng.random())))
        self._last_trick_seen: object | None = None

        # Widgets initialised in compose
        self.status_strip: StatusStrip | None = None
        self.board: Static | None = None
        self.event_log: EventLog | None = None
        self.score_panel: ScorePanel | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        self.status_strip = StatusStrip(id="status")
        yield self.status_strip
        self.board = Static(id="board")
        self.event_log = EventLog(id="events")
        self.score_panel = ScorePanel(id="scores")
        yield Horizontal(self.board, Vertical(self.event_log, self.score_panel, id="side"), id="main")

    def on_mount(self) -> None:
        self.title = "Guiñote"
        self.sub_title = f"seed {self.seed}"
        self._send(actions.TerminalResized(self.size.width, self.size.height))

    def on_resize(self, event: events.Resize) -> None:
        self._send(actions.TerminalResized(event.size.width, event.size.height))

    def on_key(self, event: events.Key) -> None:
        command = command_for_key(event.key, self.engine.state.screen)
        if command is None:
            return
        event.stop()
        self._send(command)

    def _send(self, command: actions.Command) -> None:
        view = self.engine.dispatch(command)
        if self.engine.exit_requested:
            self.exit()
            return
        self._refresh(view)

    def _refresh(self, view: TableView) -> None:
        if self.board is not None:
            self.board.update(self._board_renderable(view))
        if self.score_panel is not None:
            self.score_panel.update_scores(self.engine.history)
        if self.event_log is not None and view.last_trick is not None and view.last_trick is not self._last_trick_seen:
            self._last_trick_seen = view.last_trick
            trick = view.last_trick
            who = "[green]You[/green]" if trick.winner is Side.PLAYER else "[red]Opponent[/red]"
            self.event_log.add(
                f"{format_card(trick.lead_card)} vs {format_card(trick.follow_card)} → {who} +{trick.points}"
            )
        if self.status_strip is not None:
            self.status_strip.message = HELP_LINE

    def _board_renderable(self, view: TableView):
        if view.screen is Screen.MENU:
            body = Text.from_markup(
                f"Round {view.round_number}\n\nStart new game\n[bold blue]<Enter>[/bold blue]"
            )
            return Panel(Align.center(body, vertical="middle"), title="Menu", border_style="cyan")
        if view.screen is Screen.TERMINAL_TOO_SMALL:
            config = self.engine.config
            body = Text.from_markup(
                f"[bold red]Terminal too small[/bold red]\n"
                f"Need at least {config.min_width}x{config.min_height}, have {self.size.width}x{self.size.height}"
            )
            return Panel(Align.center(body, vertical="middle"), border_style="red")
        if view.screen in (Screen.ROUND_WON, Screen.ROUND_LOST):
            player, opponent = view.score
            headline = "[bold green]You win![/bold green]" if view.screen is Screen.ROUND_WON else "[bold red]You lose[/bold red]"
            body = Text.from_markup(
                f"{headline}\n\nYou {player} • Opponent {opponent}\n\nBack to menu [bold blue]<Enter>[/bold blue]"
            )
            return Panel(Align.center(body, vertical="middle"), title="Round over", border_style="yellow")
        return render_table(view, title=f"Guiñote • Round {view.round_number}")


def run_textual_app(*, config: GameConfig, seed: int | None) -> None:
    """Launch the Textual UI."""

    app = GuinoteTextualApp(config=config, seed=seed)
    app.run()
