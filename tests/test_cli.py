from __future__ import annotations

import sys
from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

from guinote import actions
from guinote.cli.keys import command_for_key
from guinote.cli.main import app, configure_logging
from guinote.state import Screen

runner = CliRunner()


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    logger.remove()
    logger.add(sys.stderr)


def test_simulate_prints_match_summary() -> None:
    result = runner.invoke(app, ["simulate", "--rounds", "2", "--seed", "7"])

    assert result.exit_code == 0, result.output
    assert "Match Summary" in result.output
    assert "2 round(s) simulated." in result.output


@pytest.mark.parametrize(
    "args",
    [
        ["simulate", "--rounds", "0"],
        ["simulate", "--hand-size", "20"],
        ["simulate", "--threshold", "0"],
    ],
)
def test_simulate_rejects_bad_parameters(args: list[str]) -> None:
    result = runner.invoke(app, args)
    assert result.exit_code != 0


@pytest.mark.parametrize(
    ("key", "screen", "expected"),
    [
        ("q", Screen.PLAYING, actions.Quit()),
        ("ctrl+c", Screen.MENU, actions.Quit()),
        ("q", Screen.TERMINAL_TOO_SMALL, actions.Quit()),
        ("enter", Screen.MENU, actions.AdvanceScreen()),
        ("enter", Screen.ROUND_LOST, actions.AdvanceScreen()),
        ("enter", Screen.PLAYING, actions.PlaySelectedCard()),
        ("space", Screen.PLAYING, actions.PlaySelectedCard()),
        ("1", Screen.PLAYING, actions.SelectCard(0)),
        ("6", Screen.PLAYING, actions.SelectCard(5)),
        ("left", Screen.PLAYING, actions.MoveSelection(-1)),
        ("l", Screen.PLAYING, actions.MoveSelection(1)),
        ("0", Screen.PLAYING, None),
        ("x", Screen.PLAYING, None),
        ("3", Screen.MENU, None),
    ],
)
def test_command_for_key(key: str, screen: Screen, expected: actions.Command | None) -> None:
    assert command_for_key(key, screen) == expected


def test_configure_logging_writes_to_file(tmp_path: Path) -> None:
    log_file = tmp_path / "guinote.log"
    configure_logging(log_file, "info")

    logger.debug("hidden")
    logger.info("trick resolved")
    logger.complete()

    content = log_file.read_text(encoding="utf-8")
    assert "trick resolved" in content
    assert "hidden" not in content


def test_play_launches_textual_app_with_config(monkeypatch: pytest.MonkeyPatch) -> None:
    launched: dict[str, object] = {}

    def fake_run(*, config, seed) -> None:
        launched["config"] = config
        launched["seed"] = seed

    monkeypatch.setattr("guinote.cli.main.run_textual_app", fake_run)
    result = runner.invoke(app, ["play", "--seed", "5", "--threshold", "61", "--no-arrastre"])

    assert result.exit_code == 0, result.output
    assert launched["seed"] == 5
    config = launched["config"]
    assert config.win_threshold == 61
    assert config.enforce_arrastre is False
    assert config.min_width == 35
