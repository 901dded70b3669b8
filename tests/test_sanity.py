"""Sanity tests ensuring the package modules import correctly."""

from __future__ import annotations

import importlib
from pathlib import Path

import pytest


@pytest.mark.parametrize(
    "module_name",
    [
        "guinote",
        "guinote.cards",
        "guinote.encoding",
        "guinote.deck",
        "guinote.rules",
        "guinote.scoreboard",
        "guinote.state",
        "guinote.engine",
        "guinote.opponents",
        "guinote.benchmark",
        "guinote.actions",
        "guinote.cli.main",
    ],
)
def test_modules_import(module_name: str) -> None:
    """Ensure all foundational modules can be imported."""

    assert importlib.import_module(module_name)


def test_package_readme_is_declared() -> None:
    root = Path(__file__).resolve().parents[1]
    assert (root / "README.md").is_file()
    assert 'readme = "README.md"' in (root / "pyproject.toml").read_text(encoding="utf-8")
