"""Textual front-end for Guiñote."""

from .app import GuinoteTextualApp, run_textual_app

__all__ = ["GuinoteTextualApp", "run_textual_app"]
