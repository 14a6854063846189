"""Command-line interface for coffeedoc."""

from coffeedoc.cli.commands import cli, main
from coffeedoc.cli.ui import CoffeedocUI, configure_ui, get_ui

__all__ = [
    "cli",
    "main",
    "CoffeedocUI",
    "configure_ui",
    "get_ui",
]
