"""Colored terminal output shared by all commands.

Messages are printed with markup and highlighting disabled so that user
supplied names and paths are shown verbatim.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console

console = Console(soft_wrap=True, highlight=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False)


def _emit(target: Console, message: str, style: str | None) -> None:
    target.print(message, style=style, markup=False)


def success(message: str) -> None:
    _emit(console, message, "green")


def info(message: str) -> None:
    _emit(console, message, None)


def notice(message: str) -> None:
    _emit(console, message, "yellow")


def failure(message: str) -> None:
    _emit(err_console, message, "red")


def print_json(payload: Any) -> None:
    """Print a JSON document without colouring so it can be piped."""
    console.print_json(data=payload, indent=2, highlight=False)
