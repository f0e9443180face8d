"""Console helpers shared by the runner, the size report and the CLI."""

from __future__ import annotations

from typing import Optional

from rich.console import Console

_CONSOLE: Optional[Console] = None


def get_console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False)
    return _CONSOLE


def print_dim(message: str, console: Optional[Console] = None) -> None:
    (console or get_console()).print(message, style="dim", markup=False, soft_wrap=True)


def print_banner(message: str, console: Optional[Console] = None) -> None:
    (console or get_console()).print(f" {message} ", style="reverse", markup=False, soft_wrap=True)
