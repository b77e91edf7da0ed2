"""
Debug diagnostics, written to stderr through a rich Console.

Callers gate every call behind their own `if DEBUG:` so release builds never
format a message.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

_console = Console(stderr=True, highlight=False)

__all__ = ["dbg_print"]


def dbg_print(message: str) -> None:
    _console.print(f"[dim]arraykit:[/dim] {escape(message)}")
