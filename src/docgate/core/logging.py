# src/docgate/core/logging.py
"""
Console logging for the gateway.

Every module logs through the single `log` instance defined here, which
writes rich markup to the shared console.
"""

import time
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, List, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()


def _style(style: str) -> Callable[[Any], str]:
    return lambda text: f"[{style}]{escape(str(text))}[/{style}]"


# Markup helpers used to highlight domain names inside log lines.
color_palette: Dict[str, Callable[[Any], str]] = {
    "collection": _style("bold cyan"),
    "field": _style("magenta"),
    "value": _style("green"),
    "method": _style("bold blue"),
    "path": _style("yellow"),
    "dim": _style("dim"),
}


class Logger:
    """Small facade over a rich Console with indentation support."""

    def __init__(self, console: Console, debug: bool = False):
        self.console = console
        self.debug_enabled = debug
        self._indent = 0

    def _emit(self, marker: str, message: str) -> None:
        pad = "  " * self._indent
        self.console.print(f"{pad}{marker} {message}", highlight=False)

    def section(self, title: str) -> None:
        self.console.rule(f"[bold]{title}[/bold]")

    def info(self, message: str) -> None:
        self._emit("[blue]•[/blue]", message)

    def success(self, message: str) -> None:
        self._emit("[green]✓[/green]", message)

    def warn(self, message: str) -> None:
        self._emit("[yellow]![/yellow]", message)

    def error(self, message: str) -> None:
        self._emit("[bold red]✗[/bold red]", message)

    def debug(self, message: str) -> None:
        if self.debug_enabled:
            self._emit("[dim]…[/dim]", f"[dim]{message}[/dim]")

    @contextmanager
    def indented(self) -> Iterator[None]:
        self._indent += 1
        try:
            yield
        finally:
            self._indent -= 1

    @contextmanager
    def timed(self, label: str) -> Iterator[None]:
        """Logs how long the wrapped block took."""
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed = (time.perf_counter() - start) * 1000
            self.info(f"{label} [dim]({elapsed:.1f} ms)[/dim]")

    def table(self, headers: Sequence[str], rows: List[Sequence[Any]]) -> None:
        table = Table(box=None, padding=(0, 1), show_edge=False)
        for header in headers:
            table.add_column(header, style="cyan")
        for row in rows:
            table.add_row(*[str(cell) for cell in row])
        self.console.print(table)


log = Logger(console)
