# src/docgate/ui.py

from typing import Any, Dict

from rich.align import Align
from rich.markup import escape
from rich.panel import Panel
from rich.pretty import Pretty
from rich.table import Table
from rich.text import Text

from .core.logging import console
from .core.query import TranslatedQuery
from .core.query.operators import DESCENDING
from .core.update.flatten import unflatten

# --- Rich renderers for requests and startup ---


def _value_table() -> Table:
    table = Table(box=None, padding=(0, 1), show_header=False, show_edge=False)
    table.add_column("Key", style="cyan", no_wrap=True, width=24)
    table.add_column("Value", style="green", width=32)
    table.add_column("Details", style="white")
    return table


def display_query(collection: str, query: TranslatedQuery) -> None:
    """Prints the translated filter, sort and limit of a read request."""
    console.print(f"  [bold]Query[/bold] on [bold cyan]{escape(collection)}[/bold cyan]")

    query_table = _value_table()
    for field_name, condition in query.filter.items():
        details = []
        if isinstance(condition, dict):
            details.extend(f"[magenta]{op}[/magenta]" for op in condition)
        else:
            details.append(f"[dim]{type(condition).__name__}[/dim]")
        query_table.add_row(escape(field_name), escape(repr(condition)), " ".join(details))

    if query.sort:
        field_name, direction = query.sort
        label = "desc" if direction == DESCENDING else "asc"
        query_table.add_row("[yellow]sort[/yellow]", escape(field_name), f"[dim]{label}[/dim]")
    query_table.add_row("[yellow]limit[/yellow]", str(query.limit), "")

    console.print(query_table)
    console.print()


def display_update(collection: str, identifier: str, flat_update: Dict[str, Any]) -> None:
    """Prints the flattened paths of an update request and the document shape they write."""
    console.print(
        f"  [bold]Update[/bold] [bold cyan]{escape(collection)}[/bold cyan] "
        f"[dim]id={escape(identifier)}[/dim]"
    )
    update_table = _value_table()
    for path, value in flat_update.items():
        details = "[magenta]list[/magenta]" if isinstance(value, list) else ""
        update_table.add_row(escape(path), escape(repr(value)), details)
    console.print(update_table)
    console.print(Pretty(unflatten(flat_update), indent_guides=True), style="dim")
    console.print()


def print_welcome(project_name: str, version: str, host: str, port: int) -> None:
    """Prints a welcome message using a rich Panel."""
    docs_url = f"http://{host}:{port}/docs"
    message = Text.from_markup(
        f"Query any collection at [bold]/get-data?collection=<name>[/bold]\n"
        f"API Documentation available at [link={docs_url}]{docs_url}[/link]"
    )
    panel = Panel(
        Align.center(message, vertical="middle"),
        title=f"[bold green]{project_name} v{version}[/bold green]",
        border_style="blue",
        padding=(1, 2),
    )
    console.print(panel)
