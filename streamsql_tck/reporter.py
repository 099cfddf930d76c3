"""
Rich rendering of scripts for the CLI.

Read-only view for fixture authors; harnesses read `Script` objects directly.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from streamsql_tck.domain.models import Script, Stream, Value


def format_value(value: Value) -> str:
    """Render a literal the way it would appear in SQL."""
    if value is None:
        return "NULL"
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, str):
        return "'" + value.replace("'", "''") + "'"
    if isinstance(value, bytes):
        return f"X'{value.hex().upper()}'"
    return repr(value)


def format_row(values: Any) -> str:
    return "(" + ", ".join(format_value(v) for v in values) + ")"


def stream_table(stream: Stream) -> Table:
    table = Table(title=f"Stream {stream.name}", box=box.ROUNDED)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Column", style="cyan", no_wrap=True)
    table.add_column("Type", style="magenta")
    table.add_column("Nullable", justify="center")

    for position, column in enumerate(stream.columns, start=1):
        table.add_row(
            str(position),
            column.name,
            column.type_name,
            "yes" if column.nullable else "[bold red]NOT NULL[/bold red]",
        )
    return table


def _mapping_table(title: str, key_label: str, value_label: str, rows: Mapping[str, str]) -> Table:
    table = Table(title=title, box=box.ROUNDED)
    table.add_column(key_label, style="cyan", no_wrap=True)
    table.add_column(value_label, style="green")
    for key, value in rows.items():
        table.add_row(key, value)
    return table


def print_script(
    script: Script,
    title: Optional[str] = None,
    console: Optional[Console] = None,
) -> None:
    """
    Render every section of a script.

    Empty sections are shown as a dim placeholder line.
    """
    console = console or Console()

    if title:
        console.rule(f"[bold]{title}[/bold]")

    if script.definitions:
        for stream in script.definitions.values():
            console.print(stream_table(stream))
    else:
        console.print("[dim]No stream definitions.[/dim]")

    if script.queries:
        console.print(_mapping_table("Queries", "Query", "SQL", script.queries))
    else:
        console.print("[dim]No queries.[/dim]")

    if script.inputs:
        inputs = Table(title="Inputs", box=box.ROUNDED)
        inputs.add_column("#", justify="right", style="dim")
        inputs.add_column("Stream", style="cyan", no_wrap=True)
        inputs.add_column("Values", style="yellow")
        for position, insert in enumerate(script.inputs, start=1):
            inputs.add_row(str(position), insert.stream, format_row(insert.values))
        console.print(inputs)
    else:
        console.print("[dim]No inputs.[/dim]")

    if script.expectations:
        expected = {name: format_row(values) for name, values in script.expectations.items()}
        console.print(_mapping_table("Expectations", "Query", "Values", expected))
    else:
        console.print("[dim]No expectations.[/dim]")


__all__ = ["format_value", "format_row", "stream_table", "print_script"]
