"""Rich formatting helpers for the conditional CLI.

Rich auto-detects TTY and degrades gracefully when piped (no ANSI codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from conditional.demo import Example


def get_console() -> Console:
    """Create a Rich Console that auto-detects TTY for graceful pipe degradation."""
    return Console(stderr=False)


def format_output(output: Any) -> str:
    """Render an emitted value as table text; None means nothing was emitted."""
    if output is None:
        return "[dim](nothing)[/dim]"
    return escape(str(output))


def format_examples(results: list[tuple[Example, Any]], console: Console) -> None:
    """Display demo results as a title/description/output table."""
    if not results:
        console.print("[dim]No matching examples.[/dim]")
        return

    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Example", style="cyan")
    table.add_column("Description")
    table.add_column("Output", style="green")

    for example, output in results:
        table.add_row(
            escape(example.title),
            escape(example.description),
            format_output(output),
        )

    console.print(table)


def format_error(message: str, console: Console) -> None:
    """Display an error message."""
    console.print(f"[red]Error:[/red] {escape(message)}", highlight=False)
