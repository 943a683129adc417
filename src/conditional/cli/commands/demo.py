"""conditional demo -- render each demo example and show what it emits."""

from __future__ import annotations

import asyncio

import click

from conditional.cli.formatting import format_error, format_examples, get_console


@click.command()
@click.option(
    "--example",
    "-e",
    "titles",
    multiple=True,
    help="Only run examples with this title (case-insensitive, repeatable).",
)
@click.pass_context
def demo(ctx: click.Context, titles: tuple[str, ...]) -> None:
    """Render the If, Maybe, Either and Cond examples."""
    from conditional.demo import run_examples, select_examples
    from conditional.models.config import RenderConfig

    console = get_console()
    config = RenderConfig(on_failure=ctx.obj["on_failure"])
    try:
        results = asyncio.run(run_examples(select_examples(titles), config))
        format_examples(results, console)
    except Exception as e:
        format_error(str(e), console)
        raise SystemExit(1) from None
