"""Conditional CLI -- runs the demo examples in a terminal.

This module is NEVER imported from conditional/__init__.py.
It is only loaded via the ``conditional`` entry point defined in pyproject.toml.
"""

from __future__ import annotations

try:
    import click
except ImportError:
    raise ImportError(
        "CLI dependencies not installed. Install with: pip install conditional[cli]"
    ) from None

from conditional.models.config import FailurePolicy


@click.group()
@click.option(
    "--on-failure",
    type=click.Choice([p.value for p in FailurePolicy]),
    default=FailurePolicy.EMPTY.value,
    envvar="CONDITIONAL_ON_FAILURE",
    show_default=True,
    help="What to render when an awaited value fails.",
)
@click.pass_context
def cli(ctx: click.Context, on_failure: str) -> None:
    """Conditional: declarative conditional-rendering primitives."""
    ctx.ensure_object(dict)
    ctx.obj["on_failure"] = FailurePolicy(on_failure)


# Register subcommands after cli group is defined
from conditional.cli.commands.demo import demo  # noqa: E402

cli.add_command(demo)
