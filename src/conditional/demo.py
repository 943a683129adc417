"""Demo examples, one per usage shown on the conditional demo page.

Each Example builds a fresh render function so that awaitables are
created once per mount and keep the same identity across passes.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Optional

from conditional.components import Maybe
from conditional.host import RenderHost, render_settled
from conditional.models.branch import Delegate
from conditional.models.condition import ConditionEntry
from conditional.models.config import RenderConfig


@dataclass(frozen=True)
class Rect:
    """Stand-in renderable for the demo's colored boxes."""

    color: str
    text: Optional[str] = None

    def __str__(self) -> str:
        name = f"{self.color.capitalize()}Rect"
        label = Maybe().render(self.text, Delegate(lambda t: f"{name}({t})"))
        return label or name


def blue(text: str | None = None) -> Rect:
    return Rect("blue", text)


def red(text: str | None = None) -> Rect:
    return Rect("red", text)


def yellow(text: str | None = None) -> Rect:
    return Rect("yellow", text)


async def _later(value: Any) -> Any:
    """An awaitable that completes on a later loop iteration."""
    await asyncio.sleep(0)
    return value


RenderFn = Callable[[RenderHost], Any]


@dataclass(frozen=True)
class Example:
    title: str
    description: str
    build: Callable[[], RenderFn]


def _if_example() -> RenderFn:
    return lambda host: host.use_if().render(True, blue())


def _maybe_example() -> RenderFn:
    return lambda host: host.use_maybe().render("api call result", blue())


def _maybe_awaitable_example() -> RenderFn:
    data = _later("api call result")
    return lambda host: host.use_maybe().render(data, blue())


def _maybe_delegate_example() -> RenderFn:
    data = _later("I am delegated")
    return lambda host: host.use_maybe().render(data, Delegate(blue))


def _either_fixed_example() -> RenderFn:
    return lambda host: host.use_either().render("Error", "Ignored", [red(), blue()])


def _either_top_delegate_example() -> RenderFn:
    return lambda host: host.use_either().render(
        "Some Error", "Ignored", [Delegate(red), blue()]
    )


def _either_bottom_delegate_example() -> RenderFn:
    return lambda host: host.use_either().render(
        None, "Success", [Delegate(red), Delegate(blue)]
    )


def _cond_example() -> RenderFn:
    match = {"role": "admin"}
    entries = [
        ConditionEntry(lambda m: m["role"] == "regular", red("Regular")),
        ConditionEntry(lambda m: m["role"] == "admin", blue("Admin")),
        ConditionEntry(lambda m: True, yellow("Not Authenticated")),
    ]
    return lambda host: host.use_cond().render(match, entries)


EXAMPLES: tuple[Example, ...] = (
    Example(
        "If",
        "Simplest conditional component. Renders child if cond is truthy.",
        _if_example,
    ),
    Example("Maybe", "Renders the child if data exists.", _maybe_example),
    Example(
        "Maybe with a promise",
        "Renders the child if data resolves to truthy.",
        _maybe_awaitable_example,
    ),
    Example(
        "Maybe with resolved data",
        "Runs the inner function with resolved data.",
        _maybe_delegate_example,
    ),
    Example(
        "Either",
        "Renders top if value is truthy, bottom if not.",
        _either_fixed_example,
    ),
    Example(
        "Either",
        "Runs top function if value is truthy, renders bottom if not.",
        _either_top_delegate_example,
    ),
    Example(
        "Either",
        "Runs top function if value is truthy, bottom if not.",
        _either_bottom_delegate_example,
    ),
    Example(
        "Cond",
        "Renders the first child that matches its condition.",
        _cond_example,
    ),
)


def select_examples(titles: Iterable[str] = ()) -> list[Example]:
    """Filter EXAMPLES by title (case-insensitive). No titles selects all."""
    wanted = {t.casefold() for t in titles}
    if not wanted:
        return list(EXAMPLES)
    return [e for e in EXAMPLES if e.title.casefold() in wanted]


async def run_examples(
    examples: Iterable[Example],
    config: RenderConfig | None = None,
) -> list[tuple[Example, Any]]:
    """Mount each example, wait for it to settle, and collect its output."""
    results: list[tuple[Example, Any]] = []
    for example in examples:
        host = await render_settled(example.build(), config)
        try:
            results.append((example, host.output))
        finally:
            host.unmount()
    return results
