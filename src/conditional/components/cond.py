"""Cond -- render the first entry whose predicate matches."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, Generic, Optional, TypeVar

from conditional.exceptions import ConfigurationError
from conditional.models.condition import ConditionEntry, evaluate_predicate
from conditional.models.config import RenderConfig
from conditional.resolver import AsyncResolver, Resolvable
from conditional.truthy import is_truthy

M = TypeVar("M")


class Cond(Generic[M]):
    """Resolves ``match``, then renders the first entry that matches it.

    Entries are scanned in order. A callable predicate is called with the
    resolved match value; any other predicate is tested for truthiness.
    The winning entry's content is emitted verbatim and never receives
    the match value.

    A match value that resolves falsy (``0``, ``False``, ``""``) renders
    nothing, exactly like one that has not resolved yet.

    Example::

        Cond().render(
            {"role": "admin"},
            [
                Cond.Test(lambda m: m["role"] == "regular", "Regular"),
                Cond.Test(lambda m: m["role"] == "admin", "Admin"),
                Cond.Test(True, "Not authenticated"),
            ],
        )
    """

    Test = ConditionEntry

    def __init__(
        self,
        on_update: Callable[[], None] | None = None,
        config: RenderConfig | None = None,
    ) -> None:
        self.resolver: AsyncResolver[M] = AsyncResolver(on_update, config)

    def render(
        self,
        match: Optional[Resolvable[M]] = None,
        entries: Iterable[Any] = (),
    ) -> Any:
        resolved = self.resolver.resolve(match)
        if not is_truthy(resolved):
            return None

        for entry in entries:
            try:
                predicate = entry.predicate
                content = entry.content
            except AttributeError:
                raise ConfigurationError(
                    f"Cond entries must expose 'predicate' and 'content', "
                    f"got {type(entry).__name__}"
                ) from None
            if evaluate_predicate(predicate, resolved):
                return content
        return None

    __call__ = render

    def dispose(self) -> None:
        self.resolver.dispose()
