"""Maybe -- render a branch once a value resolves truthy."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from conditional.models.branch import as_branch
from conditional.models.config import RenderConfig
from conditional.resolver import AsyncResolver, Resolvable
from conditional.truthy import is_empty, is_truthy

T = TypeVar("T")


class Maybe(Generic[T]):
    """Renders ``children`` only when ``data`` resolves to a truthy value.

    ``children`` may be plain content (rendered as-is, never given the
    value), a Fixed branch, or a Delegate that receives the resolved value.

    Example::

        maybe = Maybe(on_update=host.invalidate)
        maybe.render(fetch_user(), Delegate(lambda u: u.name))
    """

    def __init__(
        self,
        on_update: Callable[[], None] | None = None,
        config: RenderConfig | None = None,
    ) -> None:
        self.resolver: AsyncResolver[T] = AsyncResolver(on_update, config)

    def render(self, data: Resolvable[T], children: Any = None) -> Any:
        resolved = self.resolver.resolve(data)

        if not is_truthy(resolved):
            return None
        if is_empty(children):
            return None

        return as_branch(children).render(resolved)

    __call__ = render

    def dispose(self) -> None:
        self.resolver.dispose()
