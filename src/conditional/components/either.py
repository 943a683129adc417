"""Either -- pick the top or bottom branch by truthiness."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, Generic, Optional, TypeVar

from conditional.components.maybe import Maybe
from conditional.exceptions import EitherArityError
from conditional.models.config import RenderConfig
from conditional.truthy import is_truthy

L = TypeVar("L")
R = TypeVar("R")


def _as_branches(children: Any) -> tuple[Any, ...]:
    """Materialize children; a string or a lone renderable is one branch."""
    if isinstance(children, (str, bytes)):
        return (children,)
    try:
        items = iter(children)
    except TypeError:
        return (children,)
    return tuple(items)


class Either(Generic[L, R]):
    """Renders the top branch if ``top`` is truthy, the bottom one otherwise.

    Selection looks at the raw ``top``/``bottom`` values before any
    resolution: a pending awaitable is a truthy object, so it always wins
    the selection and is then resolved by the inner Maybe. The side that is
    not selected is never evaluated. A single Maybe instance backs both
    sides, so switching sides starts a fresh resolution.
    """

    def __init__(
        self,
        on_update: Callable[[], None] | None = None,
        config: RenderConfig | None = None,
    ) -> None:
        self._maybe: Maybe[Any] = Maybe(on_update, config)

    @property
    def resolver(self):
        return self._maybe.resolver

    def render(
        self,
        top: Any,
        bottom: Optional[Any] = None,
        children: Iterable[Any] | None = None,
    ) -> Any:
        """Render the selected side.

        Raises:
            EitherArityError: If ``children`` does not hold exactly two
                branches.
        """
        if children is None:
            raise EitherArityError(None)
        branches = _as_branches(children)
        if len(branches) != 2:
            raise EitherArityError(len(branches))

        top_branch, bottom_branch = branches

        if is_truthy(top):
            return self._maybe.render(top, top_branch)
        if is_truthy(bottom):
            return self._maybe.render(bottom, bottom_branch)
        return None

    __call__ = render

    def dispose(self) -> None:
        self._maybe.dispose()
