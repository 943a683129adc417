"""Branch variants for value-receiving primitives.

A branch is what Maybe and Either render once their value resolves
truthy. It is either a Fixed renderable that never sees the value, or a
Delegate that maps the value to a renderable.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Fixed:
    """Content rendered as-is when the branch is selected."""

    content: Any

    def __bool__(self) -> bool:
        return bool(self.content)

    def render(self, value: Any) -> Any:
        return self.content


@dataclass(frozen=True)
class Delegate(Generic[T]):
    """A function from the resolved, truthy value to a renderable.

    Example::

        Maybe().render(user, Delegate(lambda u: f"Hello {u.name}"))
    """

    fn: Callable[[T], Any]

    def render(self, value: T) -> Any:
        return self.fn(value)


Branch = Union[Fixed, Delegate]


def as_branch(children: Any) -> Branch:
    """Coerce a children argument to a Branch.

    Branch instances pass through untouched. Anything else, callables
    included, is wrapped as Fixed content: value-receiving children must
    be tagged explicitly with Delegate.
    """
    if isinstance(children, (Fixed, Delegate)):
        return children
    return Fixed(children)


def delegate(fn: Callable[[T], Any]) -> Delegate[T]:
    """Decorator form of Delegate.

    Example::

        @delegate
        def greeting(name):
            return f"Hello {name}"
    """
    return Delegate(fn)
