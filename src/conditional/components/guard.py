"""If -- render fixed content when a condition is truthy."""

from __future__ import annotations

from typing import Any

from conditional.truthy import is_empty, is_truthy


class If:
    """Renders ``children`` when ``cond`` is truthy.

    Does not resolve awaitables and does not pass anything to children.
    Stateless: one instance can serve any number of render passes.
    """

    def render(self, cond: Any, children: Any = None) -> Any:
        if not is_truthy(cond):
            return None
        if is_empty(children):
            return None
        return children

    __call__ = render


def render_if(cond: Any, children: Any = None) -> Any:
    """Functional form of ``If().render(cond, children)``."""
    return If().render(cond, children)
