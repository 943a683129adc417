"""RenderHost -- the consumer that re-evaluates primitives.

The host owns one render function and the primitive instances it uses.
Primitives are handed out by position (``use_maybe()``, ``use_either()``,
``use_cond()``), so the same call order must be kept across passes.

When a resolver applies an awaited value it calls ``invalidate()``. The
host never re-renders inline: it schedules one pass with
``loop.call_soon`` and coalesces further requests until that pass runs.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from conditional.components import Cond, Either, If, Maybe
from conditional.exceptions import ConfigurationError
from conditional.models.config import DEFAULT_CONFIG, RenderConfig
from conditional.resolver import AsyncResolver

logger = logging.getLogger(__name__)

P = TypeVar("P", Maybe, Either, Cond)


class RenderHost:
    """Drives render passes for one render function.

    Attributes:
        output: What the latest pass emitted (None before the first pass).
        history: Every emitted output, in pass order.
        error: Exception raised by a scheduled pass, re-raised by settle().
    """

    def __init__(
        self,
        render_fn: Callable[[RenderHost], Any],
        config: RenderConfig | None = None,
    ) -> None:
        self._render_fn = render_fn
        self._config = config or DEFAULT_CONFIG
        self._slots: list[Maybe | Either | Cond] = []
        self._cursor = 0
        self._rendering = False
        self._mounted = True
        self._scheduled: asyncio.Handle | None = None
        self._if = If()
        self.output: Any = None
        self.history: list[Any] = []
        self.error: BaseException | None = None

    # ------------------------------------------------------------------
    # Primitive slots
    # ------------------------------------------------------------------

    def _use(self, kind: type[P]) -> P:
        if self._cursor < len(self._slots):
            slot = self._slots[self._cursor]
            if type(slot) is not kind:
                raise ConfigurationError(
                    f"Render order changed: slot {self._cursor} holds "
                    f"{type(slot).__name__}, pass asked for {kind.__name__}"
                )
        else:
            slot = kind(self.invalidate, self._config)
            self._slots.append(slot)
        self._cursor += 1
        return slot

    def use_if(self) -> If:
        """If is stateless; the same instance is shared by every pass."""
        return self._if

    def use_maybe(self) -> Maybe:
        return self._use(Maybe)

    def use_either(self) -> Either:
        return self._use(Either)

    def use_cond(self) -> Cond:
        return self._use(Cond)

    @property
    def resolvers(self) -> list[AsyncResolver]:
        return [slot.resolver for slot in self._slots]

    @property
    def is_pending(self) -> bool:
        return self._scheduled is not None or any(
            r.is_pending for r in self.resolvers
        )

    @property
    def passes(self) -> int:
        return len(self.history)

    # ------------------------------------------------------------------
    # Render passes
    # ------------------------------------------------------------------

    def render(self) -> Any:
        """Run one pass synchronously and return its output.

        A pass requested while another is running is deferred to the
        event loop instead of re-entering the render function.
        """
        if self._rendering:
            self.invalidate()
            return self.output

        self._rendering = True
        self._cursor = 0
        try:
            output = self._render_fn(self)
        finally:
            self._rendering = False

        self.output = output
        self.history.append(output)
        logger.debug("Render pass %d emitted %r", self.passes, output)
        return output

    def invalidate(self) -> None:
        """Schedule a render pass on the running loop (coalesced)."""
        if not self._mounted or self._scheduled is not None:
            return
        loop = asyncio.get_running_loop()
        self._scheduled = loop.call_soon(self._flush)

    def _flush(self) -> None:
        self._scheduled = None
        if not self._mounted:
            return
        try:
            self.render()
        except Exception as exc:
            logger.error("Scheduled render pass failed: %s", exc)
            self.error = exc

    async def settle(self) -> Any:
        """Wait until no resolver is pending and no pass is scheduled.

        Returns:
            The final output.

        Raises:
            Exception: Whatever a scheduled pass raised while settling.
        """
        while self._mounted:
            pending = [r for r in self.resolvers if r.is_pending]
            if pending:
                await asyncio.gather(*(r.settle() for r in pending))
            elif self._scheduled is not None:
                await asyncio.sleep(0)
            else:
                break

        if self.error is not None:
            error, self.error = self.error, None
            raise error
        return self.output

    def unmount(self) -> None:
        """Stop rendering and retire every in-flight resolution."""
        self._mounted = False
        if self._scheduled is not None:
            self._scheduled.cancel()
            self._scheduled = None
        for slot in self._slots:
            slot.dispose()


async def render_settled(
    render_fn: Callable[[RenderHost], Any],
    config: RenderConfig | None = None,
) -> RenderHost:
    """Mount ``render_fn``, render once, and wait for it to settle."""
    host = RenderHost(render_fn, config)
    host.render()
    await host.settle()
    return host
