"""AsyncResolver -- resolves values that may still be pending.

A resolver owns the resolution state of one primitive instance. Concrete
inputs are round-tripped synchronously. Awaitables are scheduled on the
running event loop; the resolver reports ``None`` until they complete and
then asks its consumer to re-evaluate through ``on_update``.

Staleness guard: every new input bumps a generation counter that the
completion callback captured when it was registered. A completion whose
generation is no longer current is discarded. The underlying awaitable is
never cancelled, only ignored. Each awaitable is wrapped in a future once
per resolver, so switching back to an input seen before re-attaches to
its existing future.
"""

from __future__ import annotations

import asyncio
import enum
import functools
import inspect
import logging
import weakref
from collections.abc import Awaitable, Callable
from typing import Any, Generic, Optional, TypeVar, Union

from conditional.exceptions import ConfigurationError, ResolutionError
from conditional.models.config import DEFAULT_CONFIG, FailurePolicy, RenderConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")

Resolvable = Union[T, Awaitable[T]]

_UNSET: Any = object()


class ResolutionStatus(str, enum.Enum):
    """Observable state of an AsyncResolver."""

    IDLE = "idle"
    PENDING = "pending"
    RESOLVED = "resolved"
    FAILED = "failed"

    def __str__(self) -> str:
        return self.value


class AsyncResolver(Generic[T]):
    """Per-instance resolution state for a Resolvable input.

    Args:
        on_update: Called (from the event loop, never inline with
            ``resolve()``) after an awaitable completes and its result
            has been applied.
        config: Failure and logging behavior. Defaults to RenderConfig().
    """

    def __init__(
        self,
        on_update: Callable[[], None] | None = None,
        config: RenderConfig | None = None,
    ) -> None:
        self._on_update = on_update
        self._config = config or DEFAULT_CONFIG
        self._input: Any = _UNSET
        self._value: Optional[T] = None
        self._status = ResolutionStatus.IDLE
        self._error: BaseException | None = None
        self._generation = 0
        self._future: asyncio.Future | None = None
        self._futures: weakref.WeakKeyDictionary = weakref.WeakKeyDictionary()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def status(self) -> ResolutionStatus:
        return self._status

    @property
    def value(self) -> Optional[T]:
        """The resolved value, or None while pending, failed or idle."""
        return self._value

    @property
    def error(self) -> BaseException | None:
        """The exception raised by the current awaitable, if it failed."""
        return self._error

    @property
    def is_pending(self) -> bool:
        return self._status is ResolutionStatus.PENDING

    @property
    def generation(self) -> int:
        return self._generation

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolve(self, value: Resolvable[T]) -> Optional[T]:
        """Return the resolved value for ``value``, or None if not yet available.

        The identical input (by reference) never restarts resolution.

        Raises:
            ConfigurationError: If ``value`` is awaitable and no event loop
                is running.
            ResolutionError: If the awaitable failed and the config's
                ``on_failure`` is FailurePolicy.RAISE.
        """
        if value is not self._input:
            self._start(value)

        if (
            self._status is ResolutionStatus.FAILED
            and self._config.on_failure is FailurePolicy.RAISE
        ):
            raise ResolutionError(self._input, self._error) from self._error
        return self._value

    def _start(self, value: Resolvable[T]) -> None:
        if not inspect.isawaitable(value):
            self._generation += 1
            self._input = value
            self._future = None
            self._error = None
            self._value = value
            self._status = ResolutionStatus.RESOLVED
            return

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            raise ConfigurationError(
                "Resolving an awaitable requires a running event loop"
            ) from None

        self._generation += 1
        self._input = value
        self._error = None
        self._value = None
        self._status = ResolutionStatus.PENDING
        self._future = self._future_for(value, loop)
        self._future.add_done_callback(
            functools.partial(self._on_done, self._generation)
        )
        logger.debug(
            "Scheduled resolution of %s (generation %d)",
            type(value).__name__,
            self._generation,
        )

    def _future_for(
        self, value: Awaitable[T], loop: asyncio.AbstractEventLoop
    ) -> asyncio.Future:
        """Return the future driving ``value``, wrapping it only once.

        A coroutine can be awaited a single time, so an input seen before
        gets its existing Task back instead of a second one.
        """
        try:
            future = self._futures.get(value)
        except TypeError:
            # Not weak-referenceable or unhashable: wrap every time.
            return asyncio.ensure_future(value, loop=loop)
        if future is None:
            future = asyncio.ensure_future(value, loop=loop)
            self._futures[value] = future
        return future

    def _on_done(self, generation: int, future: asyncio.Future) -> None:
        """Completion callback, run by the event loop."""
        if generation != self._generation:
            # Mark the outcome as retrieved so asyncio does not report it.
            if not future.cancelled():
                future.exception()
            if self._config.log_stale:
                logger.debug(
                    "Discarded stale resolution (generation %d, current %d)",
                    generation,
                    self._generation,
                )
            return

        if future.cancelled():
            error: BaseException | None = asyncio.CancelledError()
        else:
            error = future.exception()

        if error is not None:
            self._status = ResolutionStatus.FAILED
            self._error = error
            logger.warning(
                "Resolution failed (generation %d): %s: %s",
                generation,
                type(error).__name__,
                error,
            )
        else:
            self._value = future.result()
            self._status = ResolutionStatus.RESOLVED
            logger.debug("Applied resolution (generation %d)", generation)

        if self._on_update is not None:
            self._on_update()

    def dispose(self) -> None:
        """Retire the current input so in-flight work can no longer apply."""
        self._generation += 1
        self._input = _UNSET
        self._future = None
        self._futures.clear()
        self._value = None
        self._error = None
        self._status = ResolutionStatus.IDLE

    async def settle(self) -> None:
        """Wait until the in-flight awaitable (if any) has been applied."""
        while self._status is ResolutionStatus.PENDING and self._future is not None:
            await asyncio.wait({self._future})
