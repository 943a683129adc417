"""Conditional exception hierarchy.

All conditional-specific exceptions inherit from ConditionalError.
"""

from __future__ import annotations

from typing import Any


class ConditionalError(Exception):
    """Base exception for all conditional errors."""


class ConfigurationError(ConditionalError):
    """Raised when a primitive is invoked with an invalid configuration.

    Configuration errors are fatal for the render pass that hit them.
    They are raised synchronously and never deferred to a later pass.
    """


class EitherArityError(ConfigurationError):
    """Raised when Either receives a branch count other than two."""

    def __init__(self, count: int | None) -> None:
        self.count = count
        got = "no branches" if count is None else f"{count} branch(es)"
        super().__init__(f"Either requires exactly 2 branches, got {got}")


class ResolutionError(ConditionalError):
    """Raised when a failed awaitable is rendered under FailurePolicy.RAISE.

    The original exception is available as ``__cause__`` and ``cause``.
    """

    def __init__(self, value: Any, cause: BaseException) -> None:
        self.value = value
        self.cause = cause
        super().__init__(
            f"Resolution of {type(value).__name__} failed: "
            f"{type(cause).__name__}: {cause}"
        )
