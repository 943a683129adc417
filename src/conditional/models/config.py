"""Configuration models for conditional rendering.

RenderConfig holds the settings shared by every primitive and by the
RenderHost that drives them.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel


class FailurePolicy(str, enum.Enum):
    """What a primitive does when its awaitable fails.

    EMPTY keeps the value permanently unresolved (nothing is rendered).
    RAISE surfaces a ResolutionError on the next render of the same input.
    """

    EMPTY = "empty"
    RAISE = "raise"


class RenderConfig(BaseModel):
    """Per-host (or per-primitive) configuration."""

    model_config = {"frozen": True}

    on_failure: FailurePolicy = FailurePolicy.EMPTY
    log_stale: bool = True


DEFAULT_CONFIG = RenderConfig()
