"""Truthiness helpers shared by every primitive.

Falsy values are the Python ones: ``False``, ``None``, zero, and empty
strings or containers. Everything else is truthy.
"""

from __future__ import annotations

from typing import Any


def is_truthy(value: Any) -> bool:
    return bool(value)


def is_empty(children: Any) -> bool:
    """Whether a children argument should be treated as absent."""
    return not children


__all__ = ["is_truthy", "is_empty"]
