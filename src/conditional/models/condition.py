"""Condition entries for Cond.

An entry pairs a predicate with fixed content. Predicates are either a
plain value (used for its truthiness) or a callable that receives the
resolved match value.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

M = TypeVar("M")

Predicate = Union[bool, Callable[[M], Any]]


def evaluate_predicate(predicate: Predicate, match: Any) -> bool:
    """Call a callable predicate with the match value, else test it as-is."""
    if callable(predicate):
        return bool(predicate(match))
    return bool(predicate)


@dataclass(frozen=True)
class ConditionEntry(Generic[M]):
    """One (predicate, content) pair in a Cond entry list.

    Order in the list matters: the first entry whose predicate is truthy
    wins and later entries are never evaluated.
    """

    predicate: Predicate
    content: Any = None


def when(predicate: Predicate, content: Any = None) -> ConditionEntry:
    """Shorthand for ``ConditionEntry(predicate, content)``."""
    return ConditionEntry(predicate, content)


def otherwise(content: Any = None) -> ConditionEntry:
    """Unconditional entry, usually placed last as a fallback."""
    return ConditionEntry(True, content)
