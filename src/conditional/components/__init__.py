"""Conditional rendering primitives.

Public API:
    If      -- fixed content when a condition is truthy
    Maybe   -- branch on a (possibly pending) value's truthiness
    Either  -- top branch if top is truthy, else bottom branch
    Cond    -- first entry whose predicate matches a resolved value
"""

from conditional.components.cond import Cond
from conditional.components.either import Either
from conditional.components.guard import If, render_if
from conditional.components.maybe import Maybe

__all__ = [
    "If",
    "render_if",
    "Maybe",
    "Either",
    "Cond",
]
