"""Conditional: declarative conditional-rendering primitives.

If, Maybe, Either and Cond decide what to render from plain or awaited
values. Rendering itself belongs to the caller: primitives only return the
selected renderable, or None for "render nothing".
"""

from conditional._version import __version__

# Primitives
from conditional.components import Cond, Either, If, Maybe, render_if

# Branches and condition entries
from conditional.models.branch import Branch, Delegate, Fixed, as_branch, delegate
from conditional.models.condition import ConditionEntry, Predicate, otherwise, when

# Configuration
from conditional.models.config import FailurePolicy, RenderConfig

# Resolution
from conditional.resolver import AsyncResolver, Resolvable, ResolutionStatus
from conditional.host import RenderHost, render_settled
from conditional.truthy import is_truthy

# Exceptions
from conditional.exceptions import (
    ConditionalError,
    ConfigurationError,
    EitherArityError,
    ResolutionError,
)

__all__ = [
    "__version__",
    # Primitives
    "If",
    "render_if",
    "Maybe",
    "Either",
    "Cond",
    # Branches and condition entries
    "Branch",
    "Fixed",
    "Delegate",
    "as_branch",
    "delegate",
    "ConditionEntry",
    "Predicate",
    "when",
    "otherwise",
    # Configuration
    "FailurePolicy",
    "RenderConfig",
    # Resolution
    "AsyncResolver",
    "Resolvable",
    "ResolutionStatus",
    "RenderHost",
    "render_settled",
    "is_truthy",
    # Exceptions
    "ConditionalError",
    "ConfigurationError",
    "EitherArityError",
    "ResolutionError",
]
