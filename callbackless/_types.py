"""
Core type definitions for callbackless.

Types and aliases used across the library.
"""

from __future__ import annotations

import enum
import typing
from collections.abc import Callable

# ============================================================================
# Cell state
# ============================================================================


class State(enum.Enum):
    """Lifecycle of a promise cell. Leaves PENDING at most once."""

    PENDING = "PENDING"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"

    @property
    def is_terminal(self) -> bool:
        return self is not State.PENDING


# ============================================================================
# Type aliases
# ============================================================================

# SuccessListener = callback fed with the success value
type SuccessListener[T] = Callable[[T], typing.Any]

# FailureListener = callback fed with the failure value
type FailureListener[E] = Callable[[E], typing.Any]

# FinishListener = callback fed with the final (state, data, error) triple
type FinishListener[T, E] = Callable[[State, T | None, E | None], typing.Any]

# ErrorToData = fallback used by Promise.data() on a failed cell
type ErrorToData[E, T] = Callable[[E], T]

__all__ = (
    "State",
    "SuccessListener",
    "FailureListener",
    "FinishListener",
    "ErrorToData",
)
