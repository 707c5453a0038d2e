"""Sequence combinators

Structure flipping: [Promise[T]] -> Promise[[T]]."""

from __future__ import annotations

from collections.abc import Sequence

from .._helpers import identity
from ..promise import Promise
from .traverse import traverse


def sequence[T, E](promises: Sequence[Promise[T, E]]) -> Promise[list[T], E]:
    """
    Flip structure: [Promise[T]] -> Promise[[T]].

    Implemented as traverse(id). Failure-propagating counterpart of lift_a.
    """
    return traverse(promises, handler=identity)


__all__ = ("sequence",)
