"""Internal helpers for callbackless.

Small functions shared by several modules. Not part of the public API."""

from __future__ import annotations

import typing
from collections.abc import Callable


def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


def null_error_to_data(error: typing.Any) -> None:
    """
    Default fallback for Promise.data() on a failed cell.

    Ignores the error and reports "no data".
    """
    _ = error
    return None


def compose[A, B, C](g: Callable[[B], C], f: Callable[[A], B]) -> Callable[[A], C]:
    """
    Right-to-left composition: compose(g, f)(x) == g(f(x)).

    Used to state the functor and monad laws.
    """

    def composed(x: A) -> C:
        return g(f(x))

    return composed


__all__ = (
    "identity",
    "null_error_to_data",
    "compose",
)
