"""
Monad combinators
=================

join flattens Promise[Promise[T]]; flat_map is join after fmap.
"""

from __future__ import annotations

from collections.abc import Callable

from ..promise import Promise
from .map import fmap


def join[T, E](nested: Promise[Promise[T, E], E]) -> Promise[T, E]:
    """
    Flatten a promise of promise into a promise.

    - Outer succeeds with inner q: the result mirrors q's outcome
    - Outer fails: the result fails with the outer error; no inner
      promise is consulted
    """
    target: Promise[T, E] = Promise()

    def on_outer(inner: Promise[T, E]) -> None:
        if not isinstance(inner, Promise):
            raise TypeError(f"join() expected a Promise inside a Promise, got {type(inner).__name__}")
        inner.succeed(target.resolve_success)
        inner.fail(target.resolve_failure)

    nested.succeed(on_outer)
    nested.fail(target.resolve_failure)
    return target


def flat_map[T, R, E](f: Callable[[T], Promise[R, E]]) -> Callable[[Promise[T, E]], Promise[R, E]]:
    """
    Lift a function T -> Promise[R] into Promise[T] -> Promise[R].

    Monadic bind with the arguments flipped: join ∘ fmap(f). Short-circuits
    on failure, f is never called for a failed input.

    Monad laws:
    - Left identity: flat_map(f)(unit(x)) ≡ f(x)
    - Right identity: flat_map(unit)(m) ≡ m
    - Associativity: flat_map(g)(flat_map(f)(m)) ≡ flat_map(lambda x: flat_map(g)(f(x)))(m)
    """
    to_nested = fmap(f)

    def lifted(source: Promise[T, E]) -> Promise[R, E]:
        return join(to_nested(source))

    return lifted


__all__ = ("join", "flat_map")
