"""
Functor combinators
===================

fmap lifts T -> R into Promise[T] -> Promise[R]; map_err is its dual on
the failure channel.
"""

from __future__ import annotations

from collections.abc import Callable

from ..promise import Promise


def fmap[T, R, E](f: Callable[[T], R]) -> Callable[[Promise[T, E]], Promise[R, E]]:
    """
    Lift a function T -> R into Promise[T] -> Promise[R].

    The output succeeds with f(data) when the input succeeds and fails with
    the very same error when the input fails. f runs at most once, inside
    the input's success drain.

    Functor laws:
    - Identity: fmap(identity)(p) ≡ p
    - Composition: fmap(g)(fmap(f)(p)) ≡ fmap(compose(g, f))(p)

    Example:
        double = fmap(lambda x: x * 2)
        double(unit(5)).data()  # 10
    """

    def lifted(source: Promise[T, E]) -> Promise[R, E]:
        target: Promise[R, E] = Promise()
        source.succeed(lambda data: target.resolve_success(f(data)))
        source.fail(target.resolve_failure)
        return target

    return lifted


def map_err[T, E, F](f: Callable[[E], F]) -> Callable[[Promise[T, E]], Promise[T, F]]:
    """
    Lift a function E -> F over the failure channel.

    Success data passes through unchanged.
    """

    def lifted(source: Promise[T, E]) -> Promise[T, F]:
        target: Promise[T, F] = Promise()
        source.succeed(target.resolve_success)
        source.fail(lambda error: target.resolve_failure(f(error)))
        return target

    return lifted


__all__ = ("fmap", "map_err")
