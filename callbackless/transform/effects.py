"""Side effects combinators

Effects execute for observation only (logging, metrics, debugging)
and don't change the outcome passed downstream."""

from __future__ import annotations

from collections.abc import Callable

from ..promise import Promise


def tap[T, E](effect: Callable[[T], None]) -> Callable[[Promise[T, E]], Promise[T, E]]:
    """Run effect on success data, pass the outcome through."""

    def lifted(source: Promise[T, E]) -> Promise[T, E]:
        target: Promise[T, E] = Promise(options=source.options)

        def on_success(data: T) -> None:
            effect(data)
            target.resolve_success(data)

        source.succeed(on_success)
        source.fail(target.resolve_failure)
        return target

    return lifted


def tap_err[T, E](effect: Callable[[E], None]) -> Callable[[Promise[T, E]], Promise[T, E]]:
    """Run effect on the error, pass the outcome through."""

    def lifted(source: Promise[T, E]) -> Promise[T, E]:
        target: Promise[T, E] = Promise(options=source.options)

        def on_failure(error: E) -> None:
            effect(error)
            target.resolve_failure(error)

        source.succeed(target.resolve_success)
        source.fail(on_failure)
        return target

    return lifted


__all__ = ("tap", "tap_err")
