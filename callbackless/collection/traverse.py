"""Traverse combinators

Monadic traverse over hot promises: every handler runs up front, the
combined promise settles as the individual ones do."""

from __future__ import annotations

import threading
from collections.abc import Callable, Sequence

from ..promise import Promise


def traverse[A, T, E](
    items: Sequence[A],
    handler: Callable[[A], Promise[T, E]],
) -> Promise[list[T], E]:
    """
    Monadic map: A -> Promise[T] over items, collected into Promise[list[T]].

    - All succeed: data in item order
    - Any fails: fails with the first error to arrive; later outcomes
      are ignored

    Empty items succeed with [] immediately.
    """
    promises = [handler(item) for item in items]
    target: Promise[list[T], E] = Promise()
    if not promises:
        target.resolve_success([])
        return target

    lock = threading.Lock()
    values: list[T | None] = [None] * len(promises)
    remaining = len(promises)
    settled = False

    def on_success(index: int, data: T) -> None:
        nonlocal remaining, settled
        with lock:
            if settled:
                return
            values[index] = data
            remaining -= 1
            if remaining:
                return
            settled = True
        target.resolve_success(values)  # type: ignore[arg-type]

    def on_failure(error: E) -> None:
        nonlocal settled
        with lock:
            if settled:
                return
            settled = True
        target.resolve_failure(error)

    for index, p in enumerate(promises):
        p.succeed(lambda data, index=index: on_success(index, data))
        p.fail(on_failure)
    return target


__all__ = ("traverse",)
