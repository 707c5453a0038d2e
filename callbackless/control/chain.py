"""
Chaining and sequencing
=======================

chain forwards one promise's outcome into another; continue_ runs the
next step once a promise settles, whatever the outcome.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from ..promise import Promise


def chain[T, E](source: Promise[T, E], target: Promise[T, E]) -> None:
    """
    Forward source's eventual outcome into target.

    target must be a fresh pending cell. If it is already settled, the
    forwarding raises InvalidStateError from inside source's drain.
    """
    source.succeed(target.resolve_success)
    source.fail(target.resolve_failure)


def continue_[T, E, R](
    source: Promise[T, E],
    step: Callable[[Promise[T, E]], Promise[R, typing.Any] | None],
) -> Promise[R | None, typing.Any]:
    """
    Run step(source) once source settles, success or failure.

    - step returns a promise: its outcome is chained into the result
    - step returns None: the result succeeds with None

    Sequential composition that does not short-circuit, unlike flat_map.

    Example:
        done = continue_(first_test(), lambda _: second_test())
    """
    target: Promise[R | None, typing.Any] = Promise()

    def on_finish(*_: typing.Any) -> None:
        following = step(source)
        if following is None:
            target.resolve_success(None)
        else:
            chain(following, target)

    source.finish(on_finish)
    return target


__all__ = ("chain", "continue_")
