"""Applicative lift

lift_a combines N independent promises into one, waiting for all of them
to finish.

NOTE: lift_a masks failures. A failed input contributes the value of its
      own error_to_data fallback (None by default) and the combined
      promise always succeeds. fmap / join / flat_map / sequence propagate
      failures instead. The asymmetry is kept on purpose; use sequence()
      when a failed input must fail the whole combination."""

from __future__ import annotations

import inspect
import logging
import threading
import typing
from collections.abc import Callable

from .._types import State
from ..promise import Promise

logger = logging.getLogger(__name__)


def _check_arity(f: Callable[..., typing.Any], count: int) -> None:
    try:
        signature = inspect.signature(f)
    except (TypeError, ValueError):
        # Some builtins expose no signature; the call itself will tell.
        return
    try:
        signature.bind(*range(count))
    except TypeError as exc:
        name = getattr(f, "__qualname__", repr(f))
        raise TypeError(f"lift_a(): {name} cannot be applied to {count} promise(s)") from exc


def lift_a[R](f: Callable[..., R]) -> Callable[..., Promise[R, typing.Never]]:
    """
    Lift f(T1, ..., Tn) -> R into (Promise[T1], ..., Promise[Tn]) -> Promise[R].

    The lifted function registers a finish listener on every input and
    counts inputs reaching a terminal state. Once all N have, the result
    succeeds with f applied to every input's data() in input order.
    Raises TypeError right away when f's signature cannot take N arguments.

    With no inputs the result succeeds with f() immediately.

    Example:
        add = lift_a(lambda a, b: a + b)
        add(unit(1), unit(2)).data()  # 3
    """

    def lifted(*promises: Promise[typing.Any, typing.Any]) -> Promise[R, typing.Never]:
        _check_arity(f, len(promises))
        target: Promise[R, typing.Never] = Promise()
        inputs = tuple(promises)
        total = len(inputs)
        if total == 0:
            target.resolve_success(f())
            return target

        lock = threading.Lock()
        finished = 0

        def on_finish(state: State, data: typing.Any, error: typing.Any) -> None:
            nonlocal finished
            if state is State.FAILED:
                logger.debug("lift_a input failed with %r, using its fallback data", error)
            with lock:
                finished += 1
                complete = finished == total
            if complete:
                target.resolve_success(f(*(p.data() for p in inputs)))

        for p in inputs:
            p.finish(on_finish)
        return target

    return lifted


__all__ = ("lift_a",)
