"""
Lifting values into the promise context.

Functions that turn plain values, kungfu Results and exception-raising
code into already-settled Promise cells.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Never

from kungfu import Error, Ok, Result

from ..promise import Promise


def unit[T](value: T) -> Promise[T, Never]:
    """
    Lift a directly available value into an already-succeeded Promise.

    A value known now is a special case of a value known later.

    **When to use:** When you have a plain value and need to feed it into
    combinators that expect promises.

    Example:
        from callbackless import lift as L

        greeting = L.up.unit("hello")
        greeting.data()  # "hello"

    **Grammar:** `L.up.unit(value)` reads as "lift up unit value"
    """
    p: Promise[T, Never] = Promise()
    p.resolve_success(value)
    return p


def failure[E](error: E) -> Promise[Never, E]:
    """
    Create an already-failed Promise. Dual of unit().

    **When to use:** When a step knows up front that it cannot produce data.

    Example:
        from callbackless import lift as L

        missing = L.up.failure(KeyError("user"))
        missing.state()  # State.FAILED
    """
    p: Promise[Never, E] = Promise()
    p.resolve_failure(error)
    return p


def from_result[T, E](value: Result[T, E]) -> Promise[T, E]:
    """
    Lift an already-computed kungfu Result into a settled Promise.

    Ok(v) becomes a succeeded cell, Error(e) a failed one.
    """
    p: Promise[T, E] = Promise()
    match value:
        case Ok(data):
            p.resolve_success(data)
        case Error(error):
            p.resolve_failure(error)
    return p


def catching[T, E](
    thunk: Callable[[], T],
    *,
    on_error: Callable[[Exception], E],
) -> Promise[T, E]:
    """
    Run a sync thunk; exceptions become a failed Promise.

    **When to use:** Bridge between exception-based code and promise
    combinators.

    Example:
        from callbackless import lift as L
        import json

        parsed = L.up.catching(
            lambda: json.loads(raw),
            on_error=lambda e: ParseError(str(e)),
        )

    NOTE: Catches all Exception subclasses. Only the thunk is guarded;
          listeners run later and are not covered.
    """
    p: Promise[T, E] = Promise()
    try:
        value = thunk()
    except Exception as exc:
        p.resolve_failure(on_error(exc))
    else:
        p.resolve_success(value)
    return p


# Shared constants. Settled cells never change, so sharing them is safe.
NONE: Promise[None, Never] = unit(None)
TRUE: Promise[bool, Never] = unit(True)
FALSE: Promise[bool, Never] = unit(False)

__all__ = (
    "unit",
    "failure",
    "from_result",
    "catching",
    "NONE",
    "TRUE",
    "FALSE",
)
