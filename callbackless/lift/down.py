"""
Lowering a promise back to a value.

Functions that read a settled Promise as a kungfu Result or a plain value,
and a coroutine that waits for a pending one on an asyncio loop.
"""

from __future__ import annotations

import asyncio
import logging
import typing

from kungfu import Error, Ok, Result

from .._errors import NotReadyError
from .._types import State
from ..promise import Promise

logger = logging.getLogger(__name__)


def to_result[T, E](promise: Promise[T, E]) -> Result[T, E]:
    """
    Read a settled Promise as Result.

    **When to use:** Pattern matching on the outcome of a cell instead of
    registering listeners.

    Example:
        from callbackless import lift as L

        match L.down.to_result(user):
            case Ok(u):
                ...
            case Error(e):
                ...

    NOTE: Raises NotReadyError while the cell is pending.
    """
    if promise.state() is State.PENDING:
        raise NotReadyError()
    result: Result[T, E] | None = None

    def capture(state: State, data: T | None, error: E | None) -> None:
        nonlocal result
        result = Ok(data) if state is State.SUCCEEDED else Error(error)  # type: ignore[arg-type]

    # settled cells never queue, so capture runs right here
    promise.finish(capture)
    return typing.cast("Result[T, E]", result)


def or_else[T, E](promise: Promise[T, E], default: T) -> T:
    """
    Data of a succeeded Promise, default if it failed.

    Unlike Promise.data() this ignores the cell's error_to_data fallback.
    Raises NotReadyError while the cell is pending.
    """
    match to_result(promise):
        case Ok(v):
            return v
        case Error(_):
            return default


async def wait[T, E](promise: Promise[T, E]) -> Result[T, E]:
    """
    Wait for the Promise to settle and return its Result.

    The cell may be settled from any thread; completion is handed to the
    running loop with call_soon_threadsafe. If the waiter is cancelled or its
    loop has closed by then, the outcome is dropped and the producer is
    unaffected.

    Example:
        result = await L.down.wait(download)
    """
    loop = asyncio.get_running_loop()
    future: asyncio.Future[Result[T, E]] = loop.create_future()

    def complete(result: Result[T, E]) -> None:
        if not future.done():
            future.set_result(result)

    def on_finish(state: State, data: T | None, error: E | None) -> None:
        result: Result[T, E] = Ok(data) if state is State.SUCCEEDED else Error(error)  # type: ignore[arg-type]
        if loop.is_closed():
            logger.debug("wait() loop closed before %r settled", promise)
            return
        try:
            loop.call_soon_threadsafe(complete, result)
        except RuntimeError:
            # closed between the check and the call
            logger.debug("wait() loop closed before %r settled", promise)

    promise.finish(on_finish)
    return await future


__all__ = (
    "to_result",
    "or_else",
    "wait",
)
