"""Promise cell

Mutable single-assignment cell holding the eventual outcome of an
asynchronous computation:
- state: PENDING, then exactly one of SUCCEEDED / FAILED
- result slot: kungfu Result (Ok(data) / Error(error)), None while pending
- success / failure / finish listener queues, drained once on settlement

Consumers subscribe with succeed / fail / finish. Producers settle the
cell once with resolve_success / resolve_failure."""

from __future__ import annotations

import dataclasses
import logging
import threading
import typing

from kungfu import Error, Ok, Result

from .._errors import InvalidStateError, NotReadyError
from .._types import ErrorToData, FailureListener, FinishListener, State, SuccessListener
from .options import DEFAULT_OPTIONS, Options

logger = logging.getLogger(__name__)


class Promise[T, E]:
    """Single-assignment promise cell.

    Notification is synchronous and reentrant: settling a cell runs its
    listeners on the caller's stack, and a listener may settle other cells
    before control returns. Listeners of one channel fire in registration
    order, and all success / failure listeners fire before finish listeners.

    Registering on a settled cell invokes the callback immediately; nothing
    is ever queued on a settled cell.

    The state check and mutation are guarded by a lock so producers may
    settle cells from other threads. Listeners always run outside the lock.
    """

    __slots__ = (
        "_result",
        "_options",
        "_lock",
        "_success_listeners",
        "_failure_listeners",
        "_finish_listeners",
    )

    def __init__(
        self,
        *,
        options: Options[T, E] | None = None,
        error_to_data: ErrorToData[E, T] | None = None,
    ) -> None:
        """
        Create a pending cell.

        error_to_data overrides the value carried by options.
        """
        resolved: Options[T, E] = options if options is not None else typing.cast("Options[T, E]", DEFAULT_OPTIONS)
        if error_to_data is not None:
            resolved = dataclasses.replace(resolved, error_to_data=error_to_data)
        self._result: Result[T, E] | None = None
        self._options = resolved
        self._lock = threading.Lock()
        self._success_listeners: list[SuccessListener[T]] = []
        self._failure_listeners: list[FailureListener[E]] = []
        self._finish_listeners: list[FinishListener[T, E]] = []

    # Public interface

    def state(self) -> State:
        """Current state. No side effects."""
        return _state_of(self._result)

    def data(self) -> T:
        """
        Data of a settled cell.

        - PENDING: raises NotReadyError
        - SUCCEEDED: the stored data
        - FAILED: options.error_to_data(error); whatever it raises propagates
        """
        match self._result:
            case None:
                logger.debug("data() read on pending %r", self)
                raise NotReadyError()
            case Ok(value):
                return value
            case Error(error):
                return self._options.error_to_data(error)

    @property
    def options(self) -> Options[T, E]:
        return self._options

    def succeed(self, callback: SuccessListener[T], /) -> Promise[T, E]:
        """
        Register a success listener.

        Invoked with the data when the cell succeeds, immediately if it
        already has. Never invoked if the cell fails. Returns self.
        """
        with self._lock:
            result = self._result
            if result is None:
                self._success_listeners.append(callback)
                return self
        match result:
            case Ok(value):
                callback(value)
            case Error(_):
                pass
        return self

    def fail(self, callback: FailureListener[E], /) -> Promise[T, E]:
        """
        Register a failure listener.

        Invoked with the error when the cell fails, immediately if it
        already has. Never invoked if the cell succeeds. Returns self.
        """
        with self._lock:
            result = self._result
            if result is None:
                self._failure_listeners.append(callback)
                return self
        match result:
            case Error(error):
                callback(error)
            case Ok(_):
                pass
        return self

    def finish(self, callback: FinishListener[T, E], /) -> Promise[T, E]:
        """
        Register a finish listener.

        Invoked with (state, data, error) once the cell settles either way,
        immediately if it already has. Returns self.
        """
        with self._lock:
            result = self._result
            if result is None:
                self._finish_listeners.append(callback)
                return self
        callback(*_triple_of(result))
        return self

    # Producer interface

    def resolve_success(self, data: T, /) -> None:
        """
        Settle the cell with data.

        Raises InvalidStateError unless the cell is pending. Drains the
        success listeners, then the finish listeners.
        """
        self._settle(Ok(data))

    def resolve_failure(self, error: E, /) -> None:
        """
        Settle the cell with error.

        Raises InvalidStateError unless the cell is pending. Drains the
        failure listeners, then the finish listeners.
        """
        self._settle(Error(error))

    def _settle(self, result: Result[T, E]) -> None:
        with self._lock:
            if self._result is not None:
                current = _state_of(self._result)
                logger.debug("second resolve on %r rejected", self)
                raise InvalidStateError(current)
            self._result = result
            success, self._success_listeners = self._success_listeners, []
            failure, self._failure_listeners = self._failure_listeners, []
            finish, self._finish_listeners = self._finish_listeners, []

        state, data, error = _triple_of(result)
        logger.debug("%r -> %s", self, state.value)

        # A listener that raises aborts the rest of the drain.
        match result:
            case Ok(value):
                for on_success in success:
                    on_success(value)
            case Error(err):
                for on_failure in failure:
                    on_failure(err)
        for on_finish in finish:
            on_finish(state, data, error)

    def __repr__(self) -> str:
        return f"<Promise {self.state().value} at {id(self):#x}>"


def _state_of(result: Result[typing.Any, typing.Any] | None) -> State:
    match result:
        case None:
            return State.PENDING
        case Ok(_):
            return State.SUCCEEDED
        case Error(_):
            return State.FAILED
        case _ as unreachable:
            typing.assert_never(unreachable)


def _triple_of[T, E](result: Result[T, E]) -> tuple[State, T | None, E | None]:
    match result:
        case Ok(value):
            return State.SUCCEEDED, value, None
        case Error(error):
            return State.FAILED, None, error
        case _ as unreachable:
            typing.assert_never(unreachable)


__all__ = ("Promise",)
