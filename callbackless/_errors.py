from __future__ import annotations

from ._types import State


class PromiseError(Exception):
    """Contract fault raised by a promise cell."""


class NotReadyError(PromiseError):
    """data() was read from a cell that is still pending."""

    def __init__(self) -> None:
        super().__init__("The promise is in PENDING state")


class InvalidStateError(PromiseError):
    """A resolve entry point was called on a cell that already settled."""

    state: State

    def __init__(self, state: State) -> None:
        self.state = state
        super().__init__(f"The promise is not in PENDING state (state={state.value})")


__all__ = ("InvalidStateError", "NotReadyError", "PromiseError")
