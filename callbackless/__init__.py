"""
Callbackless: a promise monad for composing asynchronous computations.

A Promise is a single-assignment cell that eventually succeeds with data
or fails with an error. Combinators build new promises wired to existing
ones, so call sites compose values instead of passing callbacks.

Architecture:
- promise     - the cell: state machine, listeners, per-cell Options
- lift        - unit / failure / kungfu Result bridge (L.up.*, L.down.*)
- transform   - fmap, map_err, join, flat_map, tap, tap_err
- collection  - lift_a (failure-masking), sequence, traverse (failure-propagating)
- control     - chain, continue_, is_success, is_failure, get_error

Notification is synchronous: settling a promise runs its listeners on the
caller's stack. Producers (timers, sockets, threads) settle cells through
Promise.resolve_success / Promise.resolve_failure.
"""

# Core types
from ._types import ErrorToData, FailureListener, FinishListener, State, SuccessListener

# Errors
from ._errors import InvalidStateError, NotReadyError, PromiseError

# Promise cell
from . import promise
from .promise import Options, Promise

# Lift helpers
from . import lift
from .lift import FALSE, NONE, TRUE, catching, failure, from_result, or_else, to_result, unit, wait

# Functor / monad
from .transform import flat_map, fmap, join, map_err, tap, tap_err

# Collections
from .collection import lift_a, sequence, traverse

# Control flow
from .control import chain, continue_, get_error, is_failure, is_success

__all__ = (
    # Types
    "State",
    "SuccessListener",
    "FailureListener",
    "FinishListener",
    "ErrorToData",
    # Errors
    "PromiseError",
    "NotReadyError",
    "InvalidStateError",
    # Promise
    "promise",
    "Promise",
    "Options",
    # Lift
    "lift",
    "unit",
    "failure",
    "from_result",
    "catching",
    "to_result",
    "or_else",
    "wait",
    "NONE",
    "TRUE",
    "FALSE",
    # Transform
    "fmap",
    "map_err",
    "join",
    "flat_map",
    "tap",
    "tap_err",
    # Collection
    "lift_a",
    "sequence",
    "traverse",
    # Control
    "chain",
    "continue_",
    "is_success",
    "is_failure",
    "get_error",
)
