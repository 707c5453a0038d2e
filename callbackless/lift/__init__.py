"""
Lift helpers with semantic namespaces.

Supports two import styles:
    from callbackless import lift as L   # Recommended
    from callbackless import lift        # Explicit

Architecture:
- L.up.*    - lifting values into settled promises
- L.down.*  - reading promises back as Result / values

Examples:
    from callbackless import lift as L

    # Lifting
    user = L.up.unit(User(id=42))
    error = L.up.failure(NotFoundError())
    parsed = L.up.catching(lambda: int(raw), on_error=str)

    # Lowering
    result = L.down.to_result(user)       # Ok(User(id=42))
    value = L.down.or_else(error, None)   # None
    result = await L.down.wait(pending)   # waits on the running loop
"""

from __future__ import annotations

from . import down, up

# Most common functions in root for easy access
from .down import or_else, to_result, wait
from .up import FALSE, NONE, TRUE, catching, failure, from_result, unit

__all__ = (
    # Namespaces (L.up.*, L.down.*)
    "up",
    "down",
    # Up
    "unit",
    "failure",
    "from_result",
    "catching",
    "NONE",
    "TRUE",
    "FALSE",
    # Down
    "to_result",
    "or_else",
    "wait",
)
