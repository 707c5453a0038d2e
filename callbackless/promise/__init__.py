"""
Promise cell
============

Promise - single-assignment cell for an eventually-known outcome:
- state machine PENDING -> SUCCEEDED | FAILED
- success / failure / finish listeners
- per-cell Options (error_to_data fallback)
"""

from .cell import Promise
from .options import DEFAULT_OPTIONS, Options

__all__ = (
    "Promise",
    "Options",
    "DEFAULT_OPTIONS",
)
