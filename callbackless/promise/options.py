"""
Options - per-cell configuration
================================
"""

from __future__ import annotations

from dataclasses import dataclass

from .._helpers import null_error_to_data
from .._types import ErrorToData


@dataclass(frozen=True, slots=True)
class Options[T, E]:
    """
    Configuration shared by one or more promise cells.

    error_to_data: fallback used by Promise.data() when the cell failed.
        Defaults to a function returning None. It may raise when no
        meaningful data can stand in for the error; the exception reaches
        whoever called data().

    Example:
        def no_fallback(error: Exception) -> str:
            raise LookupError("no data") from error

        strict = Options(error_to_data=no_fallback)
        p = Promise(options=strict)
    """

    error_to_data: ErrorToData[E, T] = null_error_to_data


DEFAULT_OPTIONS: Options[object, object] = Options()

__all__ = ("Options", "DEFAULT_OPTIONS")
