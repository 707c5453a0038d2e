from .chain import chain, continue_
from .outcome import get_error, is_failure, is_success

__all__ = (
    # Chaining
    "chain",
    "continue_",
    # Inspection
    "is_success",
    "is_failure",
    "get_error",
)
