from .apply import lift_a
from .sequence import sequence
from .traverse import traverse

__all__ = (
    "lift_a",
    "sequence",
    "traverse",
)
