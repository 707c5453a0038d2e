from .bind import flat_map, join
from .effects import tap, tap_err
from .map import fmap, map_err

__all__ = (
    # Functor
    "fmap",
    "map_err",
    # Monad
    "join",
    "flat_map",
    # Effects
    "tap",
    "tap_err",
)
