from .crop import skip_n, skip_until, take_n, take_while
from .higher import concat, flatten, flatten2, flatten_slice
from .pluck import Entry, entries, keys, values
from .transform import empty_values, filter, filter2, map, map2, map12, map21, tap
from .window import deduplicate, pairwise, zip

__all__ = (
    # Cropping
    "take_n",
    "take_while",
    "skip_n",
    "skip_until",
    # Plucking and packing
    "Entry",
    "keys",
    "values",
    "entries",
    # Transforming
    "map",
    "map2",
    "map12",
    "map21",
    "filter",
    "filter2",
    "empty_values",
    "tap",
    # Windows
    "pairwise",
    "zip",
    "deduplicate",
    # Higher order
    "flatten",
    "flatten_slice",
    "flatten2",
    "concat",
)
