"""
lazyseq - lazy sequence combinators built on push sequences.

A push sequence is a function that receives a callback and calls it once
per element until the elements run out or the callback returns False.
Operators wrap sequences into new sequences; consumers drain them.

Architecture:
- Seq / Seq2 wrap push functions and add fluent methods (seq.py)
- pull() adapts a push sequence into a next/close cursor (pull.py)
- ops/ holds the operators; the lookahead ones are built on pull()
- to/ drains sequences into values or channels
- source/ builds sequences from collections, channels, text and directories
"""

__version__ = "0.1.0"

# Core types
from ._types import Predicate, Predicate2, PushFn, PushFn2, SupportsLessThan, Transformer, Yield, Yield2
from .seq import Seq, Seq2

# Errors
from ._errors import ChannelClosedError, ContinuedIterationError, LineTooLongError

# Pull cursors
from .pull import Cursor, Cursor2, pull, pull2

# Concurrency primitives
from .cancel import CancelToken
from .channel import Channel

# Operators
from .ops import (
    # Cropping
    skip_n,
    skip_until,
    take_n,
    take_while,
    # Plucking and packing
    Entry,
    entries,
    keys,
    values,
    # Transforming
    empty_values,
    filter,
    filter2,
    map,
    map2,
    map12,
    map21,
    tap,
    # Windows
    deduplicate,
    pairwise,
    zip,
    # Higher order
    concat,
    flatten,
    flatten2,
    flatten_slice,
)

# Consumers, sources and composition helpers
from . import meta, source, to

__all__ = (
    "__version__",
    # Core types
    "Predicate",
    "Predicate2",
    "PushFn",
    "PushFn2",
    "Seq",
    "Seq2",
    "SupportsLessThan",
    "Transformer",
    "Yield",
    "Yield2",
    # Errors
    "ChannelClosedError",
    "ContinuedIterationError",
    "LineTooLongError",
    # Pull cursors
    "Cursor",
    "Cursor2",
    "pull",
    "pull2",
    # Concurrency primitives
    "CancelToken",
    "Channel",
    # Operators
    "skip_n",
    "skip_until",
    "take_n",
    "take_while",
    "Entry",
    "entries",
    "keys",
    "values",
    "empty_values",
    "filter",
    "filter2",
    "map",
    "map2",
    "map12",
    "map21",
    "tap",
    "deduplicate",
    "pairwise",
    "zip",
    "concat",
    "flatten",
    "flatten2",
    "flatten_slice",
    # Modules
    "meta",
    "source",
    "to",
)
