"""
Core type definitions for lazyseq.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

# ============================================================================
# Callback shapes
# ============================================================================

# Yield = per-element acceptance callback; False asks the producer to stop
type Yield[T] = Callable[[T], bool]

# Yield2 = acceptance callback for paired sequences
type Yield2[K, V] = Callable[[K, V], bool]

# ============================================================================
# Push functions
# ============================================================================

# PushFn = the raw producer wrapped by Seq
# NOTE: a PushFn must return as soon as yield_ returns False and never call
#       yield_ again afterwards.
type PushFn[T] = Callable[[Yield[T]], None]

# PushFn2 = the raw producer wrapped by Seq2
type PushFn2[K, V] = Callable[[Yield2[K, V]], None]

# ============================================================================
# Predicates and selectors
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Predicate2 = function that tests a pair
type Predicate2[K, V] = Callable[[K, V], bool]

# SupportsLessThan = ordering capability required by min/max
class SupportsLessThan(typing.Protocol):
    def __lt__(self, other: typing.Any, /) -> bool: ...

# Transformer = function from one sequence to another (see meta)
type Transformer[A, B] = Callable[[A], B]

__all__ = (
    "Yield",
    "Yield2",
    "PushFn",
    "PushFn2",
    "Predicate",
    "Predicate2",
    "SupportsLessThan",
    "Transformer",
)
