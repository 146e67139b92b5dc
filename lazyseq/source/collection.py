"""Collection sources

Build sequences from in-memory collections. Sequences over containers can
be drained any number of times; sequences over one-shot iterators once."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from .._types import Yield, Yield2
from ..seq import Seq, Seq2

def from_iterable[T](items: Iterable[T], /) -> Seq[T]:
    """Emit the items of an iterable, in order."""

    def push(yield_: Yield[T]) -> None:
        for item in items:
            if not yield_(item):
                return

    return Seq(push)

def from_pairs[K, V](pairs: Iterable[tuple[K, V]], /) -> Seq2[K, V]:
    """Emit (key, value) pairs from an iterable of 2-tuples."""

    def push(yield_: Yield2[K, V]) -> None:
        for k, v in pairs:
            if not yield_(k, v):
                return

    return Seq2(push)

def from_mapping[K, V](mapping: Mapping[K, V], /) -> Seq2[K, V]:
    """Emit the items of a mapping in its iteration order."""
    return from_pairs(mapping.items())

def indexed[T](items: Iterable[T], /) -> Seq2[int, T]:
    """Emit (index, item) pairs, counting from zero."""
    return from_pairs(enumerate(items))

__all__ = ("from_iterable", "from_pairs", "from_mapping", "indexed")
