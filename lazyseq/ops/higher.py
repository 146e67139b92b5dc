"""Higher order operators

Flatten nested sequences into one layer. A stop from the consumer ends
both the inner and the outer loop."""

from __future__ import annotations

from collections.abc import Iterable

from .._helpers import forward
from .._types import PushFn, PushFn2, Yield, Yield2
from ..seq import Seq, Seq2

def flatten[T](src: PushFn[PushFn[T]]) -> Seq[T]:
    """Emit every value of every inner sequence, in order."""

    def push(yield_: Yield[T]) -> None:
        src(lambda inner: forward(inner, yield_))

    return Seq(push)

def flatten_slice[T](src: PushFn[Iterable[T]]) -> Seq[T]:
    """Like flatten, for a sequence of plain iterables (lists, tuples, ...)."""

    def push(yield_: Yield[T]) -> None:
        def accept(items: Iterable[T]) -> bool:
            for t in items:
                if not yield_(t):
                    return False
            return True

        src(accept)

    return Seq(push)

def flatten2[K, V](src: PushFn2[K, PushFn[V]]) -> Seq2[K, V]:
    """
    Flatten a Seq2 of inner sequences.

    The key of each inner sequence is repeated for every value it emits:
    (0, [1, 2]), (1, [3]) -> (0, 1), (0, 2), (1, 3).
    """

    def push(yield_: Yield2[K, V]) -> None:
        def accept(k: K, inner: PushFn[V]) -> bool:
            return forward(inner, lambda v: yield_(k, v))

        src(accept)

    return Seq2(push)

def concat[T](*srcs: PushFn[T]) -> Seq[T]:
    """Emit all values of the given sources, one source after the other."""

    def push(yield_: Yield[T]) -> None:
        for src in srcs:
            if not forward(src, yield_):
                return

    return Seq(push)

__all__ = ("flatten", "flatten_slice", "flatten2", "concat")
