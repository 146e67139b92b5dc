"""Transforming operators

Single pass: every operator here runs the source's push loop directly,
never reads ahead, and stops the source as soon as the consumer stops."""

from __future__ import annotations

from collections.abc import Callable

from .._types import Predicate, Predicate2, PushFn, PushFn2, Yield, Yield2
from ..seq import Seq, Seq2

def map[T, V](src: PushFn[T], fn: Callable[[T], V]) -> Seq[V]:
    """Apply fn to every item until src is exhausted or the consumer stops."""

    def push(yield_: Yield[V]) -> None:
        src(lambda t: yield_(fn(t)))

    return Seq(push)

def map2[K1, V1, K2, V2](
    src: PushFn2[K1, V1],
    fn: Callable[[K1, V1], tuple[K2, V2]],
) -> Seq2[K2, V2]:
    """Like map, for pairs. fn returns the new (key, value)."""

    def push(yield_: Yield2[K2, V2]) -> None:
        def accept(k: K1, v: V1) -> bool:
            k2, v2 = fn(k, v)
            return yield_(k2, v2)

        src(accept)

    return Seq2(push)

def map12[T, K, V](src: PushFn[T], fn: Callable[[T], tuple[K, V]]) -> Seq2[K, V]:
    """Like map, turning a Seq into a Seq2."""

    def push(yield_: Yield2[K, V]) -> None:
        def accept(t: T) -> bool:
            k, v = fn(t)
            return yield_(k, v)

        src(accept)

    return Seq2(push)

def map21[K, V, T](src: PushFn2[K, V], fn: Callable[[K, V], T]) -> Seq[T]:
    """Like map, turning a Seq2 into a Seq."""

    def push(yield_: Yield[T]) -> None:
        src(lambda k, v: yield_(fn(k, v)))

    return Seq(push)

def filter[T](src: PushFn[T], predicate: Predicate[T]) -> Seq[T]:
    """Emit the items predicate returns True for."""

    def push(yield_: Yield[T]) -> None:
        def accept(t: T) -> bool:
            if not predicate(t):
                return True
            return yield_(t)

        src(accept)

    return Seq(push)

def filter2[K, V](src: PushFn2[K, V], predicate: Predicate2[K, V]) -> Seq2[K, V]:
    """Like filter, for pairs."""

    def push(yield_: Yield2[K, V]) -> None:
        def accept(k: K, v: V) -> bool:
            if not predicate(k, v):
                return True
            return yield_(k, v)

        src(accept)

    return Seq2(push)

def empty_values[T](src: PushFn[T]) -> Seq2[T, None]:
    """
    Promote src to a Seq2 whose values are all None.

    Handy for consumers that require pairs but only care about keys,
    e.g. building a set-like dict.
    """
    return map12(src, lambda t: (t, None))

def tap[T](src: PushFn[T], peek: Callable[[T], None]) -> Seq[T]:
    """
    Call peek for every item just before it is forwarded.

    peek must not modify or keep a reference to what it observes. Items
    the consumer never asks for are never observed.
    """

    def push(yield_: Yield[T]) -> None:
        def accept(t: T) -> bool:
            peek(t)
            return yield_(t)

        src(accept)

    return Seq(push)

__all__ = (
    "map",
    "map2",
    "map12",
    "map21",
    "filter",
    "filter2",
    "empty_values",
    "tap",
)
