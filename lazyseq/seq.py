"""Seq / Seq2

Lazy push sequences:
- Seq[T] wraps push(yield_) where yield_(value) -> bool
- Seq2[K, V] wraps push(yield_) where yield_(key, value) -> bool

Calling a sequence runs its push loop directly. Iterating it with `for`
goes through a pull cursor (see pull.py), so ordinary Python code can
consume it and `break` out safely.

Fluent methods mirror the functions in ops/ and to/."""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable, Iterator, Mapping

from ._types import Predicate, Predicate2, PushFn, PushFn2, SupportsLessThan, Transformer, Yield, Yield2
from .pull import pull, pull2

if typing.TYPE_CHECKING:
    from .ops.pluck import Entry

class Seq[T]:
    """Lazy push sequence of T.

    A Seq holds no resources: every call (or `for` loop) replays the
    underlying push function from the start. Sequences built over one-shot
    iterators can therefore only be drained once.
    """

    __slots__ = ("_push",)

    def __init__(self, push: PushFn[T], /) -> None:
        """Create Seq from a push function."""
        self._push = push

    def __call__(self, yield_: Yield[T], /) -> None:
        """Run the push loop, handing each element to yield_ until it returns False."""
        self._push(yield_)

    def __iter__(self) -> Iterator[T]:
        """
        Iterate through a pull cursor.

        A `for` loop that finishes or breaks releases the producer thread at
        once. An iterator that is partly consumed and kept alive
        (`it = iter(seq); next(it)`) holds a parked producer until it is
        closed or garbage collected; call `it.close()`, or use
        `with pull(seq) as cursor:` for deterministic release.
        """
        with pull(self._push) as cursor:
            yield from cursor

    # Constructors

    @staticmethod
    def of[V](*items: V) -> Seq[V]:
        """Sequence over the given items."""
        from .source.collection import from_iterable
        return from_iterable(items)

    @staticmethod
    def from_iterable[V](items: Iterable[V], /) -> Seq[V]:
        """Sequence over any iterable."""
        from .source.collection import from_iterable
        return from_iterable(items)

    @staticmethod
    def empty[V]() -> Seq[V]:
        """Sequence that yields nothing."""

        def push(_: Yield[V]) -> None:
            return

        return Seq(push)

    # Transformations

    def map[U](self, f: Callable[[T], U], /) -> Seq[U]:
        from .ops.transform import map as map_
        return map_(self, f)

    def filter(self, predicate: Predicate[T], /) -> Seq[T]:
        from .ops.transform import filter as filter_
        return filter_(self, predicate)

    def tap(self, peek: Callable[[T], None], /) -> Seq[T]:
        from .ops.transform import tap
        return tap(self, peek)

    def map12[K, V](self, f: Callable[[T], tuple[K, V]], /) -> Seq2[K, V]:
        from .ops.transform import map12
        return map12(self, f)

    def take(self, n: int, /) -> Seq[T]:
        from .ops.crop import take_n
        return take_n(self, n)

    def take_while(self, predicate: Predicate[T], /) -> Seq[T]:
        from .ops.crop import take_while
        return take_while(self, predicate)

    def skip(self, n: int, /) -> Seq[T]:
        from .ops.crop import skip_n
        return skip_n(self, n)

    def skip_until(self, predicate: Predicate[T], /) -> Seq[T]:
        from .ops.crop import skip_until
        return skip_until(self, predicate)

    def pairwise(self) -> Seq2[T, T]:
        from .ops.window import pairwise
        return pairwise(self)

    def zip[V](self, other: PushFn[V], /) -> Seq2[T, V]:
        from .ops.window import zip as zip_
        return zip_(self, other)

    def deduplicate(self) -> Seq[T]:
        from .ops.window import deduplicate
        return deduplicate(self)

    def concat(self, *others: PushFn[T]) -> Seq[T]:
        from .ops.higher import concat
        return concat(self, *others)

    def pipe[U](self, *stages: Transformer[typing.Any, typing.Any]) -> Seq[U]:
        """Apply sequence transformers left to right (see meta)."""
        from .meta import pipe
        return pipe(self, *stages)

    # Terminal operations

    def first(self, predicate: Predicate[T], /) -> tuple[T | None, bool]:
        from .to.consume import first
        return first(self, predicate)

    def contains(self, predicate: Predicate[T], /) -> bool:
        from .to.consume import contains
        return contains(self, predicate)

    def count(self) -> int:
        from .to.consume import count
        return count(self)

    def reduce[A](self, initial: A, step: Callable[[A, T], tuple[A, bool]], /) -> A:
        from .to.consume import reduce
        return reduce(self, initial, step)

    def min[O: SupportsLessThan](self: Seq[O]) -> tuple[O | None, bool]:
        from .to.consume import min as min_
        return min_(self)

    def max[O: SupportsLessThan](self: Seq[O]) -> tuple[O | None, bool]:
        from .to.consume import max as max_
        return max_(self)

    def to_list(self) -> list[T]:
        from .to.consume import collect
        return collect(self)


class Seq2[K, V]:
    """Lazy push sequence of (K, V) pairs. Iterating yields 2-tuples."""

    __slots__ = ("_push",)

    def __init__(self, push: PushFn2[K, V], /) -> None:
        """Create Seq2 from a paired push function."""
        self._push = push

    def __call__(self, yield_: Yield2[K, V], /) -> None:
        self._push(yield_)

    def __iter__(self) -> Iterator[tuple[K, V]]:
        """Iterate pairs through a pull cursor; see Seq.__iter__ on release."""
        with pull2(self._push) as cursor:
            yield from cursor

    # Constructors

    @staticmethod
    def from_pairs[A, B](pairs: Iterable[tuple[A, B]], /) -> Seq2[A, B]:
        from .source.collection import from_pairs
        return from_pairs(pairs)

    @staticmethod
    def from_mapping[A, B](mapping: Mapping[A, B], /) -> Seq2[A, B]:
        from .source.collection import from_mapping
        return from_mapping(mapping)

    # Transformations

    def keys(self) -> Seq[K]:
        from .ops.pluck import keys
        return keys(self)

    def values(self) -> Seq[V]:
        from .ops.pluck import values
        return values(self)

    def entries(self) -> Seq[Entry[K, V]]:
        from .ops.pluck import entries
        return entries(self)

    def map[K2, V2](self, f: Callable[[K, V], tuple[K2, V2]], /) -> Seq2[K2, V2]:
        from .ops.transform import map2
        return map2(self, f)

    def map21[T](self, f: Callable[[K, V], T], /) -> Seq[T]:
        from .ops.transform import map21
        return map21(self, f)

    def filter(self, predicate: Predicate2[K, V], /) -> Seq2[K, V]:
        from .ops.transform import filter2
        return filter2(self, predicate)

    # Terminal operations

    def to_list(self) -> list[tuple[K, V]]:
        from .to.consume import collect2
        return collect2(self)

    def to_dict(self) -> dict[K, V]:
        """Collect pairs into a dict; later keys overwrite earlier ones."""
        return dict(self.to_list())


__all__ = ("Seq", "Seq2")
